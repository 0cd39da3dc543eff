from __future__ import annotations

import pytest


SAMPLE_HTML_WITH_YALE = """<!DOCTYPE html>
<html>
<head>
  <title>Yale University Test Page</title>
  <meta name="description" content="Yale University home">
</head>
<body>
  <header>
    <h1>Welcome to Yale University</h1>
    <nav>
      <ul>
        <li><a href="https://www.yale.edu/about">About Yale</a></li>
        <li><a href="https://www.yale.edu/admissions">Yale Admissions</a></li>
      </ul>
    </nav>
  </header>
  <main>
    <p>Yale University is a private Ivy League research university in New Haven, Connecticut.</p>
    <p>Yale was founded in 1701 as the Collegiate School.</p>
    <img src="https://www.yale.edu/images/logo.png" alt="Yale Logo">
    <p>Contact us at <a href="mailto:info@yale.edu">info@yale.edu</a></p>
    <!-- Yale comment -->
    <script>var yaleCampus = "Yale";</script>
  </main>
</body>
</html>
"""


@pytest.fixture
def sample_html() -> str:
    return SAMPLE_HTML_WITH_YALE
