"""Rewrites the visible text of an HTML document using BeautifulSoup."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from faleproxy.domain import replace

TextReplacer = Callable[[str], str]

# Elements whose strings are not rendered as page text.
_SKIPPED_PARENTS = frozenset(
    {"head", "script", "style", "template", "noscript", "textarea"}
)
_NON_TEXT_NODES = (CData, Comment, Declaration, Doctype, ProcessingInstruction)


@dataclass(frozen=True)
class RewrittenDocument:
    """HTML serializado e título após a substituição."""

    content: str
    title: str


def rewrite_html(html: str, replacer: TextReplacer = replace) -> RewrittenDocument:
    """Apply ``replacer`` to the visible text and the title of ``html``.

    Attributes such as ``href``, ``src`` or ``alt`` are never touched. Text
    nodes are collected before any of them is replaced so the tree is not
    modified while it is being traversed.
    """

    soup = BeautifulSoup(html or "", "html.parser")
    root: Tag = soup.body or soup

    pending: List[Tuple[NavigableString, str]] = []
    for node in _visible_text_nodes(root):
        original = str(node)
        updated = replacer(original)
        if updated != original:
            pending.append((node, updated))

    for node, updated in pending:
        node.replace_with(updated)

    title = _rewrite_title(soup, replacer)
    return RewrittenDocument(content=str(soup), title=title)


def _visible_text_nodes(root: Tag) -> List[NavigableString]:
    nodes: List[NavigableString] = []
    for node in root.descendants:
        if not isinstance(node, NavigableString) or isinstance(node, _NON_TEXT_NODES):
            continue
        if any(parent.name in _SKIPPED_PARENTS for parent in node.parents):
            continue
        nodes.append(node)
    return nodes


def _find_page_title(soup: BeautifulSoup) -> Tag | None:
    if soup.head is not None:
        title_tag = soup.head.find("title")
        if title_tag is not None:
            return title_tag
    # <title> inside inline SVG labels the graphic, not the page
    for title_tag in soup.find_all("title"):
        if title_tag.find_parent("svg") is None:
            return title_tag
    return None


def _rewrite_title(soup: BeautifulSoup, replacer: TextReplacer) -> str:
    title_tag = _find_page_title(soup)
    if title_tag is None:
        return ""
    original = title_tag.get_text()
    updated = replacer(original)
    if updated != original:
        title_tag.string = updated
    return updated


__all__ = ["RewrittenDocument", "TextReplacer", "rewrite_html"]
