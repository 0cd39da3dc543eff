"""Case-preserving replacement of a word inside free text."""
from __future__ import annotations

import re
from typing import Any


class WordReplacer:
    """Replaces every occurrence of ``source`` by ``target`` keeping its casing.

    Matching is case-insensitive, restricted to the letters of ``source`` (the
    pattern for ``"Yale"`` is exactly ``[Yy][Aa][Ll][Ee]``) and ignores word
    boundaries, so ``"Yalesville"`` becomes ``"Falesville"``. Each matched
    character lends its case to the replacement character at the same
    position.
    """

    def __init__(self, source: str, target: str) -> None:
        if not source or not target:
            raise ValueError("source and target words must not be empty")
        if len(source) != len(target):
            raise ValueError(
                f"'{source}' and '{target}' must have the same length"
            )
        self._source = source
        self._target = target
        self._pattern = self._compile(source)
        if self._pattern.search(target):
            raise ValueError(
                f"Replacement '{target}' would match '{source}' again"
            )

    @property
    def source(self) -> str:
        return self._source

    @property
    def target(self) -> str:
        return self._target

    def replace(self, text: Any) -> Any:
        """Return ``text`` with every match replaced; non-strings pass through."""

        if not text or not isinstance(text, str):
            return text
        return self._pattern.sub(self._translate, text)

    __call__ = replace

    def _translate(self, match: re.Match[str]) -> str:
        return "".join(
            _apply_case(original, replacement)
            for original, replacement in zip(match.group(0), self._target)
        )

    @staticmethod
    def _compile(word: str) -> re.Pattern[str]:
        parts = []
        for char in word:
            upper, lower = char.upper(), char.lower()
            if upper == lower or len(upper) != 1 or len(lower) != 1:
                parts.append(re.escape(char))
            else:
                parts.append(f"[{re.escape(upper)}{re.escape(lower)}]")
        return re.compile("".join(parts))

    def __repr__(self) -> str:
        return f"WordReplacer({self._source!r}, {self._target!r})"


def _apply_case(original: str, replacement: str) -> str:
    if original.isupper():
        return replacement.upper()
    if original.islower():
        return replacement.lower()
    return replacement


DEFAULT_REPLACER = WordReplacer("Yale", "Fale")


def replace(text: Any) -> Any:
    """Replace "Yale" with "Fale" in ``text`` preserving the original casing."""

    return DEFAULT_REPLACER.replace(text)


__all__ = ["DEFAULT_REPLACER", "WordReplacer", "replace"]
