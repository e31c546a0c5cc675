"""Whitespace normalization applied before chunking."""

from __future__ import annotations

import re

from studyrag.chunking.schemas import NormalizationMode

# Horizontal whitespace: any whitespace except the newline itself
_HORIZONTAL_WS = re.compile(r"[^\S\n]+")
_SPACE_AROUND_NEWLINE = re.compile(r" *\n *")
_ANY_WS = re.compile(r"\s+")
_PARAGRAPH_BREAK = re.compile(r"\n+")


def normalize_text(
    text: str,
    mode: NormalizationMode = NormalizationMode.PRESERVE_PARAGRAPHS,
) -> str:
    """Return the canonical form of ``text`` used for splitting.

    ``PRESERVE_PARAGRAPHS`` unifies line endings, collapses runs of spaces
    and tabs, strips spaces touching a line break and trims the result;
    every remaining newline is a paragraph delimiter.

    ``COLLAPSE_ALL`` additionally folds line breaks into single spaces, so
    the whole document is one paragraph and chunking is purely word-based.
    """
    if not text:
        return ""

    mode = NormalizationMode(mode)
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    if mode is NormalizationMode.COLLAPSE_ALL:
        return _ANY_WS.sub(" ", text).strip()

    text = _HORIZONTAL_WS.sub(" ", text)
    text = _SPACE_AROUND_NEWLINE.sub("\n", text)
    return text.strip()


def split_paragraphs(text: str) -> list[str]:
    """Split normalized text on line-break runs, dropping empty segments."""
    return [p.strip() for p in _PARAGRAPH_BREAK.split(text) if p.strip()]
