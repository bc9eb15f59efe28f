"""
Line classification for presenting section text.

A regenerated resume renders each line of a section differently
depending on what it looks like. The rules below are coarse heuristics
evaluated in order; the first one that matches decides the kind. The CLI
uses them to count bullets in its section preview.
"""

import re
from enum import Enum
from typing import Callable


class LineKind(str, Enum):
    """Presentation kind of a single section line."""

    BULLET = "bullet"
    JOB_TITLE = "job_title"
    DATE = "date"
    PARAGRAPH = "paragraph"


_BULLET_PATTERN = re.compile(r"^[-•*▪–►]")
_JOB_TITLE_PATTERN = re.compile(r"^[A-Z][A-Z\s,.'&()\-/]+$")
_YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")
_MARKDOWN_PATTERN = re.compile(r"\*\*|__|[*_`]")

JOB_TITLE_MAX_WORDS = 8
DATE_LINE_MAX_LENGTH = 60


def _is_job_title(line: str) -> bool:
    return bool(_JOB_TITLE_PATTERN.match(line)) and len(line.split()) <= JOB_TITLE_MAX_WORDS


def _is_date(line: str) -> bool:
    return bool(_YEAR_PATTERN.search(line)) and len(line) < DATE_LINE_MAX_LENGTH


# Evaluated top to bottom; PARAGRAPH is the fallback
LINE_RULES: tuple[tuple[LineKind, Callable[[str], bool]], ...] = (
    (LineKind.BULLET, lambda line: bool(_BULLET_PATTERN.match(line))),
    (LineKind.JOB_TITLE, _is_job_title),
    (LineKind.DATE, _is_date),
)


def classify_line(line: str) -> LineKind:
    """Classify a trimmed section line."""
    stripped = line.strip()
    for kind, predicate in LINE_RULES:
        if predicate(stripped):
            return kind
    return LineKind.PARAGRAPH


def strip_markdown(line: str) -> str:
    """Remove markdown emphasis and code markers from a line."""
    return _MARKDOWN_PATTERN.sub("", line).strip()


def dedupe_lines(text: str) -> list[str]:
    """
    Split text into trimmed lines, dropping blanks and repeats.

    The first occurrence of each line is kept in its original position.
    """
    seen: set[str] = set()
    lines: list[str] = []
    for line in text.split("\n"):
        stripped = line.strip()
        if stripped and stripped not in seen:
            seen.add(stripped)
            lines.append(stripped)
    return lines
