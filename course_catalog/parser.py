"""Turn raw catalog lines into token lists and course records."""

from __future__ import annotations

from typing import List, Sequence

from .config import DELIMITER
from .schemas import Course


def parse_line(line: str, delimiter: str = DELIMITER) -> List[str]:
    """Split one line into trimmed, non-empty tokens.

    There is no quoting: every delimiter splits. Empty or whitespace-only
    input yields an empty list.
    """
    if not line or not line.strip():
        return []
    tokens: List[str] = []
    for raw_token in line.split(delimiter):
        token = raw_token.strip()
        if token:
            tokens.append(token)
    return tokens


def to_course(tokens: Sequence[str]) -> Course:
    """Build a Course from parsed tokens: id, name, then prerequisites."""
    if len(tokens) < 2:
        raise ValueError(f"expected at least 2 tokens, got {len(tokens)}")
    return Course(id=tokens[0], name=tokens[1], prerequisites=list(tokens[2:]))
