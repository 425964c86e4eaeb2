"""Batch validation for catalog source lines.

A batch is accepted or rejected as a whole. Structural checks run over
every line first; prerequisite references are only checked once every
line is known to be well formed.
"""

from __future__ import annotations

from typing import List, Sequence

from .errors import (
    CatalogValidationError,
    DanglingPrerequisiteError,
    MalformedRecordError,
)
from .parser import parse_line
from .schemas import ValidationReport


def check_batch(lines: Sequence[str]) -> List[List[str]]:
    """Validate a batch and return its token lists.

    Args:
        lines: Raw lines from one source, blank lines already removed.

    Returns:
        One token list per line, in input order.

    Raises:
        MalformedRecordError: A line has fewer than two tokens or an empty
            id/name, or the batch is empty.
        DanglingPrerequisiteError: A prerequisite names no course in the batch.
    """
    if not lines:
        raise MalformedRecordError("batch contains no course lines")

    parsed: List[List[str]] = []
    for record_number, line in enumerate(lines, start=1):
        tokens = parse_line(line)
        if len(tokens) < 2:
            raise MalformedRecordError(
                f"expected at least a course number and a title, got {len(tokens)} field(s)",
                record_number,
            )
        if not tokens[0].strip():
            raise MalformedRecordError("course number is empty", record_number)
        if not tokens[1].strip():
            raise MalformedRecordError("course title is empty", record_number)
        parsed.append(tokens)

    known_ids = {tokens[0] for tokens in parsed}
    for record_number, tokens in enumerate(parsed, start=1):
        for prereq in tokens[2:]:
            if prereq not in known_ids:
                raise DanglingPrerequisiteError(tokens[0], prereq, record_number)

    return parsed


def validate_batch(lines: Sequence[str]) -> ValidationReport:
    """Same checks as check_batch, reported instead of raised."""
    try:
        check_batch(lines)
    except CatalogValidationError as exc:
        return ValidationReport(
            accepted=False,
            reason=exc.reason,
            record_number=exc.record_number,
            kind=exc.kind,
        )
    return ValidationReport(accepted=True)
