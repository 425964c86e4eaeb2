"""Helpers for loading course data into memory and querying it."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from .config import DEFAULT_CAPACITY, FILE_ENCODING, MAX_LOAD_FACTOR
from .console import log
from .errors import CatalogNotLoadedError, SourceUnavailableError
from .hashtable import HashedCatalog
from .parser import to_course
from .reporter import merge_sort
from .schemas import Course, CourseDetail, PrerequisiteRef
from .validator import check_batch


def read_lines(path: Path | str) -> List[str]:
    """Read every non-blank line from a catalog file.

    Args:
        path: Location of the comma-delimited course file.

    Returns:
        Raw lines with line endings removed, blank lines dropped.

    Raises:
        SourceUnavailableError: The file is missing, unreadable, or has no
            usable lines.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SourceUnavailableError(f"Course file not found: {file_path}")

    try:
        with file_path.open("r", encoding=FILE_ENCODING) as course_file:
            lines = [line.rstrip("\r\n") for line in course_file if line.strip()]
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(f"Cannot read course file {file_path}: {exc}") from exc

    if not lines:
        raise SourceUnavailableError(f"No course lines found in: {file_path}")

    log(f"Read {len(lines)} lines from {file_path.name}")
    return lines


def load_catalog(
    lines: Sequence[str],
    capacity: int = DEFAULT_CAPACITY,
    max_load_factor: float = MAX_LOAD_FACTOR,
) -> HashedCatalog:
    """Validate a batch of lines and build a fresh catalog from it.

    The whole batch is validated before the catalog is created, so a
    rejected batch never produces a partial catalog.

    Raises:
        MalformedRecordError: A line is structurally invalid.
        DanglingPrerequisiteError: A prerequisite is not defined in the batch.
    """
    parsed = check_batch(lines)
    catalog = HashedCatalog(capacity=capacity, max_load_factor=max_load_factor)
    for tokens in parsed:
        catalog.insert(to_course(tokens))
    log(f"Loaded {catalog.size} courses ({catalog.capacity} buckets)")
    return catalog


def load_catalog_file(
    path: Path | str,
    capacity: int = DEFAULT_CAPACITY,
    max_load_factor: float = MAX_LOAD_FACTOR,
) -> HashedCatalog:
    return load_catalog(read_lines(path), capacity=capacity, max_load_factor=max_load_factor)


def lookup(catalog: HashedCatalog, identifier: str) -> Course | None:
    return catalog.get(identifier)


def describe_course(catalog: HashedCatalog, identifier: str) -> CourseDetail | None:
    """Look up a course and resolve each prerequisite to its title."""
    course = catalog.get(identifier)
    if course is None:
        return None

    refs: List[PrerequisiteRef] = []
    missing: List[str] = []
    for prereq_id in course.prerequisites:
        prereq = catalog.get(prereq_id)
        if prereq is None:
            refs.append(PrerequisiteRef(id=prereq_id))
            if prereq_id not in missing:
                missing.append(prereq_id)
        else:
            refs.append(PrerequisiteRef(id=prereq_id, name=prereq.name))

    return CourseDetail(course=course, prerequisites=refs, missing_prereq_ids=missing)


def list_all_sorted(catalog: HashedCatalog) -> List[Course]:
    """Every course in the catalog, ordered by course number."""
    return merge_sort(catalog.enumerate_all())


class CatalogSession:
    """Holds the current catalog between loads.

    A failed load leaves the previously loaded catalog in place.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, max_load_factor: float = MAX_LOAD_FACTOR):
        self.capacity = capacity
        self.max_load_factor = max_load_factor
        self.catalog: HashedCatalog | None = None
        self.source: Path | None = None

    @property
    def loaded(self) -> bool:
        return self.catalog is not None

    def load(self, path: Path | str) -> HashedCatalog:
        return self.load_lines(read_lines(path), source=path)

    def load_lines(self, lines: Sequence[str], source: Path | str | None = None) -> HashedCatalog:
        catalog = load_catalog(lines, capacity=self.capacity, max_load_factor=self.max_load_factor)
        self.catalog = catalog
        self.source = Path(source) if source is not None else None
        return catalog

    def require_catalog(self) -> HashedCatalog:
        if self.catalog is None:
            raise CatalogNotLoadedError("No catalog loaded; load a course file first.")
        return self.catalog
