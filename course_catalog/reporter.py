"""Ordered listing of catalog records."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Sequence, TypeVar

from .schemas import Course, CourseDetail

T = TypeVar("T")


def _course_id(course: Course) -> str:
    return course.id


def merge_sort(items: Sequence[T], key: Callable[[T], str] = _course_id) -> List[T]:
    """Stable top-down merge sort. Returns a new list; ``items`` is untouched."""
    if len(items) <= 1:
        return list(items)
    middle = len(items) // 2
    left = merge_sort(items[:middle], key)
    right = merge_sort(items[middle:], key)
    return _merge(left, right, key)


def _merge(left: List[T], right: List[T], key: Callable[[T], str]) -> List[T]:
    merged: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # Ties take from the left half to keep the sort stable.
        if key(left[i]) <= key(right[j]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def paginate(items: Iterable[T], page_size: int) -> Iterator[List[T]]:
    """Yield consecutive pages of at most ``page_size`` items."""
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    page: List[T] = []
    for item in items:
        page.append(item)
        if len(page) == page_size:
            yield page
            page = []
    if page:
        yield page


def format_course_line(course: Course) -> str:
    return f"{course.id}, {course.name}"


def format_course_detail(detail: CourseDetail) -> str:
    lines = [format_course_line(detail.course)]
    if not detail.prerequisites:
        lines.append("Prerequisites: none")
        return "\n".join(lines)

    refs = []
    for ref in detail.prerequisites:
        refs.append(f"{ref.id} ({ref.name})" if ref.name else f"{ref.id} (unknown)")
    lines.append("Prerequisites: " + ", ".join(refs))
    return "\n".join(lines)
