"""Chained hash table holding the catalog's course records."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .config import DEFAULT_CAPACITY, MAX_LOAD_FACTOR
from .errors import CatalogInvariantError
from .schemas import Course

HASH_MULTIPLIER = 31
HASH_MASK = 0xFFFFFFFF

Bucket = List[Tuple[str, Course]]


def hash_identifier(identifier: str) -> int:
    """Polynomial rolling hash (h * 31 + ord(c)) wrapped to unsigned 32 bits.

    The result is always in [0, 2**32), so it never needs abs() before the
    modulo. Where a signed 32-bit accumulator would go negative, the
    unsigned value is used instead, e.g. "polygenelubricants" -> 2**31.
    """
    h = 0
    for char in identifier:
        h = (h * HASH_MULTIPLIER + ord(char)) & HASH_MASK
    return h


def bucket_index(identifier: str, capacity: int) -> int:
    return hash_identifier(identifier) % capacity


class HashedCatalog:
    """Course records keyed by course number.

    Each bucket is a list of (identifier, course) entries, newest first.
    Before a new entry is linked the table doubles if the entry would
    push the load factor above ``max_load_factor``; updates never resize.
    Records handed in or out are copies; callers never hold a reference into the table.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, max_load_factor: float = MAX_LOAD_FACTOR):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        if max_load_factor <= 0:
            raise ValueError(f"max_load_factor must be positive, got {max_load_factor}")
        self._buckets: List[Bucket] = [[] for _ in range(capacity)]
        self._size = 0
        self._max_load_factor = max_load_factor
        self._resize_count = 0

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    @property
    def size(self) -> int:
        return self._size

    @property
    def max_load_factor(self) -> float:
        return self._max_load_factor

    @property
    def resize_count(self) -> int:
        return self._resize_count

    @property
    def load_factor(self) -> float:
        return self._size / len(self._buckets)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, str):
            return False
        return self._find(identifier) is not None

    def __iter__(self) -> Iterator[Course]:
        return iter(self.enumerate_all())

    def __repr__(self) -> str:
        return f"HashedCatalog(size={self._size}, capacity={self.capacity})"

    def insert(self, course: Course) -> bool:
        """Insert a course or overwrite the one with the same id.

        Returns:
            True if a new entry was added, False if an existing one was updated.
        """
        existing = self._find(course.id)
        if existing is not None:
            existing.name = course.name
            existing.prerequisites = list(course.prerequisites)
            return False

        # Grow before linking so the new entry never pushes the load past the limit.
        while (self._size + 1) / self.capacity > self._max_load_factor:
            self._rehash(self.capacity * 2)

        bucket = self._buckets[bucket_index(course.id, self.capacity)]
        bucket.insert(0, (course.id, course.model_copy(deep=True)))
        self._size += 1
        return True

    def get(self, identifier: str) -> Course | None:
        """Return a copy of the course with this id, or None."""
        found = self._find(identifier)
        if found is None:
            return None
        return found.model_copy(deep=True)

    def enumerate_all(self) -> List[Course]:
        """Copies of every record, bucket by bucket. Order is not meaningful."""
        courses: List[Course] = []
        for bucket in self._buckets:
            for _, course in bucket:
                courses.append(course.model_copy(deep=True))
        return courses

    def _find(self, identifier: str) -> Course | None:
        for key, course in self._buckets[bucket_index(identifier, self.capacity)]:
            if key == identifier:
                return course
        return None

    def _rehash(self, new_capacity: int) -> None:
        new_buckets: List[Bucket] = [[] for _ in range(new_capacity)]
        relinked = 0
        for bucket in self._buckets:
            for entry in bucket:
                new_buckets[bucket_index(entry[0], new_capacity)].insert(0, entry)
                relinked += 1

        if relinked != self._size:
            raise CatalogInvariantError(
                f"rehash relinked {relinked} entries but size is {self._size}"
            )
        self._buckets = new_buckets
        self._resize_count += 1
