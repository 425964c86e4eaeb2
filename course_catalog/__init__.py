"""In-memory course catalog backed by a hand-built hash table."""

from .data_loader import (
    CatalogSession,
    describe_course,
    list_all_sorted,
    load_catalog,
    load_catalog_file,
    lookup,
    read_lines,
)
from .hashtable import HashedCatalog
from .schemas import Course, CourseDetail, PrerequisiteRef, ValidationReport

__all__ = [
    "CatalogSession",
    "Course",
    "CourseDetail",
    "HashedCatalog",
    "PrerequisiteRef",
    "ValidationReport",
    "describe_course",
    "list_all_sorted",
    "load_catalog",
    "load_catalog_file",
    "lookup",
    "read_lines",
]
