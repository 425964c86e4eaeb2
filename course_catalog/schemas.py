"""Pydantic models shared across the catalog."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


class Course(BaseModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    prerequisites: List[str] = Field(
        default_factory=list,
        description="Prerequisite course IDs in file order; duplicates are kept.",
    )


class PrerequisiteRef(BaseModel):
    id: str
    name: str | None = Field(
        default=None,
        description="Title of the prerequisite, or None when it is not in the catalog.",
    )


class CourseDetail(BaseModel):
    course: Course
    prerequisites: List[PrerequisiteRef] = Field(
        default_factory=list,
        description="The course's prerequisites resolved against the catalog, in order.",
    )
    missing_prereq_ids: List[str] = Field(
        default_factory=list,
        description="Prerequisite IDs referenced by the course but not found in the catalog.",
    )


class ValidationReport(BaseModel):
    accepted: bool
    reason: str | None = None
    record_number: int | None = None
    kind: Literal["malformed", "dangling"] | None = None
