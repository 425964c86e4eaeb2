#!/usr/bin/env python3
"""Interactive course catalog menu.

Usage:
  course-catalog
  course-catalog --file courses.csv --page-size 20
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, List

from . import config
from .console import log
from .data_loader import CatalogSession, describe_course, list_all_sorted, read_lines
from .errors import CatalogError, SourceUnavailableError
from .reporter import format_course_detail, format_course_line, paginate

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MENU = """
Menu:
  1. Load Data Structure
  2. Print Course List
  3. Print Course
  9. Exit
"""


def canonicalize_course_id(course_id: str) -> str:
    """Course numbers are stored upper-case in the source files."""
    return course_id.strip().upper()


class CatalogShell:
    def __init__(
        self,
        session: CatalogSession,
        page_size: int = config.PAGE_SIZE,
        input_fn: InputFn | None = None,
        output_fn: OutputFn | None = None,
    ):
        if page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {page_size}")
        self.session = session
        self.page_size = page_size
        self.input = input_fn or input
        self.output = output_fn or print

    def run(self) -> None:
        self.output("Welcome to the course planner.")
        while True:
            self.output(MENU)
            try:
                choice = self.input("What would you like to do? ").strip()
            except EOFError:
                break
            if choice == "9":
                break
            if choice == "1":
                self.load_data()
            elif choice == "2":
                self.print_course_list()
            elif choice == "3":
                self.print_course()
            else:
                self.output(f"{choice} is not a valid option.")
        self.output("Thank you for using the course planner!")

    def prompt_filename(self) -> str | None:
        while True:
            try:
                filename = self.input("Enter filename: ").strip()
            except EOFError:
                return None
            if filename:
                return filename
            self.output("Error: Filename cannot be empty")

    def load_data(self, filename: str | None = None) -> bool:
        """Load a course file, prompting until one opens when no name is given."""
        prompted = filename is None
        while True:
            if prompted:
                filename = self.prompt_filename()
                if filename is None:
                    return False
            try:
                lines = read_lines(filename)
                break
            except SourceUnavailableError as exc:
                self.output(f"Error: Cannot open file '{filename}' ({exc})")
                if not prompted:
                    return False

        self.output(f"File '{filename}' found successfully!")
        try:
            catalog = self.session.load_lines(lines, source=filename)
        except CatalogError as exc:
            self.output(f"Error: {exc}")
            return False
        self.output(f"Loaded {catalog.size} courses from '{filename}'.")
        return True

    def print_course_list(self) -> None:
        if not self.session.loaded:
            self.output("Please load the data structure first (option 1).")
            return
        courses = list_all_sorted(self.session.require_catalog())
        self.output("Here is a sample schedule:")
        pages: List[List] = list(paginate(courses, self.page_size))
        for number, page in enumerate(pages, start=1):
            for course in page:
                self.output(format_course_line(course))
            if number < len(pages):
                try:
                    self.input(f"-- page {number}/{len(pages)}, press Enter to continue --")
                except EOFError:
                    return

    def print_course(self) -> None:
        if not self.session.loaded:
            self.output("Please load the data structure first (option 1).")
            return
        try:
            raw = self.input("What course do you want to know about? ")
        except EOFError:
            return
        course_id = canonicalize_course_id(raw)
        detail = describe_course(self.session.require_catalog(), course_id)
        if detail is None:
            self.output(f"{course_id} not found.")
            return
        self.output(format_course_detail(detail))


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse a comma-delimited course catalog.")
    parser.add_argument(
        "--file",
        type=Path,
        default=config.DEFAULT_DATA_FILE,
        help="Course file to load at start-up (default: $COURSE_CATALOG_FILE)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=config.PAGE_SIZE,
        help=f"Courses per page when listing (default: {config.PAGE_SIZE})",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=config.DEFAULT_CAPACITY,
        help=f"Initial hash table bucket count (default: {config.DEFAULT_CAPACITY})",
    )
    args = parser.parse_args(argv)
    if args.page_size < 1:
        parser.error("--page-size must be at least 1")
    if args.capacity < 1:
        parser.error("--capacity must be at least 1")
    return args


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    session = CatalogSession(capacity=args.capacity)
    shell = CatalogShell(session, page_size=args.page_size)
    if args.file is not None:
        log(f"Loading {args.file} at start-up.")
        shell.load_data(str(args.file))
    shell.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
