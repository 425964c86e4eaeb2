import pytest

from course_catalog.data_loader import (
    CatalogSession,
    describe_course,
    list_all_sorted,
    load_catalog,
    load_catalog_file,
    lookup,
    read_lines,
)
from course_catalog.errors import (
    CatalogNotLoadedError,
    DanglingPrerequisiteError,
    MalformedRecordError,
    SourceUnavailableError,
)
from course_catalog.hashtable import HashedCatalog
from course_catalog.schemas import Course


def test_read_lines_skips_blank_lines(course_file):
    lines = read_lines(course_file)
    assert len(lines) == 8
    assert lines[0] == "MATH201,Discrete Mathematics"
    assert all(line.strip() for line in lines)


def test_read_lines_handles_crlf_and_bom(tmp_path):
    path = tmp_path / "windows.csv"
    path.write_bytes("\ufeffCS100,Intro\r\n\r\nCS200,Data,CS100\r\n".encode("utf-8"))
    assert read_lines(path) == ["CS100,Intro", "CS200,Data,CS100"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(SourceUnavailableError):
        read_lines(tmp_path / "nope.csv")


def test_read_lines_directory(tmp_path):
    with pytest.raises(SourceUnavailableError):
        read_lines(tmp_path)


def test_read_lines_only_blank_content(tmp_path):
    path = tmp_path / "blank.csv"
    path.write_text("\n   \n\t\n", encoding="utf-8")
    with pytest.raises(SourceUnavailableError):
        read_lines(path)


def test_read_lines_undecodable(tmp_path):
    path = tmp_path / "binary.csv"
    path.write_bytes(b"CS100,\xff\xfe\xfa")
    with pytest.raises(SourceUnavailableError):
        read_lines(path)


def test_load_catalog_scenario():
    catalog = load_catalog(["CS100,Intro,", "CS200,DataStructures,CS100"])
    assert catalog.size == 2
    assert lookup(catalog, "CS200").prerequisites == ["CS100"]
    assert lookup(catalog, "CS100").prerequisites == []


def test_load_catalog_dangling_prerequisite():
    with pytest.raises(DanglingPrerequisiteError):
        load_catalog(["CS100,Intro,CS999"])


def test_load_catalog_malformed_line():
    with pytest.raises(MalformedRecordError):
        load_catalog(["CS100,Intro", "CS200"])


def test_later_duplicate_line_wins():
    catalog = load_catalog(["CS100,Intro", "CS150,Bridge", "CS100,Intro Again,CS150"])
    assert catalog.size == 2
    course = lookup(catalog, "CS100")
    assert course.name == "Intro Again"
    assert course.prerequisites == ["CS150"]


def test_load_catalog_file(course_file):
    catalog = load_catalog_file(course_file)
    assert catalog.size == 8
    assert lookup(catalog, "CSCI400").prerequisites == ["CSCI301", "CSCI350"]


def test_list_all_sorted(course_file):
    catalog = load_catalog_file(course_file, capacity=2)
    courses = list_all_sorted(catalog)
    ids = [c.id for c in courses]
    assert ids == sorted(ids)
    assert len(courses) == catalog.size
    assert ids[0] == "CSCI100"
    assert ids[-1] == "MATH201"
    assert list_all_sorted(catalog) == courses


def test_describe_course_resolves_names(course_file):
    catalog = load_catalog_file(course_file)
    detail = describe_course(catalog, "CSCI300")
    assert detail.course.name == "Introduction to Algorithms"
    assert [(ref.id, ref.name) for ref in detail.prerequisites] == [
        ("CSCI200", "Data Structures"),
        ("MATH201", "Discrete Mathematics"),
    ]
    assert detail.missing_prereq_ids == []
    assert describe_course(catalog, "CSCI999") is None


def test_describe_course_reports_unknown_prerequisites():
    catalog = HashedCatalog()
    catalog.insert(Course(id="CS200", name="Data", prerequisites=["CS100", "CS100"]))
    detail = describe_course(catalog, "CS200")
    assert [ref.name for ref in detail.prerequisites] == [None, None]
    assert detail.missing_prereq_ids == ["CS100"]


class TestCatalogSession:
    def test_requires_load(self):
        session = CatalogSession()
        assert not session.loaded
        with pytest.raises(CatalogNotLoadedError):
            session.require_catalog()

    def test_failed_load_keeps_previous_catalog(self, course_file, tmp_path):
        session = CatalogSession()
        first = session.load(course_file)
        assert session.require_catalog().size == 8

        bad = tmp_path / "bad.csv"
        bad.write_text("CS100,Intro\nCS200,Data,CS999\n", encoding="utf-8")
        with pytest.raises(DanglingPrerequisiteError):
            session.load(bad)
        with pytest.raises(SourceUnavailableError):
            session.load(tmp_path / "missing.csv")

        assert session.catalog is first
        assert session.require_catalog().size == 8
        assert session.source == course_file

    def test_failed_first_load_leaves_session_empty(self, tmp_path):
        bad = tmp_path / "bad.csv"
        bad.write_text("CS100,Intro,CS999\n", encoding="utf-8")
        session = CatalogSession()
        with pytest.raises(DanglingPrerequisiteError):
            session.load(bad)
        assert session.catalog is None

    def test_uses_configured_capacity(self, course_file):
        session = CatalogSession(capacity=4)
        catalog = session.load(course_file)
        assert catalog.capacity == 16
        assert catalog.resize_count == 2


def test_errors_count_records_not_file_lines(tmp_path):
    path = tmp_path / "gappy.csv"
    path.write_text("\n\nCS100,Intro\n\n\nCS200\n", encoding="utf-8")
    with pytest.raises(MalformedRecordError) as excinfo:
        load_catalog_file(path)
    assert excinfo.value.record_number == 2
    assert str(excinfo.value).startswith("record 2:")


def test_loading_reports_progress(course_file, capsys):
    load_catalog_file(course_file)
    out = capsys.readouterr().out
    assert "Read 8 lines from courses.csv" in out
    assert "Loaded 8 courses (16 buckets)" in out
