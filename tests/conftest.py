import pytest


@pytest.fixture
def course_file(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_text(
        "\n".join(
            [
                "MATH201,Discrete Mathematics",
                "CSCI300,Introduction to Algorithms,CSCI200,MATH201",
                "",
                "CSCI350,Operating Systems,CSCI300",
                "CSCI101,Introduction to Programming in C++,CSCI100",
                "CSCI100,Introduction to Computer Science",
                "   ",
                "CSCI200,Data Structures,CSCI101",
                "CSCI301,Advanced Programming in C++,CSCI101",
                "CSCI400,Large Software Development,CSCI301,CSCI350",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return path
