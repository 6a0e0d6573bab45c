import io

import pytest

from dsalgo.students import (
    DuplicateStudentError,
    Student,
    StudentRoster,
    default_roster,
    format_grid,
    is_same_image,
    main,
    max_letter,
    run_menu,
)


def test_add_duplicate_raises():
    roster = default_roster()
    with pytest.raises(DuplicateStudentError):
        roster.add(Student(1, "Other", 10))


def test_duplicate_leaves_original():
    roster = default_roster()
    with pytest.raises(DuplicateStudentError):
        roster.add(Student(2, "Other", 99))
    assert [s.name for s in roster if s.number == 2] == ["Lee"]


def test_iteration_is_in_number_order():
    roster = StudentRoster([Student(3, "C", 1), Student(1, "A", 2), Student(2, "B", 3)])
    assert [s.number for s in roster] == [1, 2, 3]


def test_remove_reports_presence():
    roster = default_roster()
    before = len(roster)
    assert roster.remove(2) is True
    assert len(roster) == before - 1
    assert roster.remove(2) is False


def test_total_grows_by_added_score():
    roster = default_roster()
    before = roster.total()
    roster.add(Student(5, "Jung", 50))
    assert roster.total() - before == 50


def test_above_average_splits_roster():
    roster = default_roster()
    average = roster.average()
    above = roster.above_average()
    assert all(s.score >= average for s in above)
    assert all(s.score < average for s in roster if s not in above)
    assert [s.name for s in above] == ["Kim"]


def test_average_of_empty_roster_raises():
    with pytest.raises(ValueError):
        StudentRoster().average()


def test_student_str():
    assert str(Student(1, "Kim", 80)) == "[1]Kim : 80"


def test_is_same_image():
    assert is_same_image("acdfc1", "dca1cf") is True
    assert is_same_image("abc", "abd") is False


def test_max_letter_source_example():
    assert max_letter("hhhhhhheeeellleeehhooood") == "h"


def test_max_letter_tie_goes_to_first_to_reach():
    assert max_letter("abab") == "a"


def test_max_letter_empty_raises():
    with pytest.raises(ValueError):
        max_letter("")


def test_format_grid_shape():
    text = format_grid(3, 4)
    lines = text.splitlines()
    assert lines[0] == "{" and lines[-1] == "}"
    rows = lines[1:-1]
    assert len(rows) == 3
    assert all(row.count("-1") == 4 for row in rows)


def test_format_grid_negative_raises():
    with pytest.raises(ValueError):
        format_grid(-1, 2)


def test_menu_prints_students():
    out = io.StringIO()
    run_menu(default_roster(), ["3", "6"], out)
    assert "[1]Kim : 80" in out.getvalue()


def test_menu_adds_and_removes():
    roster = default_roster()
    run_menu(roster, ["1 5 Jung 90", "2 1", "6"], io.StringIO())
    assert [s.number for s in roster] == [2, 3, 4, 5]


def test_menu_reports_duplicate():
    roster = default_roster()
    out = io.StringIO()
    run_menu(roster, ["1 1 Again 10", "6"], out)
    assert "Duplicate" in out.getvalue()
    assert len(roster) == 4


def test_menu_stops_when_input_ends():
    roster = default_roster()
    run_menu(roster, ["1 7"], io.StringIO())
    assert 7 not in [s.number for s in roster]


def test_main_runs_menu(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n6\n"))
    assert main([]) == 0
    assert "[4]Choi : 30" in capsys.readouterr().out