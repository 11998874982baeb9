"""Testy scalania nagłówków grup."""

from __future__ import annotations

from classifier.folder import fold_header
from data_model.occupations import HeaderGroup


def test_title_continuation_and_description() -> None:
    lines = [
        "1 MANAGERS",
        "managing people",
        "Description text here.",
        "112233 Chief executive",
    ]
    group, pos = fold_header("1", "MANAGERS", lines, 1)

    assert group == HeaderGroup("1", "MANAGERS managing people", "Description text here.")
    assert pos == 3


def test_multiline_description_is_space_joined() -> None:
    lines = [
        "11 Przedstawiciele władz publicznych",
        "Przedstawiciele władz publicznych ustalają",
        "politykę państwa i nadzorują",
        "jej realizację.",
        "111 Przedstawiciele władz",
    ]
    group, pos = fold_header("11", "Przedstawiciele władz publicznych", lines, 1)

    assert group.title == "Przedstawiciele władz publicznych"
    assert group.description == (
        "Przedstawiciele władz publicznych ustalają politykę państwa i nadzorują jej realizację."
    )
    assert pos == 4


def test_header_followed_by_digit_line_has_no_continuation() -> None:
    lines = ["1111 Parlamentarzyści", "111101 Poseł na Sejm"]
    group, pos = fold_header("1111", "Parlamentarzyści", lines, 1)

    assert group == HeaderGroup("1111", "Parlamentarzyści", "")
    assert pos == 1


def test_blank_line_stops_folding() -> None:
    lines = ["2 SPECJALIŚCI", "", "to nie jest tytuł"]
    group, pos = fold_header("2", "SPECJALIŚCI", lines, 1)

    assert group.title == "SPECJALIŚCI"
    assert group.description == ""
    assert pos == 1


def test_uppercase_line_after_title_goes_to_description() -> None:
    # pierwsza linia wielką literą kończy tytuł; kolejne małe trafiają już do opisu
    lines = ["3 TECHNICY", "Opis zaczyna się", "dalej małą literą"]
    group, pos = fold_header("3", "TECHNICY", lines, 1)

    assert group.title == "TECHNICY"
    assert group.description == "Opis zaczyna się dalej małą literą"
    assert pos == 3


def test_fold_at_end_of_sequence() -> None:
    group, pos = fold_header("4", "PRACOWNICY BIUROWI", ["4 PRACOWNICY BIUROWI"], 1)
    assert group == HeaderGroup("4", "PRACOWNICY BIUROWI", "")
    assert pos == 1
