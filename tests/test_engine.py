"""Testy pełnego przejścia po liniach dokumentu."""

from __future__ import annotations

from classifier import parse_lines
from classifier.emitter import extract_occupations, gather_occupation_line
from classifier.patterns import LineKind, classify_line
from data_model.occupations import HeaderGroup, OccupationRecord


DOCUMENT = [
    "KLASYFIKACJA ZAWODÓW I SPECJALNOŚCI",
    "1 PRZEDSTAWICIELE WŁADZ PUBLICZNYCH, WYŻSI URZĘDNICY",
    "i kierownicy",
    "Przedstawiciele władz publicznych określają politykę.",
    "11 Przedstawiciele władz publicznych",
    "Członkowie parlamentu i rządu.",
    "111 Przedstawiciele władz publicznych",
    "1111 Parlamentarzyści",
    "111101 Poseł na Sejm 111102 Senator",
    "111103 Poseł do Parlamentu",
    "Europejskiego",
    "1112 Wyżsi urzędnicy administracji rządowej",
    "Kierują urzędami centralnymi.",
    "111201 Dyrektor generalny urzędu",
]


def _pairs(records: list[OccupationRecord]) -> list[tuple[str, str]]:
    return [(r.occupation_code, r.occupation_title) for r in records]


def test_scenario_title_description_and_occupation() -> None:
    result = parse_lines([
        "1 MANAGERS",
        "managing people",
        "Description text here.",
        "112233 Chief executive",
    ])

    assert result.context.major == HeaderGroup(
        "1", "MANAGERS managing people", "Description text here."
    )
    assert len(result.records) == 1
    record = result.records[0]
    assert record.major_code == "1"
    assert record.major_title == "MANAGERS managing people"
    assert record.occupation_code == "112233"
    assert record.occupation_title == "Chief executive"


def test_scenario_two_codes_on_one_line() -> None:
    result = parse_lines(["2 SPECIALISTS", "112233 Chief executive 112244 Senior manager"])

    assert _pairs(result.records) == [("112233", "Chief executive"), ("112244", "Senior manager")]
    assert result.records[0].as_tuple()[:12] == result.records[1].as_tuple()[:12]


def test_scenario_later_header_overwrites_same_depth() -> None:
    result = parse_lines(["11 Sub group title", "12 Another sub group", "112233 Role"])

    record = result.records[0]
    assert record.sub_major_code == "12"
    assert record.sub_major_title == "Another sub group"


def test_full_document() -> None:
    result = parse_lines(DOCUMENT)

    assert _pairs(result.records) == [
        ("111101", "Poseł na Sejm"),
        ("111102", "Senator"),
        ("111103", "Poseł do Parlamentu Europejskiego"),
        ("111201", "Dyrektor generalny urzędu"),
    ]
    first, last = result.records[0], result.records[-1]
    assert first.major_title == "PRZEDSTAWICIELE WŁADZ PUBLICZNYCH, WYŻSI URZĘDNICY i kierownicy"
    assert first.major_description == "Przedstawiciele władz publicznych określają politykę."
    assert first.sub_major_description == "Członkowie parlamentu i rządu."
    assert first.minor_code == "111"
    assert first.unit_code == "1111"
    assert last.unit_code == "1112"
    assert last.unit_description == "Kierują urzędami centralnymi."
    assert result.header_counts == {1: 1, 2: 1, 3: 1, 4: 2}
    assert result.occupation_code_count == 4


def test_occupation_before_any_header_has_empty_ancestors() -> None:
    result = parse_lines(["Wstęp", "111101 Poseł na Sejm"])

    assert result.records == [OccupationRecord(occupation_code="111101", occupation_title="Poseł na Sejm")]


def test_missing_intermediate_header_inherits_stale_ancestor() -> None:
    result = parse_lines([
        "11 Pierwsza grupa duża",
        "111 Pierwsza grupa średnia",
        "111101 Zawód A",
        "2 DRUGA GRUPA WIELKA",
        "211 Grupa średnia bez grupy dużej",
        "211101 Zawód B",
    ])

    b = result.records[1]
    assert b.major_code == "2"
    assert b.sub_major_code == "11"
    assert b.minor_code == "211"


def test_pass_is_idempotent() -> None:
    assert parse_lines(DOCUMENT).records == parse_lines(DOCUMENT).records


def test_record_count_matches_extracted_pairs() -> None:
    expected = 0
    i = 0
    while i < len(DOCUMENT):
        if classify_line(DOCUMENT[i]) is LineKind.OCCUPATION_START:
            logical, i = gather_occupation_line(DOCUMENT, i)
            expected += len(extract_occupations(logical))
        else:
            i += 1

    result = parse_lines(DOCUMENT)
    assert len(result.records) == expected == result.occupation_code_count


def test_plain_lines_and_empty_input() -> None:
    assert parse_lines([]).records == []
    result = parse_lines(["Strona 1", "Spis treści", "12345 nie jest kodem"])
    assert result.records == []
    assert result.header_counts == {1: 0, 2: 0, 3: 0, 4: 0}


def test_line_without_title_after_code_is_skipped() -> None:
    # "12 " po przycięciu nie istnieje, ale pass nie może się wywrócić
    result = parse_lines(["12 ", "111101 Poseł"])
    assert _pairs(result.records) == [("111101", "Poseł")]
    assert result.context.sub_major is None
