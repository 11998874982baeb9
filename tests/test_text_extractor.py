"""Testy ekstrakcji linii z PDF / TXT."""

from __future__ import annotations

from pathlib import Path

import fitz  # PyMuPDF

from classifier import parse_lines
from pdf.text_extractor import extract_lines, read_text_lines, split_lines


def _make_pdf(path: Path, pages: list[str]) -> Path:
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        page.insert_text((72, 72), text, fontsize=11)
    doc.save(str(path))
    doc.close()
    return path


def test_split_lines_trims_and_drops_empty() -> None:
    text = "  1 MANAGERS \n\n\t\nmanaging people\r\n 112233 Chief executive  \n"
    assert split_lines(text) == ["1 MANAGERS", "managing people", "112233 Chief executive"]


def test_read_text_lines(tmp_path: Path) -> None:
    path = tmp_path / "grupa.txt"
    path.write_text("1 PRZEDSTAWICIELE WŁADZ\n\n111101 Poseł na Sejm\n", encoding="utf-8")
    assert read_text_lines(path) == ["1 PRZEDSTAWICIELE WŁADZ", "111101 Poseł na Sejm"]


def test_extract_lines_from_pdf(tmp_path: Path) -> None:
    path = _make_pdf(tmp_path / "grupa.pdf", ["1 MANAGERS\nmanaging people\n112233 Chief executive"])
    assert extract_lines(path) == ["1 MANAGERS", "managing people", "112233 Chief executive"]


def test_extract_lines_page_range(tmp_path: Path) -> None:
    path = _make_pdf(tmp_path / "grupa.pdf", ["PAGE ONE", "PAGE TWO", "PAGE THREE"])

    assert extract_lines(path, start_page=2) == ["PAGE TWO", "PAGE THREE"]
    assert extract_lines(path, end_page=1) == ["PAGE ONE"]
    assert extract_lines(path, start_page=2, end_page=2) == ["PAGE TWO"]
    assert extract_lines(path, start_page=5) == []


def test_read_text_lines_strips_bom(tmp_path: Path) -> None:
    path = tmp_path / "grupa_bom.txt"
    path.write_text("1 MANAGERS\n112233 Chief executive\n", encoding="utf-8-sig")

    lines = read_text_lines(path)

    assert lines == ["1 MANAGERS", "112233 Chief executive"]
    assert parse_lines(lines).records[0].major_code == "1"
