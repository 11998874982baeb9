"""Komenda: kzis parse — ekstrakcja rekordów zawodów z PDF / TXT."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box

from classifier import ParseResult, parse_lines
from data_model.occupations import DEPTH_NAMES, OccupationRecord

console = Console()

SUPPORTED_SUFFIXES = (".pdf", ".txt")

# Format → sufiks pliku wynikowego
_FILE_OUTPUTS: dict[str, str] = {
    "csv":  ".occupations.csv",
    "xlsx": ".occupations.xlsx",
    "json": ".occupations.json",
}


# ---------------------------------------------------------------------------
# Wejście
# ---------------------------------------------------------------------------

def _check_input(path: Path) -> None:
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        console.print(f"[red]Oczekiwano pliku .pdf lub .txt, otrzymano:[/red] {path.suffix}")
        raise SystemExit(1)


def _load_lines(path: Path, start_page: int | None, end_page: int | None) -> list[str]:
    """Linie dokumentu: PDF przez PyMuPDF, TXT bezpośrednio."""
    _check_input(path)

    if path.suffix.lower() == ".txt":
        from pdf.text_extractor import read_text_lines
        try:
            return read_text_lines(path)
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Błąd odczytu pliku:[/red] {e}")
            raise SystemExit(1)

    try:
        from pdf.text_extractor import extract_lines
        return extract_lines(path, start_page, end_page)
    except ImportError as e:
        console.print(f"[red]Błąd importu (brak PyMuPDF?):[/red] {e}")
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Błąd ekstrakcji tekstu:[/red] {e}")
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Zapis
# ---------------------------------------------------------------------------

def _write_files(result: ParseResult, formats: list[str], out_dir: Path, stem: str) -> None:
    from export import write_csv, write_json, write_xlsx

    writers = {"csv": write_csv, "xlsx": write_xlsx, "json": write_json}

    out_dir.mkdir(parents=True, exist_ok=True)
    for fmt in formats:
        if fmt not in _FILE_OUTPUTS:
            continue
        out_path = out_dir / f"{stem}{_FILE_OUTPUTS[fmt]}"
        try:
            writers[fmt](result.records, out_path)
        except Exception as e:
            console.print(f"[red]Błąd zapisu {fmt.upper()}:[/red] {e}")
            raise SystemExit(1)
        console.print(
            f"[green]{fmt.upper()}:[/green] {out_path}  ({len(result.records)} wierszy)"
        )


def _write_db(result: ParseResult, doc_id: str) -> None:
    from kzis._db import get_connection
    from export import write_db

    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    try:
        n = write_db(result.records, doc_id, conn)
    except Exception as e:
        console.print(f"[red]Błąd zapisu do bazy:[/red] {e}")
        raise SystemExit(1)
    finally:
        conn.close()

    console.print(f"[green]DB:[/green] zapisano {n} wierszy dla doc_id='{doc_id}'")


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_summary(result: ParseResult) -> None:
    counts = ", ".join(
        f"{DEPTH_NAMES[depth]}={n}" for depth, n in result.header_counts.items()
    )
    console.print(f"  [dim]Nagłówki grup: {counts}[/dim]")
    console.print(
        f"Rekordy zawodów: [bold]{len(result.records)}[/bold], "
        f"znaleziono [bold]{result.occupation_code_count}[/bold] kodów zawodów."
    )


def _show_table(records: list[OccupationRecord]) -> None:
    if not records:
        console.print("[yellow]Brak rekordów zawodów.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("WIELKA",  no_wrap=True, style="dim")
    table.add_column("DUŻA",    no_wrap=True, style="dim")
    table.add_column("ŚREDNIA", no_wrap=True, style="dim")
    table.add_column("ELEM.",   no_wrap=True, style="cyan")
    table.add_column("KOD",     no_wrap=True, style="bold cyan")
    table.add_column("ZAWÓD",   no_wrap=False, max_width=60)

    for r in records:
        table.add_row(
            r.major_code or "-",
            r.sub_major_code or "-",
            r.minor_code or "-",
            r.unit_code or "-",
            r.occupation_code,
            r.occupation_title[:80],
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(records)} rekordów[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    in_path = Path(args.input_file)
    lines = _load_lines(in_path, args.start_page, args.end_page)
    doc_id: str = args.doc_id or in_path.stem

    console.print(
        f"Parsowanie [bold]{in_path}[/bold] (doc_id=[cyan]{doc_id}[/cyan], "
        f"{len(lines)} linii) …"
    )

    result = parse_lines(lines)

    formats: list[str] = args.out
    out_dir = Path(args.output_dir) if args.output_dir else in_path.parent
    _write_files(result, formats, out_dir, in_path.stem)

    if "db" in formats:
        _write_db(result, doc_id)

    _show_summary(result)

    if args.show:
        _show_table(result.records)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje PDF/TXT do spłaszczonych rekordów zawodów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Odtwarza hierarchię klasyfikacji zawodów (grupa wielka → duża → średnia →
elementarna → zawód) i zapisuje jeden wiersz na każdy 6-cyfrowy kod zawodu.

Przykłady:
  kzis parse Grupa_Majora_1.pdf
  kzis parse Grupa_Majora_1.pdf --out csv xlsx --output-dir data
  kzis parse Grupa_Majora_1.pdf --start-page 3 --end-page 40 --show
  kzis parse tekst.txt --out json db --doc-id grupa_1
        """,
    )
    p.add_argument(
        "input_file",
        metavar="PLIK",
        help="Ścieżka do pliku .pdf lub .txt.",
    )
    p.add_argument(
        "--out",
        nargs="+",
        choices=["csv", "xlsx", "json", "db"],
        default=["csv"],
        help="Formaty wyjściowe (można podać kilka; domyślnie: csv).",
    )
    p.add_argument(
        "--output-dir",
        metavar="KATALOG",
        default=None,
        help="Katalog plików wynikowych (domyślnie: katalog pliku wejściowego).",
    )
    p.add_argument(
        "--doc-id",
        metavar="ID",
        default=None,
        help="Identyfikator dokumentu w bazie (domyślnie: nazwa pliku bez rozszerzenia).",
    )
    p.add_argument(
        "--start-page",
        type=int,
        metavar="N",
        default=None,
        help="Pierwsza strona PDF (1-based).",
    )
    p.add_argument(
        "--end-page",
        type=int,
        metavar="N",
        default=None,
        help="Ostatnia strona PDF (1-based, włącznie).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę rekordów w terminalu po zapisie.",
    )
    p.set_defaults(func=run)
