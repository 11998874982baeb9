"""Komenda: kzis lines — podgląd linii dokumentu i ich klasyfikacji."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from classifier import LineKind, classify_line
from kzis.commands.parse import _load_lines

console = Console()

KIND_STYLE: dict[str, str] = {
    LineKind.HEADER_START:     "bold cyan",
    LineKind.OCCUPATION_START: "green",
    LineKind.PLAIN:            "dim white",
}


def run(args: argparse.Namespace) -> None:
    lines = _load_lines(Path(args.input_file), args.start_page, args.end_page)
    kinds: set[str] | None = set(args.kind) if args.kind else None

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",     justify="right", no_wrap=True, style="dim")
    table.add_column("KIND",  no_wrap=True)
    table.add_column("LINIA", no_wrap=False, max_width=100)

    shown = 0
    for n, line in enumerate(lines, start=1):
        kind = classify_line(line)
        if kinds is not None and kind not in kinds:
            continue
        table.add_row(str(n), Text(kind, style=KIND_STYLE[kind]), line)
        shown += 1

    if not shown:
        console.print("[yellow]Brak linii spełniających kryteria.[/yellow]")
        return

    console.print()
    console.print(table)
    console.print(f"  [dim]{shown} z {len(lines)} linii[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "lines",
        help="Pokazuje linie dokumentu z wynikiem klasyfikacji.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyświetla linie wyciągnięte z dokumentu (po przycięciu i usunięciu pustych)
razem z rodzajem nadanym przez klasyfikator:

  header      – 1–4 cyfry + biały znak (nagłówek grupy)
  occupation  – linia zawierająca 6-cyfrowy kod zawodu
  plain       – pozostałe (kontynuacje, opisy, stopki)

Przykłady:
  kzis lines Grupa_Majora_1.pdf --end-page 2
  kzis lines Grupa_Majora_1.pdf --kind header
        """,
    )
    p.add_argument(
        "input_file",
        metavar="PLIK",
        help="Ścieżka do pliku .pdf lub .txt.",
    )
    p.add_argument(
        "--kind", "-k",
        nargs="+",
        metavar="KIND",
        choices=[k.value for k in LineKind],
        help="Pokaż tylko linie danego rodzaju (można podać kilka).",
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
    p.set_defaults(func=run)
