"""
kzis — narzędzie CLI do ekstrakcji klasyfikacji zawodów i specjalności.

Użycie:
  kzis <komenda> [opcje]

Komendy:
  parse         Parsuje PDF/TXT do spłaszczonych rekordów zawodów (CSV/XLSX/JSON/DB).
  lines         Pokazuje linie dokumentu razem z wynikiem klasyfikacji.
  apply-schema  Aplikuje db/schema.sql do bazy danych (idempotentne).
  reset         Usuwa zapisane rekordy zawodów z bazy.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from kzis.commands import parse as cmd_parse
from kzis.commands import lines as cmd_lines
from kzis.commands import apply_schema as cmd_apply_schema
from kzis.commands import reset as cmd_reset


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kzis",
        description="kzis — ekstrakcja klasyfikacji zawodów z dokumentów PDF.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="kzis 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_parse.add_parser(subparsers)
    cmd_lines.add_parser(subparsers)
    cmd_apply_schema.add_parser(subparsers)
    cmd_reset.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
