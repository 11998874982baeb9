"""Komenda: kzis reset — usuwanie rekordów zawodów z bazy."""

from __future__ import annotations

import argparse

from rich.console import Console

from kzis._db import get_connection

console = Console()


def _table_exists(cur, table: str) -> bool:
    cur.execute(
        """
        SELECT 1 FROM information_schema.tables
        WHERE table_schema = 'public' AND table_name = %s
        """,
        (table,),
    )
    return cur.fetchone() is not None


def _reset_records(cur, doc_id: str | None) -> None:
    if not _table_exists(cur, "occupation_record"):
        console.print("[yellow]Tabela [bold]occupation_record[/bold] nie istnieje — pominięto.[/yellow]")
        return
    if doc_id:
        cur.execute("DELETE FROM occupation_record WHERE doc_id = %s", (doc_id,))
        console.print(
            f"[green]Usunięto {cur.rowcount} wierszy z [bold]occupation_record[/bold]"
            f" (doc_id=[cyan]{doc_id}[/cyan])[/green]"
        )
    else:
        cur.execute("DELETE FROM occupation_record")
        console.print(f"[green]Usunięto {cur.rowcount} wierszy z [bold]occupation_record[/bold][/green]")


def run(args: argparse.Namespace) -> None:
    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    try:
        with conn, conn.cursor() as cur:
            _reset_records(cur, args.doc_id)
    finally:
        conn.close()

    console.print("[dim]Gotowe.[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "reset",
        help="Usuwa rekordy zawodów z bazy (bez potwierdzenia).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Usuwa wiersze z tabeli occupation_record. Działa natychmiast, bez pytania
o potwierdzenie.

Przykłady:
  kzis reset
  kzis reset --doc-id Grupa_Majora_1
        """,
    )
    p.add_argument(
        "--doc-id",
        metavar="ID",
        default=None,
        help="Ogranicz usuwanie do doc_id=ID.",
    )
    p.set_defaults(func=run)
