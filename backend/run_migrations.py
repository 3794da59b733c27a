#!/usr/bin/env python3
"""
Database migration runner for the customer and token tables.

Applies the SQL files in migrations/ in name order against the Postgres
database behind Supabase, recording each one in a tracking table.

Usage:
    uv run python run_migrations.py             # Apply pending migrations
    uv run python run_migrations.py --status    # Show migration status
    uv run python run_migrations.py --dry-run   # List what would be applied

Configuration:
    SUPABASE_DB_URL=postgresql://postgres.[project-ref]:[password]@[host]:6543/postgres
"""

import argparse
import hashlib
import sys
from pathlib import Path

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"


def checksum_of(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()[:16]


def connect():
    dsn = get_settings().supabase_db_url
    if not dsn:
        console.print("[red]Error:[/red] SUPABASE_DB_URL is not set.")
        sys.exit(1)
    try:
        return psycopg2.connect(dsn)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def ensure_migrations_table(conn) -> None:
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL(
                """
                CREATE TABLE IF NOT EXISTS {} (
                    id SERIAL PRIMARY KEY,
                    name VARCHAR(255) NOT NULL UNIQUE,
                    checksum VARCHAR(64) NOT NULL,
                    applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                )
                """
            ).format(sql.Identifier(MIGRATIONS_TABLE))
        )
    conn.commit()


def applied_migrations(conn) -> dict[str, tuple[str, object]]:
    """Map of migration name to (checksum, applied_at)."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("SELECT name, checksum, applied_at FROM {} ORDER BY name").format(
                sql.Identifier(MIGRATIONS_TABLE)
            )
        )
        return {name: (checksum, applied_at) for name, checksum, applied_at in cur.fetchall()}


def pending_migrations(conn) -> list[Path]:
    applied = applied_migrations(conn)
    pending = []
    for path in sorted(MIGRATIONS_DIR.glob("*.sql")):
        if path.name not in applied:
            pending.append(path)
        elif applied[path.name][0] != checksum_of(path):
            console.print(f"[yellow]Warning:[/yellow] {path.name} changed after it was applied")
    return pending


def apply(conn, path: Path) -> None:
    console.print(f"[blue]Applying:[/blue] {path.name}...")
    try:
        with conn.cursor() as cur:
            cur.execute(path.read_text())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(MIGRATIONS_TABLE)
                ),
                (path.name, checksum_of(path)),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {path.name} failed: {e}")
        raise
    console.print(f"[green]✓[/green] {path.name}")


def show_status(conn) -> None:
    table = Table(title="Migration Status")
    table.add_column("Migration", style="cyan")
    table.add_column("Status")
    table.add_column("Applied At")

    for name, (_, applied_at) in applied_migrations(conn).items():
        table.add_row(name, "[green]Applied[/green]", f"{applied_at:%Y-%m-%d %H:%M:%S}")
    for path in pending_migrations(conn):
        table.add_row(path.name, "[yellow]Pending[/yellow]", "")

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Apply database migrations")
    parser.add_argument("--status", action="store_true", help="Show migration status only")
    parser.add_argument("--dry-run", action="store_true", help="List pending migrations only")
    args = parser.parse_args()

    conn = connect()
    try:
        ensure_migrations_table(conn)

        if args.status:
            show_status(conn)
            return

        pending = pending_migrations(conn)
        if not pending:
            console.print("[green]All migrations are up to date![/green]")
            return

        for path in pending:
            if args.dry_run:
                console.print(f"[cyan]Would apply:[/cyan] {path.name}")
            else:
                apply(conn, path)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
