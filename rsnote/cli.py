"""Command-line interface."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence

from rsnote.config import ConfigError
from rsnote.note import NoteApp, NoteError, NoteMetadata, NoteSearchResult

_TITLE_WIDTH = 30


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its sub-commands."""
    parser = argparse.ArgumentParser(
        prog="rsnote",
        description="A simple command-line note-taking application",
    )
    parser.add_argument("-V", "--version", action="version", version="Note App 1.0")
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    new = commands.add_parser("new", help="Create a new note")
    new.add_argument("title", help="Note title")
    new.add_argument(
        "content",
        nargs="?",
        default=None,
        help="Note content (optional, can be entered interactively)",
    )

    commands.add_parser("list", help="List all notes")

    show = commands.add_parser("show", help="Show a specific note")
    show.add_argument("identifier", help="Note title or ID")

    delete = commands.add_parser("delete", help="Delete a note")
    delete.add_argument("identifier", help="Note title or ID")

    search = commands.add_parser("search", help="Search for notes")
    search.add_argument("keyword", help="Search query")

    return parser


def _row(*cells: object) -> str:
    note_id, title, created, updated = cells
    return f"{note_id!s:<4} | {title!s:<30} | {created!s:<19} | {updated!s:<19}"


def format_note_table(notes: Iterable[NoteMetadata]) -> str:
    """Render notes as a table, or a message when there are none."""
    notes = list(notes)
    if not notes:
        return "No notes found."
    lines = [_row("ID", "Title", "Created", "Last Updated"), "-" * 80]
    lines.extend(
        _row(n.id, n.title[:_TITLE_WIDTH], n.created, n.last_updated) for n in notes
    )
    return "\n".join(lines)


def _format_search_results(results: Sequence[NoteSearchResult]) -> str:
    if not results:
        return "No matching notes found."
    lines = []
    for result in results:
        note = result.note
        lines.append(
            f"{note.id!s:<4} | {note.title[:_TITLE_WIDTH]:<30} | {result.match_type.value}"
        )
        if result.preview:
            lines.append(f"       {result.preview}")
    return "\n".join(lines)


def run(argv: Sequence[str] | None = None, app: NoteApp | None = None) -> None:
    """Parse the arguments and carry out the command."""
    args = build_parser().parse_args(argv)
    if app is None:
        app = NoteApp.from_config()

    if args.command == "new":
        path = app.create_note(args.title, args.content)
        print(f"Note '{args.title}' created successfully at {path}")
    elif args.command == "list":
        print(format_note_table(app.list_notes()))
    elif args.command == "show":
        print(app.show_note(args.identifier), end="")
    elif args.command == "delete":
        app.delete_note(args.identifier)
    elif args.command == "search":
        print(_format_search_results(app.search_notes(args.keyword)))


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit status."""
    try:
        run(argv)
    except (NoteError, ConfigError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0