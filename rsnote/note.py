"""Storage of notes as plain text files with a small metadata header."""

from __future__ import annotations

import re
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Iterator

from rsnote.config import Config

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
_SEPARATOR = "---"
_ID_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_ID = 2**64
_PREVIEW_CONTEXT = 20


class NoteError(Exception):
    """Base class for note errors."""


class NoteExistsError(NoteError):
    """A note with the same title already exists."""

    def __init__(self, message: str = "Note already exists") -> None:
        super().__init__(message)


class NoteNotFoundError(NoteError):
    """No note matches the given title."""

    def __init__(self, message: str = "Note not found") -> None:
        super().__init__(message)


class InvalidIdError(NoteError):
    """The given numeric identifier does not refer to a note."""

    def __init__(self, message: str = "Invalid note ID") -> None:
        super().__init__(message)


class MatchType(Enum):
    TITLE = "title"
    CONTENT = "content"


@dataclass
class NoteMetadata:
    id: int
    title: str
    created: str
    last_updated: str
    path: Path


@dataclass
class NoteSearchResult:
    note: NoteMetadata
    match_type: MatchType
    preview: str | None = None


@dataclass
class _Header:
    title: str
    created: str
    last_updated: str


@contextmanager
def _io_errors() -> Iterator[None]:
    try:
        yield
    except (OSError, UnicodeDecodeError) as exc:
        raise NoteError(f"I/O error: {exc}") from exc


def _now() -> str:
    return datetime.now().strftime(_TIMESTAMP_FORMAT)


def _read_lines(path: Path) -> list[str]:
    with _io_errors():
        text = path.read_text(encoding="utf-8")
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _write_note(path: Path, header: _Header, content: str, *, exclusive: bool = False) -> None:
    with _io_errors():
        with path.open("x" if exclusive else "w", encoding="utf-8", newline="\n") as fh:
            fh.write(f"title: {header.title}\n")
            fh.write(f"created: {header.created}\n")
            fh.write(f"last_updated: {header.last_updated}\n")
            fh.write(f"{_SEPARATOR}\n")
            fh.write(f"{content}\n")


def sanitize_filename(filename: str) -> str:
    """Replace every character that is not an ASCII letter or digit with '_'."""
    return "".join(c if c.isascii() and c.isalnum() else "_" for c in filename)


def extract_preview(content: str, keyword: str) -> str:
    """Return the text around the first occurrence of a lower-case keyword."""
    pos = content.lower().find(keyword)
    if pos < 0:
        return ""
    start = max(pos - _PREVIEW_CONTEXT, 0)
    end = min(pos + len(keyword) + _PREVIEW_CONTEXT, len(content))
    preview = content[start:end]
    if start > 0:
        preview = "..." + preview
    if end < len(content):
        preview += "..."
    return preview.replace("\n", " ")


class NoteApp:
    """Creates, lists, reads, searches and removes notes in one directory."""

    def __init__(self, notes_dir: str | Path) -> None:
        self.notes_dir = Path(notes_dir)

    @classmethod
    def from_config(cls, config_path: str | Path | None = None) -> "NoteApp":
        """Build an app from the stored configuration."""
        return cls(Config.load(config_path).notes_dir)

    def create_note(self, title: str, content: str | None = None) -> Path:
        """Create a note; without content, read it from standard input."""
        timestamp = _now()
        path = self._note_path(title)
        if path.exists():
            raise NoteExistsError()

        if content is None:
            print("Enter your note content (press Ctrl+D when finished):")
            with _io_errors():
                content = sys.stdin.read()

        try:
            _write_note(path, _Header(title, timestamp, timestamp), content, exclusive=True)
        except FileExistsError as exc:  # pragma: no cover - race with another writer
            raise NoteExistsError() from exc
        return path

    def list_notes(self) -> list[NoteMetadata]:
        """Return every note in the directory; ids count all directory entries."""
        with _io_errors():
            entries = sorted(self.notes_dir.iterdir())
        notes = []
        for index, path in enumerate(entries, start=1):
            header = self._read_header(path)
            if header is not None:
                notes.append(
                    NoteMetadata(
                        id=index,
                        title=header.title,
                        created=header.created,
                        last_updated=header.last_updated,
                        path=path,
                    )
                )
        return notes

    def show_note(self, identifier: str) -> str:
        """Return the body of a note, found by id or title."""
        path = self._find_note_path(identifier)
        body = []
        in_content = False
        for line in _read_lines(path):
            if in_content:
                body.append(line + "\n")
            elif line == _SEPARATOR:
                in_content = True
        return "".join(body)

    def delete_note(self, identifier: str) -> None:
        """Remove a note, found by id or title."""
        path = self._find_note_path(identifier)
        with _io_errors():
            path.unlink()

    def search_notes(self, keyword: str) -> list[NoteSearchResult]:
        """Find notes whose title or body contains the keyword, ignoring case."""
        keyword_lower = keyword.lower()
        results = []
        for note in self.list_notes():
            if keyword_lower in note.title.lower():
                results.append(NoteSearchResult(note, MatchType.TITLE))
                continue
            try:
                content = self.show_note(note.title)
            except NoteError:
                continue
            if keyword_lower in content.lower():
                results.append(
                    NoteSearchResult(
                        note, MatchType.CONTENT, extract_preview(content, keyword_lower)
                    )
                )
        return results

    def update_note(self, identifier: str, new_content: str) -> None:
        """Replace the body of a note and refresh its last-updated time."""
        path = self._find_note_path(identifier)
        header = self._read_header(path)
        if header is None:
            raise NoteError(f"Not a valid note: {path}")
        header.last_updated = _now()
        _write_note(path, header, new_content)

    def _note_path(self, title: str) -> Path:
        return self.notes_dir / sanitize_filename(title)

    def _find_note_path(self, identifier: str) -> Path:
        if _ID_PATTERN.fullmatch(identifier) and int(identifier) < _MAX_ID:
            note_id = int(identifier)
            notes = self.list_notes()
            if note_id == 0 or note_id > len(notes):
                raise InvalidIdError()
            return notes[note_id - 1].path

        path = self._note_path(identifier)
        if not path.exists():
            raise NoteNotFoundError()
        return path

    @staticmethod
    def _read_header(path: Path) -> _Header | None:
        if not path.is_file():
            return None
        header = _Header("", "", "")
        found_title = found_created = False
        for line in _read_lines(path):
            if line.startswith("title: "):
                header.title = line[len("title: "):]
                found_title = True
            elif line.startswith("created: "):
                header.created = line[len("created: "):]
                found_created = True
            elif line.startswith("last_updated: "):
                header.last_updated = line[len("last_updated: "):]
            elif line == _SEPARATOR:
                break
        return header if found_title and found_created else None