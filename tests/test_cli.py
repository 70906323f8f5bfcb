from pathlib import Path

import pytest

from rsnote.cli import build_parser, format_note_table, main, run
from rsnote.note import NoteApp, NoteMetadata, NoteNotFoundError


@pytest.fixture
def app(tmp_path):
    notes_dir = tmp_path / "notes"
    notes_dir.mkdir()
    return NoteApp(notes_dir)


def _meta(title):
    return NoteMetadata(
        id=1,
        title=title,
        created="2024-01-01 10:00:00",
        last_updated="2024-01-01 10:00:00",
        path=Path("x"),
    )


def test_parser_new_optional_content():
    args = build_parser().parse_args(["new", "Title"])
    assert args.command == "new"
    assert args.title == "Title"
    assert args.content is None


def test_parser_requires_command():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args([])
    assert info.value.code == 2


def test_main_without_command_exits_with_usage_error():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_format_empty_table():
    assert format_note_table([]) == "No notes found."


def test_format_table_layout_and_truncation():
    table = format_note_table([_meta("x" * 40)])
    lines = table.split("\n")
    assert lines[0].startswith("ID   | Title")
    assert lines[1] == "-" * 80
    assert "x" * 30 in lines[2]
    assert "x" * 31 not in lines[2]
    assert lines[2].startswith("1    | ")
    assert len(lines) == 3


def test_run_new_and_show(app, capsys):
    run(["new", "Greeting", "hello there"], app=app)
    out = capsys.readouterr().out
    assert out.startswith("Note 'Greeting' created successfully at ")
    run(["show", "Greeting"], app=app)
    assert capsys.readouterr().out == "hello there\n"


def test_run_list(app, capsys):
    run(["list"], app=app)
    assert capsys.readouterr().out == "No notes found.\n"
    app.create_note("One", "a")
    run(["list"], app=app)
    out = capsys.readouterr().out
    assert "One" in out
    assert "-" * 80 in out


def test_run_delete(app):
    app.create_note("Tmp", "a")
    run(["delete", "1"], app=app)
    assert app.list_notes() == []


def test_run_search(app, capsys):
    app.create_note("Recipes", "add the flour slowly")
    run(["search", "flour"], app=app)
    out = capsys.readouterr().out
    assert "Recipes" in out
    assert "content" in out
    run(["search", "nomatch"], app=app)
    assert capsys.readouterr().out == "No matching notes found.\n"


def test_run_show_missing_raises(app):
    with pytest.raises(NoteNotFoundError):
        run(["show", "missing"], app=app)