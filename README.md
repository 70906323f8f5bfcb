# rsnote

A small command-line note-taking application. Each note is kept as a plain
text file in one directory. The file starts with a short header (title,
creation time, last update time), then a `---` line, then the note's content.
The file name is the title with every character that is not an ASCII letter
or digit replaced by `_`.

## Installation

```
pip install .
```

## First run

On first use, `rsnote` asks where notes should be stored. Press Enter to
accept the default (`rsnotes_storage` in your home directory), or type a
path. The choice is saved as `notes_dir` in `rsnote.toml` in your user
configuration directory, and the notes directory is created.

## Usage

Create a note, giving the content on the command line:

```
rsnote new "Shopping list" "milk, eggs, bread"
```

Leave out the content to type it in instead; finish with Ctrl+D:

```
rsnote new "Meeting notes"
```

Creating a note whose file name is already taken is an error.

List all notes with their IDs and timestamps:

```
rsnote list
```

IDs come from the position of each file in the sorted notes directory, so
they can change when notes are added or removed.

Show a note by title or by the ID shown in the list:

```
rsnote show "Shopping list"
rsnote show 1
```

Search titles and contents, ignoring case. A title match is reported as
`title`; a content match is reported as `content` with a short preview of
the text around the keyword:

```
rsnote search eggs
```

Delete a note by title or ID:

```
rsnote delete 1
```

Print the version:

```
rsnote --version
```

On an error `rsnote` prints `Error: ...` to standard error and exits with
status 1.

## Using it from Python

```python
from rsnote.note import NoteApp

app = NoteApp.from_config()          # or NoteApp("/path/to/notes")
path = app.create_note("Ideas", "Write more notes")
for note in app.list_notes():
    print(note.id, note.title, note.created, note.last_updated)

print(app.show_note("Ideas"))
app.update_note("Ideas", "Write even more notes")

for result in app.search_notes("notes"):
    print(result.note.title, result.match_type, result.preview)

app.delete_note("Ideas")
```

`NoteApp.from_config` and `rsnote.config.Config.load` take an optional path
to the configuration file; `Config.save` writes it back.

Errors are raised as `rsnote.note.NoteError` (with `NoteExistsError`,
`NoteNotFoundError` and `InvalidIdError` for the specific cases) and
`rsnote.config.ConfigError`.

## What it does not do

There is no command for editing a note: changing a note's content is only
available from Python through `NoteApp.update_note`. There is also no command
for changing the notes directory after the first run; edit `rsnote.toml` or
call `Config.save` instead.