"""A command-line note-taking application storing notes as plain text files."""

__version__ = "0.1.0"