"""Configuration file handling: where notes are stored."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import platformdirs
import tomli_w

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib

CONFIG_FILE = "rsnote.toml"
DEFAULT_NOTES_DIR = "rsnotes_storage"


class ConfigError(Exception):
    """Raised when the configuration cannot be read or written."""


def default_config_path() -> Path:
    """Return the path of the configuration file in the user's config directory."""
    return Path(platformdirs.user_config_dir()) / CONFIG_FILE


def _home_dir() -> Path:
    try:
        return Path.home()
    except RuntimeError:
        return Path(".")


@dataclass
class Config:
    """Application settings."""

    notes_dir: Path

    def __post_init__(self) -> None:
        self.notes_dir = Path(self.notes_dir)

    @classmethod
    def default(cls) -> "Config":
        """Settings used when the user accepts the defaults."""
        return cls(_home_dir() / DEFAULT_NOTES_DIR)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "Config":
        """Read the configuration, asking the user for it on first use."""
        path = Path(config_path) if config_path is not None else default_config_path()
        if not path.exists():
            return cls._init_config(path)

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"I/O error: {exc}") from exc

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Config parse error: {exc}") from exc

        notes_dir = data.get("notes_dir")
        if not isinstance(notes_dir, str):
            raise ConfigError("Config parse error: missing or invalid field `notes_dir`")
        return cls(Path(notes_dir))

    def save(self, config_path: str | Path | None = None) -> None:
        """Write the configuration, creating its directory if needed."""
        path = Path(config_path) if config_path is not None else default_config_path()
        try:
            text = tomli_w.dumps({"notes_dir": str(self.notes_dir)})
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Config serialize error: {exc}") from exc
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"I/O error: {exc}") from exc

    @classmethod
    def _init_config(cls, config_path: Path) -> "Config":
        default = cls.default()

        print("Welcome to rsnote!")
        print("Where would you like to store your notes?")
        print(f"Default location: {default.notes_dir}")
        print("Press Enter to use default, or enter a custom path:")

        try:
            answer = sys.stdin.readline().strip()
        except OSError as exc:
            raise ConfigError(f"I/O error: {exc}") from exc

        config = cls(Path(answer)) if answer else default
        config.save(config_path)

        try:
            config.notes_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"I/O error: {exc}") from exc

        print(f"Configuration saved. Notes will be stored in: {config.notes_dir}")
        return config