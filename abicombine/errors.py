from __future__ import annotations
from pathlib import Path
from typing import Optional


class CombineError(Exception):
    """Base error for a combine pass. Always fatal; the CLI maps it to exit 1."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class ReadError(CombineError):
    """Artifact file missing or unreadable."""


class ParseError(CombineError):
    """Artifact file is not valid JSON."""


class WriteError(CombineError):
    """Output file could not be created or written."""


class ConfigError(CombineError):
    """Config file unreadable or holding unknown/invalid fields."""
