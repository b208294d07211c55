"""Local JSON storage of yearly prayer time documents."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path

from .models import PrayerTimesResponse

ROOT_DIR_NAME = ".prayer-times-cli"


def default_root_dir() -> Path:
    """Return the hidden directory in the user's home that holds cached data."""
    return Path.home() / ROOT_DIR_NAME


class Storage(ABC):
    """A place to keep a prayer times document between runs."""

    @abstractmethod
    def save(self, data: PrayerTimesResponse) -> None:
        """Store the document."""

    @abstractmethod
    def load(self) -> PrayerTimesResponse:
        """Return the stored document; raise OSError or ValueError if it cannot be read."""


class FileStorage(Storage):
    """Stores a document as indented JSON in a file under a root directory."""

    def __init__(self, file_name: str, root_dir: Path | str | None = None) -> None:
        self.file_name = file_name
        self.root_dir = Path(root_dir) if root_dir is not None else None

    def __repr__(self) -> str:
        return f"FileStorage(file_name={self.file_name!r}, root_dir={self.root_dir!r})"

    def path(self) -> Path:
        """Return the file's full path, creating the root directory if needed."""
        root = self.root_dir if self.root_dir is not None else default_root_dir()
        root.mkdir(mode=0o700, parents=True, exist_ok=True)
        return root / self.file_name

    def save(self, data: PrayerTimesResponse) -> None:
        text = json.dumps(data.to_dict(), indent=4, ensure_ascii=False)
        self.path().write_text(text, encoding="utf-8")

    def load(self) -> PrayerTimesResponse:
        text = self.path().read_text(encoding="utf-8")
        return PrayerTimesResponse.from_dict(json.loads(text))