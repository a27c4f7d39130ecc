"""
Raw localization assets and the sources that supply them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Protocol


@dataclass(frozen=True)
class TextAsset:
    """Raw asset bytes plus the name/path they were loaded under."""
    name: str
    data: bytes

    @classmethod
    def from_path(cls, path: Path | str) -> "TextAsset":
        path = Path(path)
        return cls(name=str(path), data=path.read_bytes())


class AssetSource(Protocol):
    """Anything that can hand out localization assets."""

    def iter_assets(self) -> Iterator[TextAsset]:
        ...


class DirectoryAssetSource:
    """Yields every file under a directory as a TextAsset, in sorted order.

    Files named in exclude (by default the shared translation table) are
    skipped so the merge output is never read back as a payload.
    """

    def __init__(
        self,
        root: Path | str,
        pattern: str = "*",
        exclude: tuple[str, ...] = ("Localization.json",),
    ):
        self.root = Path(root)
        self.pattern = pattern
        self.exclude = {name.lower() for name in exclude}

    def iter_assets(self) -> Iterator[TextAsset]:
        if not self.root.is_dir():
            return
        for path in sorted(self.root.rglob(self.pattern)):
            if not path.is_file() or path.name.lower() in self.exclude:
                continue
            yield TextAsset.from_path(path)
