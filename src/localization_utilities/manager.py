"""
LocalizationManager - entry point used by the host's mod-loading phase.

Routes localization assets by file extension, merges JSON payloads into the
shared translation table and admits the resulting sets to the registry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .assets import AssetSource, DirectoryAssetSource, TextAsset
from .codec import decode_payload, get_text
from .config import LocalizationConfig
from .merger import LocalizationMerger
from .models import LocalizationSet
from .registry import LocalizationRegistry

logger = logging.getLogger("localization-utilities")

JSON_EXTENSION = ".json"


@dataclass
class LoadReport:
    """Counts from a bulk load over an asset source."""
    loaded: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    unsupported: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.loaded) + len(self.skipped) + len(self.unsupported)

    def summary(self) -> str:
        return f"{len(self.loaded)} loaded, {len(self.skipped)} skipped, {len(self.unsupported)} unsupported"


def is_json_path(path: str) -> bool:
    """Case-insensitive .json suffix check."""
    return path.lower().endswith(JSON_EXTENSION)


class LocalizationManager:
    """Loads mod localizations into a registry and the shared table.

    Args:
        config: Table location and merge settings
        registry: Registry to admit sets into; a new one is created if omitted
    """

    def __init__(
        self,
        config: LocalizationConfig | None = None,
        registry: LocalizationRegistry | None = None,
    ):
        self.config = config or LocalizationConfig()
        self.registry = registry if registry is not None else LocalizationRegistry()
        self.merger = LocalizationMerger(self.config)

    def add_localizations(self, localization_set: LocalizationSet) -> bool:
        """Validate and admit a set. See LocalizationRegistry.add."""
        return self.registry.add(localization_set)

    def load_localization(self, asset: TextAsset, path: str) -> bool:
        """Load one asset if its path has a .json extension.

        Anything else is reported with a warning and ignored.

        Raises:
            ContentError: If a .json asset holds no JSON
            LocalizationParseError: If the payload or table is malformed
        """
        if is_json_path(path):
            return self.load_json_localization_asset(asset)

        logger.warning(f"Found localization '{path}' that could not be loaded.")
        return False

    def load_json_localization_asset(self, asset: TextAsset) -> bool:
        return self.load_json_localization(get_text(asset.data))

    def load_json_localization(self, contents: str) -> bool:
        """Merge JSON payload text into the table and register its entries.

        Returns:
            True when entries were registered, False for blank contents
        """
        result = self.merger.merge(contents, self.config.table_path)
        if result is None:
            return False

        self.add_localizations(LocalizationSet(entries=result.entries, from_json=True))
        return True

    def load_all(self, source: AssetSource) -> LoadReport:
        """Load every asset a source provides.

        Assets without JSON content are skipped with a warning; parse and
        validation errors propagate to the caller.
        """
        report = LoadReport()

        for asset in source.iter_assets():
            if not is_json_path(asset.name):
                logger.warning(f"Found localization '{asset.name}' that could not be loaded.")
                report.unsupported.append(asset.name)
                continue

            decoded = decode_payload(asset.data)
            if not decoded.ok:
                logger.warning(f"Skipping localization '{asset.name}': {decoded.error}")
                report.skipped.append(asset.name)
                continue

            self.load_json_localization(decoded.text)
            report.loaded.append(asset.name)

        logger.info(f"Localization load finished: {report.summary()}")
        return report

    def load_directory(self, directory: Path | str) -> LoadReport:
        """Load every file under a directory, skipping the shared table itself."""
        source = DirectoryAssetSource(directory, exclude=(self.config.table_filename,))
        return self.load_all(source)
