"""
Merging of mod localization payloads into the shared translation table.

The shared table accumulates every key any mod has shipped, so translators can
fill in the preserved language by hand. On each load the mod's payload is
merged against that table: first-seen keys are appended with the source
language and a sentinel placeholder, and curated translations already in the
table take precedence over whatever the payload ships for the preserved
language.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .codec import PAYLOAD_SOURCE, Table, dump_table, parse_table
from .config import LocalizationConfig
from .exceptions import LocalizationParseError
from .models import LocalizationEntry

logger = logging.getLogger("localization-utilities")


def has_curated_value(value: str | None, sentinel: str) -> bool:
    """True for a translation a person actually entered (non-blank, not the sentinel)."""
    return value is not None and bool(value.strip()) and value != sentinel


def merge_localization(
    payload: Table,
    prior: Table,
    config: LocalizationConfig | None = None,
) -> tuple[Table, list[LocalizationEntry]]:
    """Merge a payload against the prior table.

    Neither argument is mutated.

    For a key missing from the prior table, the table gains an entry holding
    only the payload's source-language value (when present) and the sentinel
    for the preserved language. The returned entry for that key keeps the
    payload's values as shipped.

    For a key already in the prior table, a curated preserved-language value
    in the table replaces the payload's value in the returned entry. The
    table entry is left as it was.

    Args:
        payload: Newly loaded key -> language -> string mapping
        prior: Existing shared table
        config: Language names and sentinel; defaults when omitted

    Returns:
        (updated table, entries in payload order)
    """
    config = config or LocalizationConfig()
    source_language = config.source_language
    preserved_language = config.preserved_language
    sentinel = config.sentinel

    table: Table = {key: dict(languages) for key, languages in prior.items()}
    entries: list[LocalizationEntry] = []

    for key, languages in payload.items():
        translations = dict(languages)
        existing = table.get(key)

        if existing is None:
            new_entry: dict[str, str] = {}
            if source_language in translations:
                new_entry[source_language] = translations[source_language]
            if preserved_language not in new_entry:
                new_entry[preserved_language] = sentinel
            table[key] = new_entry
        else:
            curated = existing.get(preserved_language)
            if has_curated_value(curated, sentinel):
                translations[preserved_language] = curated

        entries.append(LocalizationEntry(key=key, translations=translations))

    return table, entries


class TranslationTable:
    """The shared translation table file.

    Example:
        >>> table = TranslationTable(Path("Mods/Localization.json"))
        >>> data = table.load()
        >>> data["GAMEPLAY_Rifle"]["Simplified Chinese"] = "步枪"
        >>> table.save(data)
    """

    def __init__(self, path: Path, config: LocalizationConfig | None = None):
        self.path = Path(path)
        self.config = config or LocalizationConfig()

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Table:
        """Read the table, or return an empty one if the file does not exist.

        A leading UTF-8 byte order mark, as added by some editors, is ignored.

        Raises:
            LocalizationParseError: If the file is not UTF-8 or is malformed
        """
        if not self.exists():
            logger.debug(f"No translation table at {self.path}, starting empty")
            return {}
        try:
            with open(self.path, "r", encoding="utf-8-sig") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise LocalizationParseError(
                f"Translation table {self.path} is not valid UTF-8: {e}",
                source=str(self.path),
            ) from e
        table = parse_table(text, source=str(self.path))
        logger.debug(f"Loaded {len(table)} keys from {self.path}")
        return table

    def save(self, table: Table) -> None:
        """Write the table atomically (write to temp, then rename).

        Parent directories are created as needed. On failure the existing
        table is left as it was and the temp file is removed.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_file = self.path.with_suffix(".tmp")
        try:
            with open(temp_file, "w", encoding="utf-8") as f:
                f.write(dump_table(table, indent=self.config.indent))
            temp_file.replace(self.path)
            logger.debug(f"Saved {len(table)} keys to {self.path}")
        except Exception as e:
            if temp_file.exists():
                temp_file.unlink()
            logger.error(f"Error writing translation table {self.path}: {e}")
            raise


@dataclass
class MergeResult:
    """Outcome of a merge that had something to do."""
    table: Table
    entries: list[LocalizationEntry]
    table_path: Path
    added_keys: list[str] = field(default_factory=list)


class LocalizationMerger:
    """Merges payload text into the table file on disk."""

    def __init__(self, config: LocalizationConfig | None = None):
        self.config = config or LocalizationConfig()

    def merge(self, contents: str, table_path: Path | None = None) -> MergeResult | None:
        """Merge payload text into the table file and persist it.

        Both the table and the payload are parsed before anything is written,
        so a parse failure leaves the file untouched.

        Args:
            contents: JSON payload text
            table_path: Table file; defaults to config.table_path

        Returns:
            MergeResult, or None when contents is blank (nothing to do)

        Raises:
            LocalizationParseError: If the table or payload is malformed
        """
        if not contents or not contents.strip():
            return None

        table_file = TranslationTable(table_path or self.config.table_path, self.config)
        prior = table_file.load()
        payload = parse_table(contents, source=PAYLOAD_SOURCE)

        table, entries = merge_localization(payload, prior, self.config)
        table_file.save(table)

        added = [key for key in payload if key not in prior]
        if added:
            logger.info(f"Added {len(added)} new key(s) to {table_file.path}")

        return MergeResult(
            table=table,
            entries=entries,
            table_path=table_file.path,
            added_keys=added,
        )
