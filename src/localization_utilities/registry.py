"""
Registry of admitted localization sets, used for runtime text lookup.
"""

import logging
from typing import Iterator

from .models import LocalizationSet

logger = logging.getLogger("localization-utilities")


class LocalizationRegistry:
    """Collection of validated LocalizationSets for one application run.

    Create one at startup and hand it to whatever needs lookups. The registry
    only grows: sets are never removed, and adding the same set object twice
    has no effect. Lookups prefer the most recently admitted set, so a later
    mod overrides an earlier one for the same key.

    Example:
        >>> registry = LocalizationRegistry()
        >>> registry.add(LocalizationSet(entries=[
        ...     LocalizationEntry(key="greeting", translations={"English": "Hello"})
        ... ]))
        >>> registry.get_text("greeting", "English")
        'Hello'
    """

    def __init__(self) -> None:
        self._sets: list[LocalizationSet] = []

    def add(self, localization_set: LocalizationSet) -> bool:
        """Validate a set and admit it.

        Args:
            localization_set: The set to admit

        Returns:
            True if admitted, False if this exact set object was already present

        Raises:
            LocalizationValidationError: If the set is malformed; the registry
                is left unchanged
        """
        if localization_set in self:
            return False

        localization_set.validate_entries()
        localization_set.freeze()
        self._sets.append(localization_set)
        logger.debug(
            f"Registered localization set with {len(localization_set)} entries "
            f"(from_json={localization_set.from_json})"
        )
        return True

    def __contains__(self, localization_set: object) -> bool:
        return any(s is localization_set for s in self._sets)

    def __len__(self) -> int:
        return len(self._sets)

    def __iter__(self) -> Iterator[LocalizationSet]:
        return iter(list(self._sets))

    @property
    def sets(self) -> list[LocalizationSet]:
        """Admitted sets in admission order (copy)."""
        return list(self._sets)

    def get_text(self, key: str, language: str) -> str | None:
        """Look up a translation, newest set first. Returns None if not found."""
        for localization_set in reversed(self._sets):
            entry = localization_set.find(key)
            if entry is not None and language in entry.translations:
                return entry.translations[language]
        return None

    def keys(self) -> set[str]:
        """All keys known to any admitted set."""
        return {key for s in self._sets for key in s.keys}

    def languages(self) -> set[str]:
        """All language names used by any admitted entry."""
        return {
            language
            for s in self._sets
            for entry in s.entries
            for language in entry.translations
        }
