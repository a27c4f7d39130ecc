"""
Data models for localization entries and sets.
"""

from collections import Counter
from types import MappingProxyType
from typing import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from .exceptions import LocalizationValidationError


class LocalizationEntry(BaseModel):
    """A single translation key and its per-language strings.

    Entries are immutable: translations are held in a read-only mapping.

    Attributes:
        key: Localization key (e.g., "GAMEPLAY_Rifle")
        translations: Language name to translated string
                      (e.g., {"English": "Rifle", "Simplified Chinese": "步枪"})
    """
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Localization key")
    translations: Mapping[str, str] = Field(
        default_factory=dict,
        description="Language name to translated string",
    )

    @field_validator("translations", mode="after")
    @classmethod
    def make_read_only(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    def get(self, language: str, default: str | None = None) -> str | None:
        """Return the translation for a language, or default."""
        return self.translations.get(language, default)

    @property
    def languages(self) -> list[str]:
        return list(self.translations)


class LocalizationSet(BaseModel):
    """An ordered group of entries admitted to the registry together.

    Sets built from a mod's JSON payload carry from_json=True; sets built in
    code carry False. A set is frozen once the registry admits it: its
    entries become a tuple and no attribute can be reassigned.
    """
    entries: Sequence[LocalizationEntry] = Field(default_factory=list)
    from_json: bool = Field(default=False, description="Built from a user-supplied JSON payload")

    _frozen: bool = PrivateAttr(default=False)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Mark the set immutable. Called by the registry on admission."""
        self.entries = tuple(self.entries)
        self._frozen = True

    def __setattr__(self, name: str, value) -> None:
        if name != "_frozen" and getattr(self, "_frozen", False):
            raise TypeError(f"LocalizationSet is frozen; cannot set '{name}'")
        super().__setattr__(name, value)

    @property
    def keys(self) -> list[str]:
        return [entry.key for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def find(self, key: str) -> LocalizationEntry | None:
        """Return the entry for a key, or None if the set does not have it."""
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def validate_entries(self) -> None:
        """Check that the set is well formed.

        A well-formed set has non-blank keys, non-blank language names and no
        duplicate keys.

        Raises:
            LocalizationValidationError: If any problem is found. All problems
                are collected before raising.
        """
        problems: list[str] = []

        for index, entry in enumerate(self.entries):
            if not entry.key.strip():
                problems.append(f"Entry {index} has a blank key")
            for language in entry.translations:
                if not language.strip():
                    problems.append(f"Entry '{entry.key}' has a blank language name")

        counts = Counter(entry.key for entry in self.entries)
        for key, count in counts.items():
            if count > 1:
                problems.append(f"Duplicate key '{key}' appears {count} times")

        if problems:
            raise LocalizationValidationError(
                f"Localization set is invalid ({len(problems)} problem(s))",
                problems=problems,
            )
