"""
Localization utilities - merges per-mod localization payloads into a shared
translation table and registers them for runtime lookup.
"""

from .assets import AssetSource, DirectoryAssetSource, TextAsset
from .codec import DecodeResult, decode_payload, dump_table, get_text, parse_table
from .config import LocalizationConfig
from .exceptions import (
    ConfigError,
    ContentError,
    LocalizationError,
    LocalizationParseError,
    LocalizationValidationError,
)
from .manager import LoadReport, LocalizationManager
from .merger import LocalizationMerger, MergeResult, TranslationTable, merge_localization
from .models import LocalizationEntry, LocalizationSet
from .registry import LocalizationRegistry

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("localization-utilities")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable

__all__ = [
    "AssetSource",
    "ConfigError",
    "ContentError",
    "DecodeResult",
    "DirectoryAssetSource",
    "LoadReport",
    "LocalizationConfig",
    "LocalizationEntry",
    "LocalizationError",
    "LocalizationManager",
    "LocalizationMerger",
    "LocalizationParseError",
    "LocalizationRegistry",
    "LocalizationSet",
    "LocalizationValidationError",
    "MergeResult",
    "TextAsset",
    "TranslationTable",
    "decode_payload",
    "dump_table",
    "get_text",
    "merge_localization",
    "parse_table",
]
