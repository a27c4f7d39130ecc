"""
Localization MCP Server
Exposes loading and lookup of mod localizations as FastMCP tools.
"""

import json
import logging
from pathlib import Path
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from .assets import TextAsset
from .config import LocalizationConfig
from .exceptions import LocalizationError
from .manager import LocalizationManager

logger = logging.getLogger("localization-utilities")

logging.basicConfig(
    level=logging.DEBUG,
    )

config = LocalizationConfig.from_env()
manager = LocalizationManager(config)
logger.debug(f"📂 Translation table: {config.table_path.resolve()}")

mcp = FastMCP(
    name="localization-utilities"
)


# ----------------------------------------------------------------------
# Localization Tools
# ----------------------------------------------------------------------

def _load_localization_file_logic(manager_ref: LocalizationManager, path: str) -> str:
    file_path = Path(path)
    if not file_path.is_file():
        return f"❌ File not found: {path}"
    try:
        loaded = manager_ref.load_localization(TextAsset.from_path(file_path), str(file_path))
    except LocalizationError as e:
        return f"Error: {e}"
    if not loaded:
        return f"Nothing loaded from '{path}'."
    return f"✅ Loaded localization '{path}' into {manager_ref.config.table_path}"


def _load_localization_directory_logic(manager_ref: LocalizationManager, path: str) -> str:
    directory = Path(path)
    if not directory.is_dir():
        return f"❌ Directory not found: {path}"
    try:
        report = manager_ref.load_directory(directory)
    except LocalizationError as e:
        return f"Error: {e}"
    return f"📚 {report.summary()}"


def _get_translation_logic(manager_ref: LocalizationManager, key: str, language: str) -> str:
    text = manager_ref.registry.get_text(key, language)
    if text is None:
        return f"No '{language}' translation registered for '{key}'."
    return text


def _list_localization_sets_logic(manager_ref: LocalizationManager) -> str:
    sets = manager_ref.registry.sets
    if not sets:
        return "No localizations registered."
    summary = [
        {"entries": len(s), "from_json": s.from_json, "keys": s.keys[:10]}
        for s in sets
    ]
    return json.dumps(summary, indent=2, ensure_ascii=False)


@mcp.tool
def load_localization_file(
    path: Annotated[str, Field(description="Path to a localization asset (.json)")]
) -> str:
    """Merge one localization file into the shared table and register its entries."""
    return _load_localization_file_logic(manager, path)


@mcp.tool
def load_localization_directory(
    path: Annotated[str, Field(description="Directory to scan for localization files")]
) -> str:
    """Load every localization file under a directory."""
    return _load_localization_directory_logic(manager, path)


@mcp.tool
def get_translation(
    key: Annotated[str, Field(description="Localization key")],
    language: Annotated[str, Field(description="Language name, e.g. 'English'")] = "English",
) -> str:
    """Look up a registered translation."""
    return _get_translation_logic(manager, key, language)


@mcp.tool
def list_localization_sets() -> str:
    """List registered localization sets."""
    return _list_localization_sets_logic(manager)


logger.debug("✅ All tools successfully registered.")

def main() -> None:
    """Main entry point for the localization MCP server."""
    mcp.run()

if __name__ == "__main__":
    main()
