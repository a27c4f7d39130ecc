"""
Decoding of raw localization assets and (de)serialization of translation tables.

Mod assets sometimes embed their JSON after a binary or text preamble, so the
payload decoder starts at the first '{' byte rather than at offset zero.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .exceptions import ContentError, LocalizationParseError

JSON_MARKER = b"{"
PAYLOAD_SOURCE = "<payload>"

Table = dict[str, dict[str, str]]

_table_adapter: TypeAdapter[Table] = TypeAdapter(Table)


@dataclass
class DecodeResult:
    """Outcome of decoding an asset without raising.

    Exactly one of text or error is set.
    """
    text: str | None = None
    error: ContentError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def get_text(data: bytes) -> str:
    """Return the JSON text embedded in an asset.

    Args:
        data: Raw asset bytes, possibly preceded by non-JSON header bytes

    Returns:
        Everything from the first '{' byte to the end, decoded as UTF-8.
        Invalid byte sequences become U+FFFD.

    Raises:
        ContentError: If there is no '{' byte
    """
    index = data.find(JSON_MARKER)
    if index < 0:
        raise ContentError("Asset has no JSON content.", {"size": len(data)})
    return data[index:].decode("utf-8", errors="replace")


def decode_payload(data: bytes) -> DecodeResult:
    """Result-returning form of get_text for skip-and-continue loading loops."""
    try:
        return DecodeResult(text=get_text(data))
    except ContentError as e:
        return DecodeResult(error=e)


def parse_table(text: str, source: str = PAYLOAD_SOURCE) -> Table:
    """Parse JSON text into a key -> language -> string mapping.

    Args:
        text: JSON document text
        source: Where the text came from, used in error messages

    Raises:
        LocalizationParseError: If the text is not JSON, or not an object of
            objects of strings
    """
    try:
        raw: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise LocalizationParseError(
            f"Malformed JSON in {source}: {e.msg} (line {e.lineno}, column {e.colno})",
            source=source,
        ) from e

    try:
        return _table_adapter.validate_python(raw)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        ]
        raise LocalizationParseError(
            f"Unexpected localization structure in {source}: {'; '.join(problems[:5])}",
            source=source,
            details={"problems": problems},
        ) from e


def dump_table(table: Table, indent: int = 4) -> str:
    """Serialize a table as pretty-printed JSON, keeping key order and non-ASCII text."""
    return json.dumps(table, indent=indent, ensure_ascii=False) + "\n"
