"""Decode the gzip-compressed OpenWeatherMap bulk city list into an id -> name table."""

import gzip
import json
import logging
import zlib

from weathermap.ingest.errors import DecompressionError, MalformedEntryError, ParseError

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"


def build_city_table(payload: bytes, strict: bool = False) -> dict[int, str]:
    """Build a city id -> name mapping from the raw .json.gz payload.

    The first entry for a given id wins; later duplicates are ignored.
    Entries without a usable id or name are skipped with a warning, or raise
    MalformedEntryError when strict is set.
    """
    # gzip.decompress accepts b"" and returns b""
    if not payload.startswith(GZIP_MAGIC):
        raise DecompressionError("City list is not valid gzip data: missing gzip header")
    try:
        raw = gzip.decompress(payload)
    except (OSError, EOFError, zlib.error) as e:
        raise DecompressionError(f"City list is not valid gzip data: {e}") from e

    return decode_city_list(raw, strict=strict)


def decode_city_list(raw: bytes, strict: bool = False) -> dict[int, str]:
    """Build the city table from an already-decompressed JSON array."""
    try:
        entries = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ParseError(f"City list is not valid JSON: {e}") from e

    if not isinstance(entries, list):
        raise ParseError(f"City list must be a JSON array, got {type(entries).__name__}")

    cities: dict[int, str] = {}
    skipped = 0
    for index, entry in enumerate(entries):
        parsed = _parse_entry(entry)
        if parsed is None:
            if strict:
                raise MalformedEntryError(index, entry)
            logger.warning("Skipping malformed city list entry %d: %r", index, entry)
            skipped += 1
            continue

        city_id, name = parsed
        if city_id in cities:
            logger.debug(
                "Ignoring duplicate city id %d (%r), keeping %r",
                city_id, name, cities[city_id],
            )
            continue
        cities[city_id] = name

    logger.debug(
        "Decoded %d cities from %d entries (%d skipped)",
        len(cities), len(entries), skipped,
    )
    return cities


def _parse_entry(entry: object) -> tuple[int, str] | None:
    if not isinstance(entry, dict):
        return None
    city_id = entry.get("id")
    name = entry.get("name")
    # bool is an int subclass; reject it explicitly
    if not isinstance(city_id, int) or isinstance(city_id, bool):
        return None
    if not isinstance(name, str):
        return None
    return city_id, name
