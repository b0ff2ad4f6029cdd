"""Catalog loading for use case records.

Reads JSON or YAML documents holding either a list of records or an
object with a ``use_cases`` list, and decodes them into immutable
UseCase structs.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import msgspec
import yaml

from .core.models import UseCase
from .exceptions import CatalogError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def decode_use_cases(
    items: Iterable[dict[str, Any]], source: str = "<memory>"
) -> list[UseCase]:
    """Convert parsed record mappings into UseCase structs.

    Raises:
        CatalogError: If a record is malformed or an id repeats
    """
    records = []
    seen_ids: set[str] = set()

    for i, item in enumerate(items):
        try:
            record = msgspec.convert(item, type=UseCase)
        except msgspec.ValidationError as e:
            raise CatalogError(source, f"record {i}: {e}") from e

        if record.id in seen_ids:
            raise CatalogError(source, f"duplicate id '{record.id}'")
        seen_ids.add(record.id)
        records.append(record)

    return records


def _extract_items(data: Any, source: str) -> list[dict[str, Any]]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("use_cases"), list):
        return data["use_cases"]
    raise CatalogError(
        source, "expected a list of records or an object with 'use_cases'"
    )


def parse_catalog(
    content: bytes | str, fmt: str = "json", source: str = "<memory>"
) -> list[UseCase]:
    """Parse catalog content in the given format ("json" or "yaml")."""
    try:
        if fmt == "yaml":
            data = yaml.safe_load(content)
        else:
            data = msgspec.json.decode(content)
    except (yaml.YAMLError, msgspec.DecodeError) as e:
        raise CatalogError(source, f"invalid {fmt.upper()}: {e}") from e

    return decode_use_cases(_extract_items(data, source), source)


def load_catalog(path: Path | str) -> list[UseCase]:
    """Load use cases from a JSON or YAML file.

    Args:
        path: Catalog file; ``.yaml``/``.yml`` files are read as YAML,
            anything else as JSON

    Returns:
        Records in file order

    Raises:
        CatalogError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise CatalogError(str(path), e.strerror or str(e)) from e

    fmt = "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"
    records = parse_catalog(content, fmt, str(path))
    logger.info("Loaded %d use cases from %s", len(records), path)
    return records
