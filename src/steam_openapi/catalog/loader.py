"""Catalog loader — reads a JSON or YAML catalog file into ApiCatalog."""

import json
import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from steam_openapi.catalog.base import ApiCatalog

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "steam_api.json"


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or does not validate."""


def load_catalog(file_path: Path) -> ApiCatalog:
    """Load a catalog file mapping service -> method -> descriptor.

    ``.json`` files are read with the json module, anything else as YAML.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {file_path}: {e}") from e

    try:
        if file_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogError(f"Cannot parse catalog {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"Catalog {file_path} must map service names to methods")

    try:
        catalog = ApiCatalog(services=data)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog {file_path}: {e}") from e

    logger.debug("Loaded %d services from %s", len(catalog.services), file_path)
    return catalog


@lru_cache(maxsize=1)
def load_default_catalog() -> ApiCatalog:
    """Return the catalog bundled with the package."""
    return load_catalog(DEFAULT_CATALOG_PATH)
