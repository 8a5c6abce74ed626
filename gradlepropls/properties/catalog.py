"""
Property Catalog for gradle.properties

This module holds the set of property keys the server knows about.
The catalog is built once at startup and shared read-only by every request.

Design Principles:
1. Immutable (no mutation after construction)
2. Deterministic (keys always exposed in lexicographic order)
3. Fail fast (a missing catalog source is a startup error, never an empty catalog)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from types import MappingProxyType

import yaml

from gradlepropls.errors import CatalogError, CatalogUnavailable

DEFAULT_CATALOG_RESOURCE = "gradle_properties.yml"


@dataclass(frozen=True)
class PropertyDefinition:
    """A recognized gradle.properties key and its documentation."""

    key: str
    description: str = ""
    default: str | None = None
    since: str | None = None


class PropertyCatalog:
    """
    Immutable collection of recognized property keys.

    Usage:
        catalog = load_catalog()
        catalog.all()            # ('org.gradle.caching', ...)
        catalog.get('org.gradle.caching')

        # Tests can build a small synthetic catalog
        catalog = PropertyCatalog.from_keys(['a.b', 'a.c'])
    """

    def __init__(self, definitions: Iterable[PropertyDefinition]) -> None:
        by_key: dict[str, PropertyDefinition] = {}
        for definition in definitions:
            if definition.key in by_key:
                raise CatalogError(f"Duplicate property key: {definition.key}")
            by_key[definition.key] = definition

        self._definitions: Mapping[str, PropertyDefinition] = MappingProxyType(by_key)
        self._keys: tuple[str, ...] = tuple(sorted(by_key))

    @classmethod
    def from_keys(cls, keys: Iterable[str]) -> PropertyCatalog:
        """Build a catalog of bare keys without metadata."""
        return cls(PropertyDefinition(key=key) for key in keys)

    def all(self) -> tuple[str, ...]:
        """All property keys, lexicographic ascending."""
        return self._keys

    def get(self, key: str) -> PropertyDefinition | None:
        return self._definitions.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"PropertyCatalog({len(self)} keys)"


def load_catalog(path: Path | None = None) -> PropertyCatalog:
    """
    Load the property catalog from a YAML file.

    The file must contain a top-level ``properties`` mapping:

        properties:
          org.gradle.caching:
            description: Enables the build cache.
            default: "false"
            since: "3.5"

    Args:
        path: Catalog file to read. Uses the packaged catalog when None.

    Raises:
        CatalogUnavailable: The source is missing, unreadable or empty.
        CatalogError: The source defines the same key twice.
    """
    if path is None:
        source = resources.files("gradlepropls.properties").joinpath(
            DEFAULT_CATALOG_RESOURCE
        )
        name = DEFAULT_CATALOG_RESOURCE
    else:
        source = path
        name = str(path)

    try:
        with source.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise CatalogUnavailable(f"Cannot read property catalog {name}: {e}") from e
    except yaml.YAMLError as e:
        raise CatalogUnavailable(f"Invalid YAML in property catalog {name}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("properties"), dict):
        raise CatalogUnavailable(f"No 'properties' mapping in property catalog {name}")

    properties = data["properties"]
    if not properties:
        raise CatalogUnavailable(f"Property catalog {name} is empty")

    definitions = []
    for key, meta in properties.items():
        if meta is None:
            meta = {}
        if not isinstance(key, str) or not isinstance(meta, dict):
            raise CatalogUnavailable(f"Malformed entry {key!r} in property catalog {name}")

        default = meta.get("default")
        since = meta.get("since")
        definitions.append(
            PropertyDefinition(
                key=key,
                description=str(meta.get("description", "")).strip(),
                default=None if default is None else str(default),
                since=None if since is None else str(since),
            )
        )

    return PropertyCatalog(definitions)
