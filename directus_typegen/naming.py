"""Classify and rename Directus schema keys.

Pattern:
  - Items{Name}  -> App{Name}       (app collection)
  - {Name}       -> Directus{Name}  (system collection)

Examples:
  ItemsArticle   -> AppArticle
  ItemsTags      -> AppTags
  Users          -> DirectusUsers
  x-metadata     -> Directusx-metadata (aggregate property only, no alias)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

ITEMS_PREFIX = "Items"
APP_PREFIX = "App"
DIRECTUS_PREFIX = "Directus"

# Reserved key that never gets a standalone type alias
METADATA_KEY = "x-metadata"

_ALIAS_SKIP_KEYS: set[str] = {METADATA_KEY}


def schema_ref(key: str) -> str:
    """Return the indexed access type for a component schema."""
    return f'components["schemas"]["{key}"]'


def is_app_collection(key: str) -> bool:
    """Check if a schema key belongs to a user-defined collection."""
    return key.startswith(ITEMS_PREFIX)


def build_collection_name(key: str) -> str:
    """Build the exported name for a schema key.

    Returns a name like 'AppArticle' or 'DirectusUsers'.
    """
    if is_app_collection(key):
        return APP_PREFIX + key[len(ITEMS_PREFIX):]
    return DIRECTUS_PREFIX + key


@dataclass(frozen=True)
class Collection:
    key: str
    name: str
    is_app: bool

    @property
    def property_line(self) -> str:
        return f'  "{self.name}": {schema_ref(self.key)};'

    @property
    def alias_line(self) -> str:
        return f"export type {self.name} = {schema_ref(self.key)};"

    @property
    def has_alias(self) -> bool:
        return self.key not in _ALIAS_SKIP_KEYS


@dataclass
class Partition:
    """Collections split by category, in document order."""

    app: list[Collection] = field(default_factory=list)
    directus: list[Collection] = field(default_factory=list)
    aliases: list[Collection] = field(default_factory=list)

    @property
    def app_properties(self) -> list[str]:
        return [c.property_line for c in self.app]

    @property
    def directus_properties(self) -> list[str]:
        return [c.property_line for c in self.directus]

    @property
    def alias_lines(self) -> list[str]:
        return [c.alias_line for c in self.aliases]

    def __len__(self) -> int:
        return len(self.app) + len(self.directus)


def partition_schemas(keys: Iterable[str]) -> Partition:
    """Classify every schema key, keeping the order the document lists them in."""
    partition = Partition()
    for key in keys:
        collection = Collection(
            key=key,
            name=build_collection_name(key),
            is_app=is_app_collection(key),
        )
        (partition.app if collection.is_app else partition.directus).append(collection)
        if collection.has_alias:
            partition.aliases.append(collection)
    return partition
