"""Build Jinja2 template context from a validated Directus spec.

Partitions the component schemas into app and directus collections and
assembles the full context dict for the declaration templates.
"""

from __future__ import annotations

from typing import Any

from .config import GeneratorOptions
from .loader import get_schemas
from .naming import partition_schemas
from .schema_parser import parse_schemas


def build_context(spec: dict[str, Any], options: GeneratorOptions) -> dict[str, Any]:
    """Build the full template context from the OpenAPI spec."""
    schemas = get_schemas(spec)
    partition = partition_schemas(schemas)

    return {
        "schemas": parse_schemas(schemas),
        "app_collections": partition.app,
        "directus_collections": partition.directus,
        "aliases": partition.aliases,
        "collection_count": len(partition),
        "app_type_name": options.app_type_name,
        "directus_type_name": options.directus_type_name,
        "all_type_name": options.all_type_name,
        "wrap_global": options.wrap_global,
    }
