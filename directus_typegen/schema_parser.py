"""Convert OpenAPI schemas to TypeScript type expressions.

Handles:
- Primitive types (string, integer, number, boolean, null)
- Arrays and inline objects (required vs optional properties)
- additionalProperties index signatures
- $ref pointers, emitted as indexed access on `components`
- allOf (intersection), oneOf/anyOf (union)
- enum literal unions
- nullable (3.0) and type lists (3.1)
- description -> doc comments
"""

from __future__ import annotations

import json
import re
from typing import Any

INDENT = "  "

_PRIMITIVES: dict[str, str] = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "null": "null",
}

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _strip_html(text: str) -> str:
    """Strip HTML tags and collapse whitespace."""
    text = re.sub(r"<[^>]+>", "", text)
    text = re.sub(r"\s+", " ", text).strip()
    return text


def doc_comment(description: str | None) -> str | None:
    """Render a description as a single-line JSDoc comment."""
    if not description:
        return None
    text = _strip_html(description).replace("*/", "*\\/")
    if not text:
        return None
    return f"/** {text} */"


def property_key(name: str) -> str:
    """Quote a property name unless it is a plain identifier."""
    if _IDENTIFIER.match(name):
        return name
    return json.dumps(name)


def ref_to_type(ref: str) -> str:
    """Turn a local $ref pointer into an indexed access type.

    '#/components/schemas/Users' -> 'components["schemas"]["Users"]'
    """
    parts = [
        p.replace("~1", "/").replace("~0", "~")
        for p in ref.lstrip("#/").split("/")
    ]
    return parts[0] + "".join(f"[{json.dumps(p)}]" for p in parts[1:])


def _is_compound(ts_type: str) -> bool:
    return " | " in ts_type or " & " in ts_type


def _parenthesize(ts_type: str) -> str:
    return f"({ts_type})" if _is_compound(ts_type) else ts_type


def _join(types: list[str], separator: str) -> str:
    """Join member types, dropping duplicates but keeping order."""
    unique = list(dict.fromkeys(types))
    if len(unique) == 1:
        return unique[0]
    return f" {separator} ".join(_parenthesize(t) for t in unique)


def _with_null(ts_type: str) -> str:
    if ts_type == "null" or ts_type.endswith(" | null"):
        return ts_type
    return f"{_parenthesize(ts_type) if ' & ' in ts_type else ts_type} | null"


def _render_object(schema: dict[str, Any], depth: int) -> str:
    """Render an object schema as an inline type literal."""
    properties: dict[str, Any] = schema.get("properties", {})
    additional = schema.get("additionalProperties")
    if not properties and not additional:
        return "Record<string, unknown>"

    required = set(schema.get("required", []))
    pad = INDENT * (depth + 1)
    lines = ["{"]
    for name, prop_schema in properties.items():
        comment = doc_comment(prop_schema.get("description"))
        if comment:
            lines.append(f"{pad}{comment}")
        optional = "" if name in required else "?"
        prop_type = resolve_schema_type(prop_schema, depth + 1)
        lines.append(f"{pad}{property_key(name)}{optional}: {prop_type};")

    if additional:
        value_type = "unknown" if additional is True else resolve_schema_type(additional, depth + 1)
        lines.append(f"{pad}[key: string]: {value_type};")

    lines.append(f"{INDENT * depth}}}")
    return "\n".join(lines)


def _resolve_typed(schema: dict[str, Any], schema_type: str, depth: int) -> str:
    if schema_type == "array":
        item_type = resolve_schema_type(schema.get("items", {}), depth)
        return f"{_parenthesize(item_type)}[]"
    if schema_type == "object":
        return _render_object(schema, depth)
    return _PRIMITIVES.get(schema_type, "unknown")


def resolve_schema_type(schema: dict[str, Any], depth: int = 0) -> str:
    """Resolve an OpenAPI schema to a TypeScript type string.

    `depth` is the indentation level of the line the type starts on, so
    that nested object literals close at the matching column.
    """
    if not schema:
        return "unknown"

    if "$ref" in schema:
        ts_type = ref_to_type(schema["$ref"])
    elif "allOf" in schema:
        ts_type = _join([resolve_schema_type(s, depth) for s in schema["allOf"]], "&")
    elif "oneOf" in schema or "anyOf" in schema:
        members = schema.get("oneOf") or schema.get("anyOf") or []
        ts_type = _join([resolve_schema_type(s, depth) for s in members], "|")
    elif "enum" in schema:
        ts_type = _join([json.dumps(v) for v in schema["enum"]], "|")
    else:
        schema_type = schema.get("type")
        if isinstance(schema_type, list):
            ts_type = _join([_resolve_typed(schema, t, depth) for t in schema_type], "|")
        elif schema_type is None and "properties" in schema:
            ts_type = _render_object(schema, depth)
        elif schema_type is None:
            ts_type = "unknown"
        else:
            ts_type = _resolve_typed(schema, schema_type, depth)

    if schema.get("nullable", False):
        ts_type = _with_null(ts_type)
    return ts_type


def parse_schemas(schemas: dict[str, Any], depth: int = 2) -> list[dict[str, Any]]:
    """Build one template entry per component schema, in document order."""
    entries: list[dict[str, Any]] = []
    for key, schema in schemas.items():
        entries.append({
            "key": key,
            "property_key": property_key(key),
            "type": resolve_schema_type(schema or {}, depth),
            "comment": doc_comment((schema or {}).get("description")),
        })
    return entries
