"""Validate, dump and read the Directus OpenAPI document."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class SpecError(Exception):
    """The server answered with an error list instead of a schema."""

    def __init__(self, message: str, errors: list[Any]) -> None:
        super().__init__(message)
        self.errors = errors


def assert_spec_has_no_errors(spec: dict[str, Any]) -> None:
    """Fail hard when the document carries a non-empty error list."""
    errors = spec.get("errors")
    if errors:
        print(json.dumps(errors, indent=2), file=sys.stderr)
        raise SpecError("Could not generate TypeScript definitions", list(errors))


def get_schemas(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract component schemas from the spec."""
    return (spec.get("components") or {}).get("schemas") or {}


def dump_spec(spec: dict[str, Any], path: str | Path) -> Path:
    """Write the validated spec as pretty-printed JSON."""
    output_path = Path.cwd() / path
    output_path.write_text(
        json.dumps(spec, indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.debug("Wrote spec to %s", output_path)
    return output_path


def load_spec(path: str | Path) -> dict[str, Any]:
    """Load a previously dumped spec from disk."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)
