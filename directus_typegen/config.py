"""Runtime options for a generation run."""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_APP_TYPE_NAME = "AppCollections"
DEFAULT_DIRECTUS_TYPE_NAME = "DirectusCollections"
DEFAULT_ALL_TYPE_NAME = "Collections"

_TS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class ConfigurationError(Exception):
    """Invalid generator options."""


@dataclass(frozen=True)
class GeneratorOptions:
    host: str
    email: str
    password: str
    out_file: str
    password_is_static_token: bool = False
    app_type_name: str = DEFAULT_APP_TYPE_NAME
    directus_type_name: str = DEFAULT_DIRECTUS_TYPE_NAME
    all_type_name: str = DEFAULT_ALL_TYPE_NAME
    spec_out_file: str | None = None
    wrap_global: bool = True

    @property
    def type_names(self) -> tuple[str, str, str]:
        return (self.app_type_name, self.directus_type_name, self.all_type_name)

    def validate(self) -> None:
        """Reject aggregate type names that would produce invalid TypeScript."""
        for name in self.type_names:
            if not _TS_IDENTIFIER.match(name):
                raise ConfigurationError(f"{name!r} is not a valid TypeScript type name")
        if len(set(self.type_names)) != len(self.type_names):
            raise ConfigurationError(
                "appTypeName, directusTypeName and allTypeName must be distinct"
            )
