"""Entry point: python -m directus_typegen

Logs in to Directus, fetches /server/specs/oas and writes TypeScript
declarations for every collection.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
