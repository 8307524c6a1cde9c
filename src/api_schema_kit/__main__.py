"""Module entry point for `python -m api_schema_kit`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
