"""Module entry point for `python -m jsonschema_gen`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
