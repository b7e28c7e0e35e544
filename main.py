"""Entry point for rendering JSDoc documentation from the repository root."""

from jsdoc_hover.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
