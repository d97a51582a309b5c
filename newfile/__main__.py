"""Module execution support for ``python -m newfile``."""

from __future__ import annotations

from newfile.cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
