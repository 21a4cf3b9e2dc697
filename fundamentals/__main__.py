"""Module entrypoint for `python -m fundamentals`."""

from __future__ import annotations

import sys

from fundamentals.cli import main

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
