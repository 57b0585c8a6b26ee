"""
Executable module for reqlint.

Running:
    python -m reqlint

is equivalent to:
    reqlint

This module simply forwards execution to the CLI entrypoint defined in
`reqlint.cli`.
"""

from __future__ import annotations

import sys

from reqlint.cli import main


if __name__ == "__main__":
    sys.exit(main())
