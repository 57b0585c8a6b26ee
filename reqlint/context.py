"""
Shared context object for reqlint CLI commands.

This module defines the Click context object used to share configuration
and runtime options across CLI subcommands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from reqlint.config import ReqLintConfig


class ReqLintContext:
    """Per-invocation state shared between the CLI group and commands.

    Attributes:
        config_path: Path to the loaded configuration file, if any.
        config: Loaded configuration (defaults when no file was found).
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
    """

    __slots__ = ("config_path", "config", "verbose", "color")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.config: ReqLintConfig = ReqLintConfig()
        self.verbose: int = 0
        self.color: bool = True


#: Click decorator for injecting :class:`ReqLintContext` into commands.
pass_context = click.make_pass_decorator(ReqLintContext, ensure=True)
