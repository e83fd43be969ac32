"""Subcommand modules for affixtrim.

Provides register_commands() which uses deferred imports to keep
``affixtrim --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from affixtrim.commands.chain import chain
    from affixtrim.commands.cut import cut_prefix, cut_suffix

    cli.add_command(cut_prefix)
    cli.add_command(cut_suffix)
    cli.add_command(chain)
