"""Public package surface for autopick.

Exports ``select_from_list`` for programmatic use and ``main`` for the CLI.
"""

from __future__ import annotations

from .selector import select_enum_member, select_from_list


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "select_enum_member", "select_from_list"]
