from __future__ import annotations

import argparse
from typing import Sequence

from fsmkit import __version__
from fsmkit.commands import accept, show  # noqa: F401
from fsmkit.commands.subcommand import Subcommand


def create_subcommand(prog: str | None = None) -> Subcommand:
    parser = argparse.ArgumentParser(usage="%(prog)s", prog=prog)
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s " + __version__,
    )
    return Subcommand(parser)


def main(prog: str | None = None, args: Sequence[str] | None = None) -> None:
    app = create_subcommand(prog)
    app(args)
