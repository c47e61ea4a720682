import argparse
import json
from logging import getLogger

from fsmkit.config import AutomatonConfig

from .subcommand import Subcommand

logger = getLogger(__name__)


@Subcommand.register("show")
class ShowCommand(Subcommand):
    """print states and transitions of an automaton"""

    def setup(self) -> None:
        self.parser.add_argument(
            "config_filename",
            type=str,
            help="path to automaton config file (jsonnet)",
        )
        self.parser.add_argument(
            "--ext-vars",
            type=json.loads,
            default=None,
            help="external variables for jsonnet as a JSON object",
        )

    def run(self, args: argparse.Namespace) -> None:
        logger.info("Loading automaton from %s", args.config_filename)
        automaton = AutomatonConfig.from_jsonnet(args.config_filename, ext_vars=args.ext_vars).build()
        print(repr(automaton))
        automaton.show()
