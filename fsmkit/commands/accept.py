import argparse
import json
from logging import getLogger

from fsmkit.config import AutomatonConfig

from .subcommand import Subcommand

logger = getLogger(__name__)


@Subcommand.register("accept")
class AcceptCommand(Subcommand):
    """check whether an automaton accepts the given strings"""

    def setup(self) -> None:
        self.parser.add_argument(
            "config_filename",
            type=str,
            help="path to automaton config file (jsonnet)",
        )
        self.parser.add_argument(
            "texts",
            nargs="+",
            help="input strings",
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

        all_accepted = True
        for text in args.texts:
            accepted = automaton.accepts(text)
            all_accepted &= accepted
            print(f"{text}\t{'accepted' if accepted else 'rejected'}")

        if not all_accepted:
            exit(1)
