import argparse
from typing import Callable, ClassVar, Dict, Optional, Sequence, Type


class Subcommand:
    _registry: ClassVar[Dict[str, Type["Subcommand"]]] = {}

    @classmethod
    def register(cls, name: str, exist_ok: bool = False) -> Callable[[Type["Subcommand"]], Type["Subcommand"]]:
        def wrapper(subcommand: Type["Subcommand"]) -> Type["Subcommand"]:
            if not exist_ok and name in cls._registry:
                raise ValueError(f"Subcommand '{name}' was already registered.")

            cls._registry[name] = subcommand
            return subcommand

        return wrapper

    @classmethod
    def by_name(cls, name: str) -> Type["Subcommand"]:
        return cls._registry[name]

    @classmethod
    def available_names(cls) -> Sequence[str]:
        return list(cls._registry)

    def __init__(self, parser: argparse.ArgumentParser) -> None:
        self.parser = parser

    def setup(self) -> None:
        pass

    def run(self, args: argparse.Namespace) -> None:
        raise NotImplementedError

    def __call__(self, args: Optional[Sequence[str]] = None) -> None:
        subparsers = self.parser.add_subparsers()
        for name, subcommand_class in self._registry.items():
            subparser = subparsers.add_parser(name, help=subcommand_class.__doc__)
            subcommand = subcommand_class(subparser)
            subcommand.setup()
            subparser.set_defaults(__subcommand=subcommand)

        namespace = self.parser.parse_args(args)
        subcommand = getattr(namespace, "__subcommand", None)
        if subcommand is None:
            self.parser.print_help()
            exit(1)
        subcommand.run(namespace)
