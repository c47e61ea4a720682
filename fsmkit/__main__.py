import logging
import os

from fsmkit.commands import main


def get_log_level() -> int:
    if os.environ.get("FSMKIT_DEBUG"):
        return logging.DEBUG
    level = logging.getLevelName(os.environ.get("FSMKIT_LOG_LEVEL", "INFO").upper())
    # unknown names come back as "Level <name>"
    return level if isinstance(level, int) else logging.INFO


def run() -> None:
    logging.basicConfig(format="%(asctime)s - %(levelname)s - %(name)s - %(message)s", level=get_log_level())
    main(prog="fsmkit")


if __name__ == "__main__":
    run()
