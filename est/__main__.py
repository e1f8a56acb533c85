"""
Resolve a query from the command line and print the destination URL.

Usage:
    python -m est [--config PATH] QUERY...
    python -m est [--config PATH] --list

Exit codes:
    0  resolved
    1  nothing found / engine not accepted
    2  malformed query or usage
    3  configuration or internal error
"""

import sys

from loguru import logger

from .config import configure_logging, load_config, load_settings
from .errors import ConfigError
from .search import Instance, NotAccepted, Nothing, QuerySyntaxError, ReactionError

USAGE = "usage: python -m est [--config PATH] (--list | QUERY...)"


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    config_path = None
    if args[:1] == ["--config"]:
        if len(args) < 2:
            print(USAGE, file=sys.stderr)
            return 2
        config_path, args = args[1], args[2:]

    if not args:
        print(USAGE, file=sys.stderr)
        return 2

    try:
        config = load_config(config_path)
        configure_logging(load_settings(config))
        instance = Instance.compose(config)
    except ConfigError as e:
        logger.error(str(e))
        return 3

    if args == ["--list"]:
        for engine_id, identifier, description in instance.engines():
            label = engine_id or "(default)"
            alias = f" -> {identifier}" if identifier != engine_id else ""
            print(f"{label}{alias}" + (f"\t{description}" if description else ""))
        return 0

    text = " ".join(args)
    try:
        navigate = instance.search(text)
    except QuerySyntaxError as e:
        logger.error(f"Bad query: {e}")
        return 2
    except (Nothing, NotAccepted) as e:
        logger.error(f"{text}: {e}")
        return 1
    except ReactionError as e:
        logger.error(f"{text}: {e}")
        return 3

    print(navigate.url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
