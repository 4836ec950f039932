# %%
#::IMPORTS & SETTINGS

"""Serves the Great Migration map.

python main.py [--host HOST] [--port PORT] [--debug | --no-debug] [--verbose]
"""
import argparse
from typing import List, Optional

from migration_map.app import create_app
from migration_map.config import Settings
from migration_map.logging import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive Great Migration map")
    parser.add_argument("--host", default=None, help="interface to bind")
    parser.add_argument("--port", type=int, default=None, help="port to listen on")
    parser.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="run Dash in debug mode",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="log at DEBUG level"
    )

    return parser.parse_args(argv)


# %%
#::APP


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    settings = Settings()

    logger = setup_logging("DEBUG" if args.verbose else settings.logging.verbosity_level)

    app = create_app(settings)

    host = args.host or settings.dash.host
    port = args.port or settings.dash.port
    debug = settings.dash.debug if args.debug is None else args.debug

    logger.info(f"Serving on http://{host}:{port}")
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
