"""Application entry point — CLI dispatcher for create-ts-router-vite.

Handles three execution modes:
  1. `create-ts-router-vite --version` — prints the version and exits.
  2. `create-ts-router-vite --verbose` — same as default, with debug logging
     for the package.
  3. Default — configures logging, loads settings, and runs the interactive
     session. The process exit code is the session's return value.
"""

import logging
import sys


def main() -> None:
    """Main entry point."""
    args = sys.argv[1:]

    if "--version" in args:
        from . import __version__

        print(f"create-ts-router-vite {__version__}")
        return

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )
    if "--verbose" in args:
        logging.getLogger("create_ts_router_vite").setLevel(logging.DEBUG)

    from .session import run_session
    from .settings import load_settings

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}\n")
        print("Check your settings.toml configuration.")
        sys.exit(1)

    sys.exit(run_session(settings))


if __name__ == "__main__":
    main()
