"""Entry point for Save Switcher CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .constants import VERSION
from .core import PromoteWorkflow, rank, scan_directory
from .log import configure_logging, logger
from .persistence import ConfigStore
from .platform import config_path

EXIT_OK = 0
EXIT_PROMOTE_FAILED = 1
EXIT_CONFIG_UNWRITABLE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="save-switcher",
        description="Pick a bf2savefile* save and copy it over bf2savefile.sav",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"save-switcher {VERSION}",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Persisted state file (default: config.txt next to the program)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log at DEBUG level",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write log records to this file",
    )

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument(
        "--list",
        nargs="?",
        const="",
        default=None,
        metavar="DIR",
        help="Print candidate saves in natural order and exit",
    )
    actions.add_argument(
        "--promote",
        metavar="NAME",
        help="Copy NAME over bf2savefile.sav without opening the UI",
    )

    parser.add_argument(
        "--dir",
        "-d",
        type=str,
        help="Directory for --promote (default: saved directory, else cwd)",
    )
    parser.add_argument(
        "--pin",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Pin flag to store with --promote (default: keep saved value)",
    )
    return parser


def _default_directory(store: ConfigStore) -> str:
    return store.load().directory or str(Path.cwd())


def _run_list(store: ConfigStore, directory: str) -> int:
    for name in rank(scan_directory(directory or _default_directory(store))):
        print(name)
    return EXIT_OK


def _run_promote(store: ConfigStore, name: str, directory: str | None, pin: bool | None) -> int:
    saved = store.load()
    folder = directory or saved.directory or str(Path.cwd())
    outcome = PromoteWorkflow(store).run(
        folder, name, saved.pin if pin is None else pin
    )

    if outcome.promote.ok:
        print("Success!")
    else:
        reason = outcome.promote.reason.value if outcome.promote.reason else "unknown"
        print(f"Failed: {reason} ({outcome.promote.detail})", file=sys.stderr)
    if not outcome.config_saved:
        print(f"Could not save settings to {store.path}", file=sys.stderr)

    if not outcome.promote.ok:
        return EXIT_PROMOTE_FAILED
    if not outcome.config_saved:
        return EXIT_CONFIG_UNWRITABLE
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Run Save Switcher."""
    args = _build_parser().parse_args(argv)

    configure_logging(
        debug=args.debug,
        log_file=Path(args.log_file) if args.log_file else None,
    )
    store = ConfigStore(config_path(args.config))
    logger.debug("using config %s", store.path)

    if args.list is not None:
        return _run_list(store, args.list)
    if args.promote is not None:
        return _run_promote(store, args.promote, args.dir, args.pin)

    try:
        from .app import run_app

        run_app(store)
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.debug("Fatal error in save-switcher", exc_info=True)
        import traceback

        traceback.print_exc()
        return 1
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
