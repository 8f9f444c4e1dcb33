import sys
import argparse
import logging

import simloc_config as config
from simloc_logger import get_logger, set_console_level
from core.locale_provider import StaticLocaleProvider
from core.locale_source import DirectoryLocaleSource
from simloc_exceptions import LocaleLoadError, ParseError
from simloc_localization import create_registry
from parser.core import parse_text

logger = get_logger("main")


def cmd_check(args) -> int:
    """Parse every locale file in the directory and report problems."""
    source = DirectoryLocaleSource(config.resolve_localization_dir(args.dir))
    locales = source.list_locales()
    if not locales:
        print(f"No locale files found in {source.directory}")
        return 1

    failures = 0
    for locale_id in locales:
        try:
            entries = parse_text(source.read(locale_id))
        except (ParseError, LocaleLoadError) as e:
            failures += 1
            print(f"{locale_id}: ERROR {e}")
            continue

        unique = len({entry.source for entry in entries})
        line = f"{locale_id}: {len(entries)} entries"
        if unique != len(entries):
            line += f" ({len(entries) - unique} duplicate source phrases)"
        print(line)

    logger.debug(f"Checked {len(locales)} locale files, {failures} failed")
    return 1 if failures else 0


def cmd_list(args) -> int:
    source = DirectoryLocaleSource(config.resolve_localization_dir(args.dir))
    for locale_id in source.list_locales():
        print(locale_id)
    return 0


def cmd_lookup(args) -> int:
    provider = StaticLocaleProvider(args.locale) if args.locale else None
    registry = create_registry(args.dir, locale_provider=provider)
    print(registry.tr(args.phrase))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simloc",
        description="Inspect flat translation files and look up phrases.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
        )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging on the console."
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {config.VERSION}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Validate every locale file in a directory.")
    check.add_argument(
        "dir",
        nargs='?',
        default=None,
        help=f"Localization directory (default: ${config.LOCALIZATION_DIR_ENV} or ./{config.DEFAULT_LOCALIZATION_DIR})."
    )
    check.set_defaults(func=cmd_check)

    list_cmd = subparsers.add_parser("list", help="List available locale identifiers.")
    list_cmd.add_argument("dir", nargs='?', default=None, help="Localization directory.")
    list_cmd.set_defaults(func=cmd_list)

    lookup = subparsers.add_parser("lookup", help="Translate a phrase.")
    lookup.add_argument("phrase", help="Source phrase to translate.")
    lookup.add_argument(
        "-l", "--locale",
        default=None,
        help="Locale identifier such as tr_TR (default: taken from LANG)."
    )
    lookup.add_argument("-d", "--dir", default=None, help="Localization directory.")
    lookup.set_defaults(func=cmd_lookup)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_console_level(logging.DEBUG)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
