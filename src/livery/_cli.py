"""Livery CLI — livery locate / livery paths.

Entry point for the ``livery`` command-line interface.  Useful for checking
which file a name resolves to under a given theme.
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the livery CLI."""
    parser = argparse.ArgumentParser(
        prog="livery",
        description="Theme-aware layered resource lookup.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # livery locate
    locate_parser = subparsers.add_parser(
        "locate",
        help="Print the file a resource name resolves to",
    )
    locate_parser.add_argument("name", help="Resource name, e.g. @AppBundle/Resources/views/a.html")
    locate_parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    locate_parser.add_argument("--theme", default=None, help="Theme to resolve against")
    locate_parser.add_argument("--dir", default=None, help="Directory searched first")
    locate_parser.add_argument(
        "--all", action="store_true", help="Print every match, not only the first",
    )

    # livery paths
    paths_parser = subparsers.add_parser(
        "paths",
        help="Print the search paths for a theme",
    )
    paths_parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    paths_parser.add_argument("--theme", default=None, help="Theme to build paths for")

    return parser


def _get_version() -> str:
    """Get the package version."""
    from livery import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from livery._errors import LiveryError
    from livery.app import load_locator

    try:
        locator = load_locator(args.root, theme=args.theme)
        if args.command == "locate":
            result = locator.locate(args.name, args.dir, first=not args.all)
            for path in result if isinstance(result, list) else [result]:
                print(path)
        elif args.command == "paths":
            for path in locator.search_paths:
                print(path)
    except LiveryError as exc:
        print(f"livery: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
