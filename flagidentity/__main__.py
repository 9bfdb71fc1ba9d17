#!/usr/bin/env python3
"""
Command-line country conversion.

Usage:
    python -m flagidentity code "Russia" 🇫🇷
    python -m flagidentity flag US "United Kingdom" UK
    python -m flagidentity name DE 🇯🇵 --locale ru
    python -m flagidentity list --locale ru

Prints one result per input, in order. Unresolved inputs print an empty
line and make the exit status 1.
"""

import argparse
import logging
import sys
from typing import List, Optional

from flagidentity.countries.countryapi import code, flag, list_countries, name
from flagidentity.countries.countrytables import list_locales


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flagidentity",
        description="Convert between country codes, names and flag emoji",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log table loading and locale fallback'
    )

    sub = parser.add_subparsers(dest='command', required=True)

    p_code = sub.add_parser('code', help='Flag emoji or name -> country code')
    p_code.add_argument('inputs', nargs='+')

    p_flag = sub.add_parser('flag', help='Country code or name -> flag emoji')
    p_flag.add_argument('inputs', nargs='+')

    p_name = sub.add_parser('name', help='Flag emoji or country code -> name')
    p_name.add_argument('inputs', nargs='+')
    p_name.add_argument(
        '--locale', '-l',
        default=None,
        help=f"Locale tag for names (available: {', '.join(list_locales())})"
    )

    p_list = sub.add_parser('list', help='List all countries')
    p_list.add_argument('--locale', '-l', default=None)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == 'list':
        df = list_countries(args.locale)
        for row in df.itertuples(index=False):
            print(f"{row.code}\t{row.flag}\t{row.name}")
        return 0

    if args.command == 'code':
        results = [code(i) for i in args.inputs]
    elif args.command == 'flag':
        results = [flag(i) for i in args.inputs]
    else:
        results = [name(i, args.locale) for i in args.inputs]

    for result in results:
        print(result if result is not None else "")

    return 0 if all(r is not None for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
