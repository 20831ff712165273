# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2024/10/13 00:12:50
# @Author : Kariko Lin

"""`python -m pyflatini config.ini Section1 MyIntVariable --int`"""

import argparse
import logging
import sys

from .ini import IniError, ValueKind, load


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog='pyflatini', description='Look up one value in a flat INI file')
    parser.add_argument('file', help='Path to the INI file')
    parser.add_argument('section', help='Section name, without brackets')
    parser.add_argument('key', help='Key inside the section')
    parser.add_argument('--int', dest='kind', action='store_const',
                        const=ValueKind.INTEGER, default=ValueKind.STRING,
                        help='Read the value as an integer')
    parser.add_argument('--encoding', default=None,
                        help='File encoding (guessed when undecodable)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='[%(asctime)s] %(levelname)s: %(message)s')
    try:
        store = load(args.file, args.encoding)
        value = store.get(args.section, args.key, args.kind)
    except IniError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    print(f'{args.key} = {value}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
