# SPDX-License-Identifier: EUPL-1.2

from __future__ import annotations

import argparse
import logging
import sys

from typing import List, Optional

import elfhdr


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='elfhdr', description='Show the header of an ELF file.')
    parser.add_argument(
        'input',
        help='input file path',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='log the decoding steps',
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {elfhdr.__version__}',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s:%(name)s: %(message)s',
    )

    try:
        header = elfhdr.ELFHeader.from_path(args.input)
    except (OSError, elfhdr.DecodeError) as e:
        print(f'error: {e}', file=sys.stderr)
        return 1

    print(repr(header))
    return 0


def entrypoint() -> None:
    sys.exit(main())


if __name__ == '__main__':
    entrypoint()
