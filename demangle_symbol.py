#!/usr/bin/env python3

import argparse
import sys
from typing import List, Optional

from lib_ghc_symbol_tools import demangle as lib_demangle


def main(args: Optional[List[str]] = None) -> None:
    """
    Main function
    """
    parser = argparse.ArgumentParser(
        description='Demangle a Z-encoded GHC symbol.')

    parser.add_argument('symbol',
        help="the mangled symbol. It's a good idea to surround it in quotes (preferably single-quotes) so the shell doesn't eat special characters.")

    parsed_args = parser.parse_args(args)

    try:
        print(lib_demangle.demangle(parsed_args.symbol))
    except lib_demangle.DemangleError as e:
        print(f'unable to demangle "{parsed_args.symbol}": {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
