#!/usr/bin/env python3

import argparse
from pathlib import Path
from typing import List, Optional

from lib_ghc_symbol_tools import common
from lib_ghc_symbol_tools import symbol_scan as lib_symbol_scan


def main(args: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description='Scan for GHC symbol names in a text file (disassembly, profiler output, etc.), and replace them with demangled names.')

    parser.add_argument('file', type=Path,
        help='text file to scan')
    parser.add_argument('--output', type=Path,
        help='file to write the result to (default: print to stdout)')
    parser.add_argument('--errors', choices=[v.value for v in common.ErrorVolume], default=common.ErrorVolume.default().value,
        help='what to do about symbols that fail to demangle (they\'re left as-is unless this is "error")')

    parsed_args = parser.parse_args(args)

    with parsed_args.file.open('r', encoding='utf-8') as f:
        file_data = f.read()

    handling = common.DemangleFailureHandling(common.ErrorVolume(parsed_args.errors))
    new_file_data = lib_symbol_scan.demangle_symbols_in_text(file_data, handling)

    if parsed_args.output is None:
        print(new_file_data, end='')
    else:
        with parsed_args.output.open('w', encoding='utf-8') as f:
            f.write(new_file_data)


if __name__ == '__main__':
    main()
