#!/usr/bin/env python3

import argparse
from pathlib import Path
import sys
from typing import List, Optional

from elftools.elf.elffile import ELFFile  # pip install pyelftools

from lib_ghc_symbol_tools import common
from lib_ghc_symbol_tools import elf_symbols as lib_elf_symbols


def main(args: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description='Export the symbol table of an ELF file, with demangled GHC symbol names, to a text file.')

    parser.add_argument('elf_file', type=Path,
        help='elf file to read')
    parser.add_argument('output_file', type=Path, nargs='?',
        help='text file to write output to (default: print to stdout)')
    parser.add_argument('--errors', choices=[v.value for v in common.ErrorVolume], default=common.ErrorVolume.SILENT.value,
        help='what to do about symbols that fail to demangle (not every symbol in a binary comes from GHC, so the default is "silent")')
    parser.add_argument('--skip-failures', action='store_true',
        help="leave out symbols that can't be demangled, instead of listing them with their raw names")

    parsed_args = parser.parse_args(args)

    handling = common.DemangleFailureHandling(
        common.ErrorVolume(parsed_args.errors),
        common.DemangleFailureHandling.Behavior.DROP if parsed_args.skip_failures
            else common.DemangleFailureHandling.Behavior.KEEP)

    with parsed_args.elf_file.open('rb') as f:
        elf = ELFFile(f)
        lines = [
            str(symbol) + '\n'
            for symbol in lib_elf_symbols.iter_demangled_symbols(elf, handling)
            if symbol.demangled_name is not None
        ]

    if parsed_args.output_file is None:
        sys.stdout.writelines(lines)
    else:
        with parsed_args.output_file.open('w', encoding='utf-8') as f:
            f.writelines(lines)


if __name__ == '__main__':
    main()
