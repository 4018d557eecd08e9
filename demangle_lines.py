#!/usr/bin/env python3

# Line filter: demangles each line of stdin to stdout. Works in a pipe,
# or interactively.

import argparse
import sys
from typing import BinaryIO, List, Optional

from lib_ghc_symbol_tools import demangle as lib_demangle


class InputReadError(Exception):
    """
    Reading the next line of input failed
    """


def filter_lines(infile: BinaryIO, outfile: BinaryIO, *, prompt: bool = False) -> bool:
    """
    Demangle infile line by line into outfile, stopping at the first
    line that can't be demangled. Returns True if everything was
    demangled. Errors reading infile are raised as InputReadError;
    errors writing outfile propagate unchanged.
    """
    while True:
        if prompt:
            outfile.write(b'> ')
            outfile.flush()

        try:
            line = infile.readline()
        except OSError as e:
            raise InputReadError(f'failed to read input: {e}') from e
        if not line:
            return True

        demangled = lib_demangle.try_decode(line)
        if demangled is None:
            outfile.write(b'Demangler error!\n')
            outfile.flush()
            return False

        outfile.write(demangled)
        outfile.flush()


def main(args: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description='Demangle Z-encoded GHC symbols read from stdin, one per line.')

    parser.parse_args(args)

    try:
        ok = filter_lines(sys.stdin.buffer, sys.stdout.buffer, prompt=sys.stdin.isatty())
    except InputReadError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    if not ok:
        sys.exit(1)


if __name__ == '__main__':
    main()
