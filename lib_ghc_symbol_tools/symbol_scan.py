import re
from typing import Dict, Iterator, Optional

from . import common
from . import demangle as lib_demangle


# Suffixes GHC appends to the encoded name, saying what the symbol
# labels. Longer ones first, so "con_info" wins over "info".
SYMBOL_SUFFIXES = [
    'static_info',
    'con_info',
    'closure',
    'entry',
    'bytes',
    'info',
    'slow',
    'fast',
    'srt',
    'str',
    'tbl',
    'btm',
    'ret',
]

# <package or module>_<...>_<name>_<suffix>
SYMBOL_REGEX = re.compile(
    r'\b[A-Za-z0-9][A-Za-z0-9_]*_[A-Za-z0-9_]+_(?:' + '|'.join(SYMBOL_SUFFIXES) + r')\b')


def find_symbols(text: str) -> Iterator['re.Match[str]']:
    """
    Find everything in the text that looks like a GHC symbol
    """
    return SYMBOL_REGEX.finditer(text)


def demangle_symbols_in_text(
        text: str,
        handling: Optional[common.DemangleFailureHandling] = None) -> str:
    """
    Replace every GHC symbol in the text with its demangled form.
    Symbols that fail to demangle are dealt with according to handling
    (by default: left alone, with a warning).
    """
    already_covered: Dict[str, str] = {}

    pieces = []
    last_end = 0
    for match in find_symbols(text):
        current_name = match.group(0)
        if current_name not in already_covered:
            best_name = lib_demangle.demangle_or_keep(current_name, handling)
            already_covered[current_name] = '' if best_name is None else best_name

        pieces.append(text[last_end:match.start()])
        pieces.append(already_covered[current_name])
        last_end = match.end()

    pieces.append(text[last_end:])
    return ''.join(pieces)
