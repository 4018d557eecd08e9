# Decoder for GHC's Z-encoding of symbol names. See
# https://gitlab.haskell.org/ghc/ghc/wikis/commentary/compiler/symbol-names

import sys
from typing import Optional, Union

from .buffer import OutputBuffer
from .code_point import MAX_CODE_POINT
from .errors import DemangleAllocationError, DemangleError, MalformedSymbolError


Mangled = Union[str, bytes, bytearray, memoryview]

# zX -> character
Z_LOWER_ESCAPES = {
    b'a': b'&',
    b'b': b'|',
    b'c': b'^',
    b'd': b'$',
    b'e': b'=',
    b'g': b'>',
    b'h': b'#',
    b'i': b'.',
    b'l': b'<',
    b'm': b'-',
    b'n': b'!',
    b'p': b'+',
    b'q': b"'",
    b'r': b'\\',
    b's': b'/',
    b't': b'*',
    b'u': b'_',
    b'v': b'%',
    b'z': b'z',
}

# ZX -> character
Z_UPPER_ESCAPES = {
    b'C': b':',
    b'L': b'(',
    b'M': b'[',
    b'N': b']',
    b'R': b')',
    b'Z': b'Z',
}

# Uppercase hex digits aren't accepted
HEX_DIGITS = {bytes([c]): int(chr(c), 16) for c in b'0123456789abcdef'}


def _describe(c: bytes) -> str:
    return 'end of input' if not c else repr(c.decode('latin-1'))


def _to_bytes(mangled: Mangled) -> bytes:
    """
    Normalize the input to bytes, cut off at the first NUL if there is
    one
    """
    if isinstance(mangled, str):
        mangled = mangled.encode('utf-8')
    mangled = bytes(mangled)
    nul = mangled.find(b'\0')
    if nul != -1:
        mangled = mangled[:nul]
    return mangled


def _decode_hex_code(mangled: bytes, pos: int, buf: OutputBuffer) -> int:
    """
    Parse "<hex digits>U" starting at pos, and push the code point it
    names. Returns the position after the "U".
    """
    start = pos
    code = 0
    c = mangled[pos:pos+1]
    while c in HEX_DIGITS:
        code = (code << 4) + HEX_DIGITS[c]
        if code > MAX_CODE_POINT:
            raise MalformedSymbolError('code point in hex escape is out of range', start)
        pos += 1
        c = mangled[pos:pos+1]

    if c != b'U':
        raise MalformedSymbolError(f"expected 'U' after hex escape, found {_describe(c)}", pos)

    try:
        buf.push_code_point(code)
    except MalformedSymbolError as e:
        raise MalformedSymbolError(e.args[0], start) from None

    return pos + 1


def _decode_tuple(mangled: bytes, pos: int, buf: OutputBuffer) -> int:
    """
    Parse "<arity>T" or "<arity>H" starting at pos, and push the
    corresponding tuple constructor name. Returns the position after
    the "T" or "H".
    """
    start = pos
    arity = 0
    c = mangled[pos:pos+1]
    while c.isdigit():
        arity = arity * 10 + int(c)
        if arity > sys.maxsize:
            # Could never be allocated
            raise DemangleAllocationError('tuple arity is too large', start)
        pos += 1
        c = mangled[pos:pos+1]

    if c == b'T':
        # Boxed: (), (,), (,,), ...
        if arity == 0:
            buf.push_string(b'()')
        elif arity == 1:
            raise MalformedSymbolError('there is no boxed 1-tuple', start)
        else:
            # Two for "()", and one per comma
            buf.reserve(arity + 1)
            buf.push(ord('('))
            buf.push_repeated(ord(','), arity - 1)
            buf.push(ord(')'))

    elif c == b'H':
        # Unboxed: (# #), (#,#), (#,,#), ...
        if arity == 0:
            raise MalformedSymbolError('there is no unboxed 0-tuple', start)
        elif arity == 1:
            buf.push_string(b'(# #)')
        else:
            # Four for "(##)", and one per comma
            buf.reserve(arity + 3)
            buf.push_string(b'(#')
            buf.push_repeated(ord(','), arity - 1)
            buf.push_string(b'#)')

    else:
        raise MalformedSymbolError(f"expected 'T' or 'H' after tuple arity, found {_describe(c)}", pos)

    return pos + 1


def decode(mangled: Mangled) -> bytes:
    """
    Decode a Z-encoded name. The result is UTF-8.
    Raises MalformedSymbolError if the name isn't valid Z-encoding, or
    DemangleAllocationError if the output couldn't be allocated.
    """
    mangled = _to_bytes(mangled)
    buf = OutputBuffer()

    pos = 0
    while pos < len(mangled):
        c = mangled[pos:pos+1]

        if c == b'z':
            pos += 1
            c = mangled[pos:pos+1]
            if c.isdigit():
                # If the code starts with a-f, GHC always prefixes it
                # with a '0', so it can't be confused with the escapes
                pos = _decode_hex_code(mangled, pos, buf)
                continue
            out = Z_LOWER_ESCAPES.get(c)
            if out is None:
                raise MalformedSymbolError(f"unknown escape 'z' + {_describe(c)}", pos)
            buf.push_string(out)
            pos += 1

        elif c == b'Z':
            pos += 1
            c = mangled[pos:pos+1]
            if c.isdigit():
                pos = _decode_tuple(mangled, pos, buf)
                continue
            out = Z_UPPER_ESCAPES.get(c)
            if out is None:
                raise MalformedSymbolError(f"unknown escape 'Z' + {_describe(c)}", pos)
            buf.push_string(out)
            pos += 1

        else:
            buf.push(mangled[pos])
            pos += 1

    return buf.finish()


def try_decode(mangled: Mangled) -> Optional[bytes]:
    """
    Same as decode(), but returns None instead of raising, for callers
    that don't care why it failed
    """
    try:
        return decode(mangled)
    except DemangleError:
        return None
