from .errors import MalformedSymbolError


MAX_CODE_POINT = 0x10FFFF


def encode_code_point(value: int) -> bytes:
    """
    Encode a Unicode scalar value as UTF-8. Surrogates and anything
    above U+10FFFF aren't scalar values, and are rejected.
    """
    if value < 0 or value > MAX_CODE_POINT:
        raise MalformedSymbolError(f'code point 0x{value:x} is out of range')
    if 0xD800 <= value <= 0xDFFF:
        raise MalformedSymbolError(f'code point 0x{value:x} is a surrogate')

    if value <= 0x7F:
        # Plain ASCII
        return bytes([value])
    elif value <= 0x7FF:
        return bytes([
            ((value >> 6) & 0x1F) | 0xC0,
            (value & 0x3F) | 0x80,
        ])
    elif value <= 0xFFFF:
        return bytes([
            ((value >> 12) & 0x0F) | 0xE0,
            ((value >> 6) & 0x3F) | 0x80,
            (value & 0x3F) | 0x80,
        ])
    else:
        return bytes([
            ((value >> 18) & 0x07) | 0xF0,
            ((value >> 12) & 0x3F) | 0x80,
            ((value >> 6) & 0x3F) | 0x80,
            (value & 0x3F) | 0x80,
        ])
