import sys
from typing import Optional

from .. import common
from . import z_encoding as lib_z_encoding
from .errors import DemangleAllocationError, DemangleError, MalformedSymbolError
from .z_encoding import decode, try_decode


def demangle(sym: str) -> str:
    """
    Demangle a Z-encoded symbol name.
    """
    return lib_z_encoding.decode(sym).decode('utf-8')


def demangle_or_keep(
        sym: str,
        handling: Optional[common.DemangleFailureHandling] = None) -> Optional[str]:
    """
    Demangle a symbol, dealing with failures according to handling.
    With the default handling, a warning is printed and the mangled
    name is returned unchanged.
    """
    if handling is None:
        handling = common.DemangleFailureHandling()

    try:
        return demangle(sym)
    except DemangleError as e:
        if handling.volume == common.ErrorVolume.ERROR:
            raise
        elif handling.volume == common.ErrorVolume.WARNING:
            print(f'WARNING: unable to demangle "{sym}": {e}', file=sys.stderr)

    if handling.behavior == common.DemangleFailureHandling.Behavior.KEEP:
        return sym
    else:
        return None
