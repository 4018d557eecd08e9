from typing import Optional


class DemangleError(ValueError):
    """
    A symbol couldn't be demangled. offset is the byte position in the
    mangled name where decoding stopped, if known.
    """
    def __init__(self, message: str, offset: Optional[int] = None):
        if offset is not None:
            message = f'{message} (at offset {offset})'
        super().__init__(message)
        self.offset = offset


class MalformedSymbolError(DemangleError):
    """
    The mangled name doesn't follow the Z-encoding grammar
    """


class DemangleAllocationError(DemangleError, MemoryError):
    """
    The output buffer couldn't grow to the size it needed
    """
