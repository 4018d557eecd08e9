from .code_point import encode_code_point
from .errors import DemangleAllocationError


DEFAULT_CAPACITY = 20
REPEAT_CHUNK_SIZE = 4096


class OutputBuffer:
    """
    Growable byte buffer that a single decode call writes its output
    into. Capacity grows by at least 1.5x at a time, and is only ever
    trimmed once, by finish().
    """
    capacity: int
    length: int

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self.capacity = 0
        self.length = 0
        self._data = bytearray()
        self._resize(max(capacity, 1))

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f'<OutputBuffer {self.length}/{self.capacity}: {bytes(self._data[:self.length])!r}>'

    def _resize(self, capacity: int) -> None:
        try:
            data = bytearray(capacity)
        except (MemoryError, OverflowError) as e:
            raise DemangleAllocationError("couldn't grow output buffer") from e
        with memoryview(self._data) as view:
            data[:self.length] = view[:self.length]
        self._data = data
        self.capacity = capacity

    def reserve(self, amount: int) -> None:
        """
        Make sure there's room for at least amount more bytes
        """
        new_length = self.length + amount
        if new_length > self.capacity:
            self._resize(max(new_length, self.capacity + self.capacity // 2))

    def push(self, value: int) -> None:
        if self.length == self.capacity:
            self.reserve(1)
        self._data[self.length] = value
        self.length += 1

    def push_string(self, value: bytes) -> None:
        self.reserve(len(value))
        self._data[self.length:self.length + len(value)] = value
        self.length += len(value)

    def push_repeated(self, value: int, count: int) -> None:
        """
        Append count copies of one byte, a chunk at a time
        """
        self.reserve(count)
        chunk = bytes([value]) * min(count, REPEAT_CHUNK_SIZE)
        full_chunks, remainder = divmod(count, len(chunk) or 1)
        for _ in range(full_chunks):
            self.push_string(chunk)
        self.push_string(chunk[:remainder])

    def push_code_point(self, value: int) -> None:
        """
        Append the UTF-8 encoding of a code point.
        """
        # Up to three bytes more than needed, but GHC symbols nearly
        # always get an ASCII suffix (_info, _closure, _srt, ...) after
        # this, which uses them up
        self.reserve(4)
        encoded = encode_code_point(value)
        self._data[self.length:self.length + len(encoded)] = encoded
        self.length += len(encoded)

    def finish(self) -> bytes:
        """
        Trim to the exact length and hand the contents over. The buffer
        is empty afterwards.
        """
        del self._data[self.length:]
        result = bytes(self._data)
        self._data = bytearray()
        self.capacity = self.length = 0
        return result
