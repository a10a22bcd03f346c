"""RC4-based pseudo-random number generator for non-cryptographic use."""

_SEED_MAX = 0xFFFFFFFF


class Rc4Random:
    """Byte stream generator seeded with an unsigned 32-bit integer.

    The seed's four little-endian bytes form the RC4 key.
    """

    def __init__(self, seed: int = 0) -> None:
        self._state: list[int] = []
        self._i = 0
        self._j = 0
        self.reseed(seed)

    def reseed(self, seed: int) -> None:
        """Reinitialize the generator with SEED."""
        if not 0 <= seed <= _SEED_MAX:
            raise ValueError(f"seed must be an unsigned 32-bit integer, got {seed}")
        key = seed.to_bytes(4, "little")
        state = list(range(256))
        j = 0
        for i in range(256):
            j = (j + state[i] + key[i % len(key)]) & 0xFF
            state[i], state[j] = state[j], state[i]
        self._state = state
        self._i = self._j = 0

    def random_bytes(self, size: int) -> bytes:
        """Return the next SIZE bytes of the stream."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        state = self._state
        out = bytearray(size)
        i, j = self._i, self._j
        for pos in range(size):
            i = (i + 1) & 0xFF
            j = (j + state[i]) & 0xFF
            state[i], state[j] = state[j], state[i]
            out[pos] = state[(state[i] + state[j]) & 0xFF]
        self._i, self._j = i, j
        return bytes(out)

    def random_ulong(self) -> int:
        """Return a pseudo-random unsigned 32-bit integer."""
        return int.from_bytes(self.random_bytes(4), "little")