from .config import COUNTER_OCTETS
from .digest import Digest


def increment_counter(counter: bytearray) -> None:
    """Add one to a big-endian counter in place, wrapping to zero on overflow."""
    for i in reversed(range(len(counter))):
        if counter[i] == 0xFF:
            counter[i] = 0
        else:
            counter[i] += 1
            return


# === MGF1 ===
def mgf1_xor(out, digest: Digest, seed) -> None:
    """
    XOR the MGF1 mask derived from `seed` into `out` (a bytearray or writable
    memoryview), filling it from the start.

    Each block is Hash(seed || C) with C a 4-byte big-endian counter starting
    at zero. The digest is reset before every block and left reset afterwards.
    """
    counter = bytearray(COUNTER_OCTETS)
    i = 0
    while i < len(out):
        digest.reset()
        digest.update(seed)
        digest.update(counter)
        block = digest.finalize()
        for b in block[:len(out) - i]:
            out[i] ^= b
            i += 1
        increment_counter(counter)
    digest.reset()
