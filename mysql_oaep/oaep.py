import hashlib
import logging
from typing import Callable

from .digest import Digest, HashFunc
from .errors import CapacityError
from .key import PublicKey
from .mgf1 import mgf1_xor

logger = logging.getLogger(__name__)

RandFunc = Callable[[int], bytes]


def max_message_length(key: PublicKey, hash_func: HashFunc = hashlib.sha1) -> int:
    """Largest message that fits in one OAEP block for this key and hash."""
    h_len = hash_func().digest_size
    return max(key.modulus_octets() - 2 * h_len - 2, 0)


# === RSA Encryption ===
def rsa_encrypt_primitive(key: PublicKey, m: int) -> int:
    """RSAEP: c = m^e mod n."""
    return pow(m, key.e, key.n)


# === OAEP Encode + Encrypt ===
def oaep_encrypt(randfunc: RandFunc, key: PublicKey, message: bytes,
                 hash_func: HashFunc = hashlib.sha1) -> bytes:
    """
    RSAES-OAEP encryption with an empty label and MGF1 over `hash_func`.

    `randfunc(n)` must return n random bytes; it supplies the OAEP seed.
    Returns exactly k bytes, k being the byte length of the modulus.
    """
    k = key.modulus_octets()
    digest = Digest(hash_func)
    h_len = digest.digest_size

    if len(message) > k - 2 * h_len - 2:
        raise CapacityError("mysql: password too long")

    # EM = 0x00 || seed || DB
    em = bytearray(k)
    view = memoryview(em)
    seed = view[1:1 + h_len]
    db = view[1 + h_len:]

    ros = randfunc(h_len)
    if len(ros) != h_len:
        raise ValueError(f"Seed must be {h_len} bytes long")
    seed[:] = ros

    # DB = lHash || PS || 0x01 || M, PS already zero
    db_len = k - h_len - 1
    db[:h_len] = digest.finalize()
    db[db_len - len(message) - 1] = 0x01
    db[db_len - len(message):] = message

    # maskedDB first, then maskedSeed from maskedDB
    mgf1_xor(db, digest, seed)
    mgf1_xor(seed, digest, db)

    m = int.from_bytes(em, "big")
    c = rsa_encrypt_primitive(key, m)
    logger.debug("OAEP/%s encrypted %d-byte block", digest.name, k)
    return c.to_bytes(k, "big")
