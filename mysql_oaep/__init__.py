"""
RSA-OAEP encryption of a password under the public key a MySQL server sends
during caching_sha2_password / sha256_password authentication.
"""

import hashlib

from Crypto.Random import get_random_bytes

from .digest import Digest, HashFunc
from .errors import CapacityError, EncodingError, FormatError, ProtocolError
from .key import PublicKey, parse_public_key
from .mgf1 import increment_counter, mgf1_xor
from .oaep import RandFunc, max_message_length, oaep_encrypt

__all__ = [
    "encrypt",
    "parse_public_key", "PublicKey",
    "oaep_encrypt", "max_message_length",
    "mgf1_xor", "increment_counter", "Digest",
    "ProtocolError", "EncodingError", "FormatError", "CapacityError",
]


def encrypt(key: bytes, message: bytes, hash_func: HashFunc = hashlib.sha1,
            randfunc: RandFunc = get_random_bytes) -> bytes:
    """
    Encrypt `message` under the PEM public key bytes `key`.

    `hash_func` selects the OAEP/MGF1 hash (a hashlib constructor). The result
    is exactly as long as the key's modulus.
    """
    try:
        text = key.decode("utf-8")
    except UnicodeDecodeError:
        raise EncodingError("unexpected error decoding what should be UTF-8") from None

    public_key = parse_public_key(text)
    return oaep_encrypt(randfunc, public_key, message, hash_func)
