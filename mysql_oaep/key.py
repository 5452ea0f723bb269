import base64
import binascii
import logging
from dataclasses import dataclass

from .config import (
    EXPECTED_DER_OCTETS,
    EXPONENT_OCTETS,
    MODULUS_OCTETS,
    PEM_HEADER,
    TRAILER_OCTETS,
)
from .errors import FormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublicKey:
    """RSA public parameters N and E."""

    n: int
    e: int

    def __post_init__(self):
        if self.n <= 0 or self.e <= 0:
            raise FormatError("RSA public key parameters must be positive")

    def modulus_octets(self) -> int:
        """Number of octets needed to encode N; also the ciphertext width."""
        return (self.n.bit_length() + 7) // 8


def parse_public_key(key: str) -> PublicKey:
    """
    Read the RSA public key a MySQL server sends in its PKCS#8 PEM envelope.

    This is not a general DER reader. The server always sends a
    SubjectPublicKeyInfo for a 2048-bit modulus with a 3-byte exponent, so the
    modulus is taken from the 257 bytes that end 5 bytes before the end of the
    body and the exponent from the last 3 bytes. Any other body length is
    rejected.
    """
    if not key.startswith(PEM_HEADER):
        first_line = key.split("\n", 1)[0]
        raise FormatError(
            "unexpected format for RSA Public Key from MySQL (expected PKCS#8); "
            f"first line: {first_line!r}"
        )

    body = key[len(PEM_HEADER):]
    trailer_pos = body.find("-")
    if trailer_pos >= 0:
        body = body[:trailer_pos]
    body = body.replace("\n", "").replace("\r", "")

    try:
        der = base64.b64decode(body, validate=True)
    except binascii.Error:
        raise FormatError(
            "unexpected error decoding what should be base64-encoded data"
        ) from None

    if len(der) != EXPECTED_DER_OCTETS:
        raise FormatError(
            f"unexpected RSA Public Key length from MySQL: {len(der)} bytes "
            f"(expected {EXPECTED_DER_OCTETS})"
        )

    end = len(der) - TRAILER_OCTETS
    n = int.from_bytes(der[end - MODULUS_OCTETS:end], "big")
    e = int.from_bytes(der[-EXPONENT_OCTETS:], "big")
    logger.debug("parsed %d-bit RSA public key", n.bit_length())
    return PublicKey(n, e)
