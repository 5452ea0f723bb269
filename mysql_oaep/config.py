# Fixed parameters of the PKCS#8 public key a MySQL server sends during
# caching_sha2_password / sha256_password authentication.

PEM_HEADER = "-----BEGIN PUBLIC KEY-----\n"

# DER layout of SubjectPublicKeyInfo for a 2048-bit modulus and a 3-byte
# exponent: ... 02 82 01 01 <257 modulus bytes> 02 03 <3 exponent bytes>
MODULUS_OCTETS = 257
EXPONENT_OCTETS = 3
TRAILER_OCTETS = 5
EXPECTED_DER_OCTETS = 294

COUNTER_OCTETS = 4

DEFAULT_HASH_NAME = "sha1"
