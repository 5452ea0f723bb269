import pytest
from Crypto.PublicKey import RSA

# Public key captured from a MySQL 8 server.
SERVER_KEY = (
    "-----BEGIN PUBLIC KEY-----\n"
    "MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEAv9E+l0oFIoGnZmu6bdil\n"
    "I3WK79iug/hukj5QrWRrJVVCHL8rRxNsQGYPvQfXgqEnJW0Rqy2BBebNrnSMduny\n"
    "Cazz1KM1h57hSI1xHGhg/o82Us1j9fUucKo0Pt3vg7xjVVcN0j1bwr96gEbt6B4Q\n"
    "t4eKZBhtle1bgoBcqFBhGfU17cnedSzMUCutM+kXTzzOTplKoqXeJpEZDTX8AP9F\n"
    "Q9JkoA22yTn8H2GROIAffm1UQS7DXXjI5OnzBJNs72oNSeK8i72xLkoSdfVw3vCu\n"
    "i+mpt4LJgAZLvzc2O4nLzu4Bljb+Mrch34HSWyxOfWzt1v9vpJfEVQ2/VZaIng6U\n"
    "UQIDAQAB\n"
    "-----END PUBLIC KEY-----\n"
)

SERVER_KEY_N = bytes.fromhex(
    "bfd13e974a052281a7666bba6dd8a523758aefd8ae83f86e923e50ad646b2555"
    "421cbf2b47136c40660fbd07d782a127256d11ab2d8105e6cdae748c76e9f209"
    "acf3d4a335879ee1488d711c6860fe8f3652cd63f5f52e70aa343eddef83bc63"
    "55570dd23d5bc2bf7a8046ede81e10b7878a64186d95ed5b82805ca8506119f5"
    "35edc9de752ccc502bad33e9174f3cce4e994aa2a5de2691190d35fc00ff4543"
    "d264a00db6c939fc1f619138801f7e6d54412ec35d78c8e4e9f304936cef6a0d"
    "49e2bc8bbdb12e4a1275f570def0ae8be9a9b782c980064bbf37363b89cbceee"
    "019636fe32b721df81d25b2c4e7d6cedd6ff6fa497c4550dbf5596889e0e9451"
)

# RSAES-OAEP intermediate values, pkcs-1v2-1d2-vec/oaep-int.txt
VECTOR_N = int(
    "bbf82f090682ce9c2338ac2b9da871f7368d07eed41043a440d6b6f07454f51f"
    "b8dfbaaf035c02ab61ea48ceeb6fcd4876ed520d60e1ec4619719d8a5b8b807f"
    "afb8e0a3dfc737723ee6b4b7d93a2584ee6a649d060953748834b2454598394e"
    "e0aab12d7b61a51f527a9a41f6c1687fe2537298ca2a8f5946f8e5fd091dbdcb",
    16,
)
VECTOR_E = 0x11
VECTOR_MESSAGE = bytes.fromhex("d436e99569fd32a7c8a05bbc90d32c49")
VECTOR_SEED = bytes.fromhex("aafd12f659cae63489b479e5076ddec2f06cb58f")
VECTOR_CIPHERTEXT_SHA1 = bytes.fromhex(
    "1253e04dc0a5397bb44a7ab87e9bf2a039a33d1e996fc82a94ccd30074c95df7"
    "63722017069e5268da5d1c0b4f872cf653c11df82314a67968dfeae28def04bb"
    "6d84b1c31d654a1970e5783bd6eb96a024c2ca2f4a90fe9f2ef5c9c140e5bb48"
    "da9536ad8700c84fc9130adea74e558d51a74ddf85d8b50de96838d6063e0955"
)


def fixed_randfunc(seed: bytes):
    """Random source that hands out `seed` once. Test use only."""
    remaining = bytearray(seed)

    def randfunc(n: int) -> bytes:
        out = bytes(remaining[:n])
        del remaining[:n]
        return out

    return randfunc


@pytest.fixture(scope="session")
def rsa_2048():
    return RSA.generate(2048)


@pytest.fixture(scope="session")
def rsa_2048_pem(rsa_2048) -> bytes:
    return rsa_2048.publickey().export_key()
