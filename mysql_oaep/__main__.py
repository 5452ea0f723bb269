import hashlib
import sys

from . import ProtocolError, encrypt


# === Interactive CLI ===
def main() -> int:
    print("RSA-OAEP: encrypt a MySQL password under the server's public key")

    path = input("Path to server public key (PEM):\n>>> ").strip()
    try:
        with open(path, 'rb') as f:
            key = f.read()
    except OSError as e:
        print(f"Cannot read key: {e}")
        return 1

    print("\nSelect hash function for OAEP:")
    print(" 1. SHA-1 (default)\n 2. SHA-256")
    opt = input(">>> ").strip()
    hfunc = hashlib.sha256 if opt == "2" else hashlib.sha1
    print(f"Using hash: {hfunc().name}")

    password = input("\nPassword:\n>>> ").encode()

    try:
        ciphertext = encrypt(key, password, hash_func=hfunc)
    except ProtocolError as e:
        print(f"\nEncryption error: {e}")
        return 1

    print(f"\n[RSA] Ciphertext (hex): {ciphertext.hex()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
