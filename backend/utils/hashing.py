# backend/utils/hashing.py
import hashlib
import hmac
import secrets

# scrypt parameters; changing them invalidates every stored hash
SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1
KEY_LENGTH = 64


def _scrypt(password: str, salt: str) -> bytes:
    return hashlib.scrypt(
        password.encode("utf-8"),
        salt=salt.encode("utf-8"),
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        dklen=KEY_LENGTH,
    )


# Hash a plaintext password as "<hex hash>.<hex salt>"
def get_password_hash(password: str) -> str:
    salt = secrets.token_hex(16)
    return f"{_scrypt(password, salt).hex()}.{salt}"


# Check a plaintext password against a stored "<hash>.<salt>" value
def verify_password(plain_password: str, stored: str) -> bool:
    if plain_password is None or not stored or "." not in stored:
        return False
    hashed, salt = stored.split(".", 1)
    try:
        expected = bytes.fromhex(hashed)
    except ValueError:
        return False
    return hmac.compare_digest(expected, _scrypt(plain_password, salt))
