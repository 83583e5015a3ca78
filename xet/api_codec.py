"""Base64url and AES envelope wrappers."""

from .main import xet


def base64url_encode(data):
    return xet.b64url_encode(data)


def base64url_decode(data):
    return xet.b64url_decode(data)


def aes_encrypt(plaintext, key, iv="", cipher: str | None = None):
    return xet.aes_encrypt(plaintext, key, iv, cipher, stacklevel=2)


def aes_decrypt(ciphertext, key, iv="", cipher: str | None = None):
    return xet.aes_decrypt(ciphertext, key, iv, cipher, stacklevel=2)


InvalidCipherParameters = xet.InvalidCipherParameters
UnsupportedCipherError = xet.UnsupportedCipherError


__all__ = [
    "InvalidCipherParameters",
    "UnsupportedCipherError",
    "aes_decrypt",
    "aes_encrypt",
    "base64url_decode",
    "base64url_encode",
]
