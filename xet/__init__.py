"""
XET - small utility belt

URL-safe base64, an AES envelope with caller-managed key and IV, nested path
lookup, codepoint-aware string predicates and any/every reductions.
"""

from .main import xet
from .api_arrays import array_any, array_at, array_every, is_truthy
from .api_codec import (
    InvalidCipherParameters,
    UnsupportedCipherError,
    aes_decrypt,
    aes_encrypt,
    base64url_decode,
    base64url_encode,
)
from .api_strings import str_contains, str_has_prefix, str_has_suffix
from .version import __version__


__all__ = [
    "InvalidCipherParameters",
    "UnsupportedCipherError",
    "__version__",
    "aes_decrypt",
    "aes_encrypt",
    "array_any",
    "array_at",
    "array_every",
    "base64url_decode",
    "base64url_encode",
    "is_truthy",
    "str_contains",
    "str_has_prefix",
    "str_has_suffix",
    "xet",
]
