# XET UTILITY ENGINE ->

import os as _os_module
import re as _re_module


class xet:
    import base64
    import binascii
    import collections.abc
    import numbers
    import typing
    import warnings
    from cryptography.hazmat.primitives import padding
    from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
    from cryptography.hazmat.decrepit.ciphers import modes as decrepit_modes

    @staticmethod
    def _env_str(name: str, default: str) -> str:
        value = _os_module.getenv(name)
        if value is None:
            return default
        value = value.strip()
        return value or default

    class InvalidCipherParameters(ValueError):
        """Key or IV does not fit the selected cipher."""

    class UnsupportedCipherError(ValueError):
        """Cipher spec names an algorithm, key size or mode we cannot run."""

    AES_BLOCK_SIZE = 16
    AES_KEY_SIZES = (128, 192, 256)
    FALLBACK_CIPHER = "AES-256-CBC"
    DEFAULT_CIPHER = _env_str("XET_DEFAULT_CIPHER", FALLBACK_CIPHER)
    DEFAULT_DELIMITER = _env_str("XET_PATH_DELIMITER", ".")
    PADDED_MODES = frozenset({"CBC", "ECB"})
    _MODE_FACTORIES: typing.ClassVar[dict] = {
        "CBC": modes.CBC,
        "CFB": decrepit_modes.CFB,
        "CFB8": decrepit_modes.CFB8,
        "OFB": decrepit_modes.OFB,
        "CTR": modes.CTR,
        "ECB": None,
    }
    _CIPHER_PATTERN = _re_module.compile(r"^(?P<algo>[A-Z]+)-(?P<bits>\d+)-(?P<mode>[A-Z0-9]+)$")
    _INDEX_PATTERN = _re_module.compile(r"0|[1-9][0-9]*")

    # BYTE COERCION

    @staticmethod
    def _coerce_bytes(
        data: "xet.typing.Union[str, bytes, bytearray, memoryview]",
        what: str = "data"
    ) -> bytes:
        if isinstance(data, str):
            return data.encode("utf-8")
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
        raise TypeError(f"Unsupported {what} type: {type(data)!r}")

    @staticmethod
    def _coerce_text(data: "xet.typing.Union[str, bytes, bytearray, memoryview]") -> str:
        if isinstance(data, str):
            return data
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data).decode("utf-8", "surrogateescape")
        raise TypeError(f"Unsupported type for textual comparison: {type(data)!r}")

    # BASE64URL - REVERSIBLE

    @staticmethod
    def b64url_encode(data: "xet.typing.Union[str, bytes, bytearray, memoryview]") -> str:
        raw = xet._coerce_bytes(data)
        encoded = xet.base64.b64encode(raw).decode("ascii")
        return encoded.replace("+", "-").replace("/", "_").rstrip("=")

    @staticmethod
    def b64url_decode(data: "xet.typing.Union[str, bytes, bytearray, memoryview]") -> "xet.typing.Optional[bytes]":
        """Decode unpadded base64url text, returning None when the input is not base64."""
        if isinstance(data, str):
            try:
                text = data.encode("ascii")
            except UnicodeEncodeError:
                return None
        elif isinstance(data, (bytes, bytearray, memoryview)):
            text = bytes(data)
        else:
            raise TypeError(f"Unsupported data type: {type(data)!r}")
        text = text.rstrip(b"=").replace(b"-", b"+").replace(b"_", b"/")
        if len(text) % 4 == 1:
            return None
        text += b"=" * (-len(text) % 4)
        try:
            return xet.base64.b64decode(text, validate=True)
        except (xet.binascii.Error, ValueError):
            return None

    # AES ENVELOPE - REVERSIBLE, CALLER-MANAGED KEY AND IV

    @staticmethod
    def parse_cipher(spec: "xet.typing.Optional[str]" = None) -> "xet.typing.Tuple[int, str]":
        """Split a cipher spec such as ``AES-256-CBC`` into (key_bytes, mode)."""
        raw = spec if spec is not None else xet.DEFAULT_CIPHER
        if not isinstance(raw, str):
            raise TypeError(f"Cipher spec must be a string, got {type(raw)!r}")
        match = xet._CIPHER_PATTERN.match(raw.strip().upper())
        if not match:
            raise xet.UnsupportedCipherError(f"Malformed cipher spec: {raw!r}")
        if match.group("algo") != "AES":
            raise xet.UnsupportedCipherError(f"Unsupported cipher algorithm: {match.group('algo')}")
        bits = int(match.group("bits"))
        if bits not in xet.AES_KEY_SIZES:
            raise xet.UnsupportedCipherError(f"Unsupported AES key size: {bits}")
        mode = match.group("mode")
        if mode not in xet._MODE_FACTORIES:
            raise xet.UnsupportedCipherError(f"Unsupported AES mode: {mode}")
        return bits // 8, mode

    @staticmethod
    def _fit_key(key: bytes, key_len: int) -> bytes:
        # OpenSSL raw-key behaviour: zero pad short keys, truncate long ones
        if len(key) >= key_len:
            return key[:key_len]
        return key + b"\x00" * (key_len - len(key))

    @staticmethod
    def _resolve_iv(iv: bytes, mode: str, *, warn_empty: bool, stacklevel: int) -> "xet.typing.Optional[bytes]":
        if mode == "ECB":
            if iv:
                xet.warnings.warn("ECB mode does not use an IV; ignoring it", UserWarning, stacklevel=stacklevel)
            return None
        if not iv:
            if warn_empty:
                xet.warnings.warn(
                    "Using an empty IV is insecure; falling back to an all-zero IV",
                    UserWarning,
                    stacklevel=stacklevel
                )
            return b"\x00" * xet.AES_BLOCK_SIZE
        if len(iv) != xet.AES_BLOCK_SIZE:
            raise xet.InvalidCipherParameters(
                f"IV is {len(iv)} bytes long, AES-{mode} expects precisely {xet.AES_BLOCK_SIZE} bytes"
            )
        return iv

    @staticmethod
    def _build_cipher(
        key: bytes,
        iv: bytes,
        spec: "xet.typing.Optional[str]",
        *,
        warn_empty: bool,
        stacklevel: int
    ):
        key_len, mode = xet.parse_cipher(spec)
        # warnings point past _resolve_iv and _build_cipher
        iv_bytes = xet._resolve_iv(iv, mode, warn_empty=warn_empty, stacklevel=stacklevel + 2)
        factory = xet._MODE_FACTORIES[mode]
        mode_obj = xet.modes.ECB() if factory is None else factory(iv_bytes)
        cipher = xet.Cipher(xet.algorithms.AES(xet._fit_key(key, key_len)), mode_obj)
        return cipher, mode

    @staticmethod
    def aes_encrypt(
        plaintext: "xet.typing.Union[str, bytes, bytearray, memoryview]",
        key: "xet.typing.Union[str, bytes, bytearray, memoryview]",
        iv: "xet.typing.Union[str, bytes, bytearray, memoryview]" = "",
        cipher: "xet.typing.Optional[str]" = None,
        *,
        stacklevel: int = 1
    ) -> str:
        data = xet._coerce_bytes(plaintext, "plaintext")
        key_bytes = xet._coerce_bytes(key, "key")
        iv_bytes = xet._coerce_bytes(iv, "iv")
        engine, mode = xet._build_cipher(key_bytes, iv_bytes, cipher, warn_empty=True, stacklevel=stacklevel + 1)
        if mode in xet.PADDED_MODES:
            padder = xet.padding.PKCS7(xet.AES_BLOCK_SIZE * 8).padder()
            data = padder.update(data) + padder.finalize()
        encryptor = engine.encryptor()
        ciphertext = encryptor.update(data) + encryptor.finalize()
        return xet.b64url_encode(ciphertext)

    @staticmethod
    def aes_decrypt(
        ciphertext: "xet.typing.Union[str, bytes, bytearray, memoryview]",
        key: "xet.typing.Union[str, bytes, bytearray, memoryview]",
        iv: "xet.typing.Union[str, bytes, bytearray, memoryview]" = "",
        cipher: "xet.typing.Optional[str]" = None,
        *,
        stacklevel: int = 1
    ) -> "xet.typing.Optional[bytes]":
        key_bytes = xet._coerce_bytes(key, "key")
        iv_bytes = xet._coerce_bytes(iv, "iv")
        engine, mode = xet._build_cipher(key_bytes, iv_bytes, cipher, warn_empty=False, stacklevel=stacklevel + 1)
        raw = xet.b64url_decode(ciphertext)
        if raw is None:
            return None
        padded = mode in xet.PADDED_MODES
        if padded and (not raw or len(raw) % xet.AES_BLOCK_SIZE):
            return None
        decryptor = engine.decryptor()
        try:
            plain = decryptor.update(raw) + decryptor.finalize()
            if padded:
                unpadder = xet.padding.PKCS7(xet.AES_BLOCK_SIZE * 8).unpadder()
                plain = unpadder.update(plain) + unpadder.finalize()
        except ValueError:
            return None
        return plain

    # NESTED LOOKUP

    @staticmethod
    def _split_path(path, delimiter: str) -> "xet.typing.List[str]":
        if isinstance(path, (bytes, bytearray)):
            path = bytes(path).decode("utf-8", "surrogateescape")
        if not isinstance(path, str) and isinstance(path, xet.collections.abc.Iterable):
            return [str(segment) for segment in path]
        if delimiter == "":
            raise ValueError("Path delimiter must not be empty")
        return str(path).split(delimiter)

    @staticmethod
    def _is_sequence(node) -> bool:
        return isinstance(node, xet.collections.abc.Sequence) and not isinstance(
            node, (str, bytes, bytearray)
        )

    @staticmethod
    def _step(node, segment: str) -> "xet.typing.Tuple[bool, xet.typing.Any]":
        if isinstance(node, xet.collections.abc.Mapping):
            if segment in node:
                return True, node[segment]
            for key, value in node.items():
                if str(key) == segment:
                    return True, value
            return False, None
        if xet._is_sequence(node):
            if not xet._INDEX_PATTERN.fullmatch(segment):
                return False, None
            index = int(segment)
            if index >= len(node):
                return False, None
            return True, node[index]
        return False, None

    @staticmethod
    def array_at(root, path, default=None, delimiter: "xet.typing.Optional[str]" = None):
        """Walk ``root`` one path segment at a time.

        Mapping keys and sequence indices are both matched by their string
        form, so ``"a.1.0"`` reaches ``root["a"][1][0]``. A missing segment or
        a ``None`` value along the way yields ``default``.
        """
        sep = xet.DEFAULT_DELIMITER if delimiter is None else delimiter
        node = root
        for segment in xet._split_path(path, sep):
            found, node = xet._step(node, segment)
            if not found or node is None:
                return default
        return node

    # STRING PREDICATES

    @staticmethod
    def str_has_prefix(haystack, needle) -> bool:
        return xet._coerce_text(haystack).startswith(xet._coerce_text(needle))

    @staticmethod
    def str_has_suffix(haystack, needle) -> bool:
        return xet._coerce_text(haystack).endswith(xet._coerce_text(needle))

    @staticmethod
    def str_contains(haystack, needle) -> bool:
        return xet._coerce_text(needle) in xet._coerce_text(haystack)

    # SEQUENCE PREDICATES

    @staticmethod
    def is_truthy(value) -> bool:
        """Default predicate for array_any/array_every.

        None is false, bools are themselves, numbers are false only at zero,
        text and containers are false only when empty; anything else falls
        back to ``bool(value)``.
        """
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        if isinstance(value, xet.numbers.Number):
            return value != 0
        if isinstance(value, xet.collections.abc.Sized):
            return len(value) > 0
        return bool(value)

    @staticmethod
    def _resolve_predicate(predicate) -> "xet.typing.Callable[[xet.typing.Any], bool]":
        if predicate is None:
            return xet.is_truthy
        if not callable(predicate):
            raise TypeError(f"Predicate must be callable, got {type(predicate)!r}")
        return predicate

    @staticmethod
    def _iter_values(values) -> "xet.typing.Iterable":
        if isinstance(values, xet.collections.abc.Mapping):
            return values.values()
        return values

    @staticmethod
    def array_any(values, predicate=None) -> bool:
        check = xet._resolve_predicate(predicate)
        for value in xet._iter_values(values):
            if check(value):
                return True
        return False

    @staticmethod
    def array_every(values, predicate=None) -> bool:
        check = xet._resolve_predicate(predicate)
        for value in xet._iter_values(values):
            if not check(value):
                return False
        return True


def _load_json_document(path: str):
    import json

    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def cli(argv=None) -> int:
    import argparse
    import json

    parser = argparse.ArgumentParser(prog="xet", description="XET utility toolkit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    b64 = subparsers.add_parser("b64", help="URL-safe base64 encode/decode text")
    b64.add_argument("action", choices=("encode", "decode"))
    b64.add_argument("text", help="UTF-8 text to encode, or base64url text to decode")

    aes = subparsers.add_parser("aes", help="AES encrypt/decrypt text with an explicit key and IV")
    aes.add_argument("action", choices=("encrypt", "decrypt"))
    aes.add_argument("text", help="Plain text to encrypt, or base64url ciphertext to decrypt")
    aes.add_argument("-k", "--key", required=True, help="Raw key text (zero padded or truncated to the key size)")
    aes.add_argument("--iv", default="", help="Raw IV text, exactly 16 bytes for modes that use one")
    aes.add_argument("--cipher", default=None, help=f"Cipher spec (default {xet.DEFAULT_CIPHER})")

    at = subparsers.add_parser("at", help="Look up a path inside a JSON document")
    at.add_argument("file", help="Path to a JSON file")
    at.add_argument("path", help="Delimited path such as a.b.0")
    at.add_argument("--default", default=None, help="Value printed when the path is missing")
    at.add_argument("--delimiter", default=None, help=f"Path delimiter (default {xet.DEFAULT_DELIMITER!r})")

    args = parser.parse_args(argv)

    import sys
    import warnings

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", UserWarning)
        try:
            if args.command == "b64":
                if args.action == "encode":
                    result = xet.b64url_encode(args.text)
                else:
                    decoded = xet.b64url_decode(args.text)
                    if decoded is None:
                        print("FAIL! input is not base64url")
                        return 1
                    result = decoded.decode("utf-8", "replace")
            elif args.command == "aes":
                if args.action == "encrypt":
                    result = xet.aes_encrypt(args.text, args.key, args.iv, args.cipher)
                else:
                    plain = xet.aes_decrypt(args.text, args.key, args.iv, args.cipher)
                    if plain is None:
                        print("FAIL! unable to decrypt ciphertext")
                        return 1
                    result = plain.decode("utf-8", "replace")
            else:
                document = _load_json_document(args.file)
                value = xet.array_at(document, args.path, args.default, args.delimiter)
                result = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
        except (ValueError, OSError) as exc:
            print(f"FAIL! {exc}")
            return 1
        finally:
            for item in caught:
                msg = str(item.message).strip()
                if msg:
                    print(f"⚠ {msg}", file=sys.stderr)

    print(result)
    return 0


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
