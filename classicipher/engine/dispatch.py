"""
Cipher Dispatch

This module is the single entry point callers use: pick a CipherKind,
hand over key material and a payload, get the result back. Every kind
carries its own key type, checked before the cipher runs.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Sequence, Type, Union

from ..alphabet.codec import format_in_groups
from ..cipher_core.base import CIPHER_REGISTRY, CipherStrategy
from ..errors import InvalidKey, UnsupportedOperation
from ..keys.material import AffineKey, ByteKey, HillKey, LetterKey

logger = logging.getLogger(__name__)

KeyMaterial = Union[LetterKey, ByteKey, AffineKey, HillKey]
Payload = Union[str, bytes, bytearray]


class CipherKind(Enum):
    """The closed set of supported ciphers; values are registry names."""
    VIGENERE = 'vigenere'
    AUTOKEY = 'autokey'
    EXTENDED = 'extended'
    AFFINE = 'affine'
    PLAYFAIR = 'playfair'
    HILL = 'hill'


class Action(Enum):
    ENCRYPT = 'encrypt'
    DECRYPT = 'decrypt'


KEY_TYPES: Dict[CipherKind, Type] = {
    CipherKind.VIGENERE: LetterKey,
    CipherKind.AUTOKEY: LetterKey,
    CipherKind.EXTENDED: ByteKey,
    CipherKind.AFFINE: AffineKey,
    CipherKind.PLAYFAIR: LetterKey,
    CipherKind.HILL: HillKey,
}


@dataclass(frozen=True)
class CipherRequest:
    """One cipher invocation: which cipher, with what key, on what payload."""
    kind: CipherKind
    key: KeyMaterial
    payload: Payload


def get_cipher(kind: CipherKind) -> CipherStrategy:
    """
    Look up the strategy registered for a cipher kind.

    Raises:
        UnsupportedOperation: If no strategy is registered for the kind
    """
    kind = CipherKind(kind)
    try:
        return CIPHER_REGISTRY[kind.value]
    except KeyError:
        raise UnsupportedOperation(f"No cipher registered for '{kind.value}'")


def coerce_key(kind: CipherKind, raw: Any) -> KeyMaterial:
    """
    Build the key object a cipher kind expects from raw caller input.

    Accepted raw forms:
        - letter ciphers: a string
        - extended: a string (encoded as UTF-8) or bytes
        - affine: an (a, b) pair
        - hill: a square nested sequence of integers

    Key objects of the right type are returned unchanged.

    Raises:
        InvalidKey: If the raw input cannot be turned into a valid key
    """
    kind = CipherKind(kind)
    key_type = KEY_TYPES[kind]
    if isinstance(raw, key_type):
        return raw

    if key_type is LetterKey:
        return LetterKey(raw)

    if key_type is ByteKey:
        if isinstance(raw, str):
            return ByteKey.from_text(raw)
        return ByteKey(raw)

    if key_type is AffineKey:
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence) or len(raw) != 2:
            raise InvalidKey("Affine key must be an (a, b) pair of integers")
        return AffineKey(raw[0], raw[1])

    return HillKey(raw)


def process(request: CipherRequest, action: Action) -> Payload:
    """
    Run a cipher request in the given direction.

    Args:
        request: The cipher, key and payload
        action: Action.ENCRYPT or Action.DECRYPT

    Returns:
        A string for text payloads, bytes for binary extended payloads

    Raises:
        InvalidKey: If the key type does not match the cipher kind, or
            the key fails the cipher's own checks
        NotInvertible: Hill decryption with a singular key
        UnsupportedOperation: Hill decryption with an unsupported size
    """
    kind = CipherKind(request.kind)
    action = Action(action)

    expected = KEY_TYPES[kind]
    if not isinstance(request.key, expected):
        raise InvalidKey(f"{kind.value} expects a {expected.__name__}, got {type(request.key).__name__}")

    cipher = get_cipher(kind)
    logger.debug(f"Dispatching {action.value} to '{cipher.name}'")

    if action is Action.ENCRYPT:
        return cipher.encrypt(request.payload, request.key)
    return cipher.decrypt(request.payload, request.key)


def encrypt(kind: CipherKind, key: Any, payload: Payload) -> Payload:
    """
    Encrypt a payload with the chosen cipher.

    Args:
        kind: Which cipher to use
        key: Key object or raw key material (see coerce_key)
        payload: Text, or bytes for the extended cipher

    Returns:
        The ciphertext
    """
    return process(CipherRequest(CipherKind(kind), coerce_key(kind, key), payload), Action.ENCRYPT)


def decrypt(kind: CipherKind, key: Any, payload: Payload) -> Payload:
    """
    Decrypt a payload with the chosen cipher.

    Args:
        kind: Which cipher to use
        key: Key object or raw key material (see coerce_key)
        payload: Ciphertext, or bytes for the extended cipher

    Returns:
        The recovered plaintext
    """
    return process(CipherRequest(CipherKind(kind), coerce_key(kind, key), payload), Action.DECRYPT)


def format_output(result: Payload, output_format: str = 'no-spaces', group_size: int = 5) -> Payload:
    """Apply the output format to a text result; bytes pass through."""
    if output_format == 'five-group' and isinstance(result, str):
        return format_in_groups(result, group_size)
    return result
