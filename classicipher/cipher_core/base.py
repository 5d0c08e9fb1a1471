"""
Cipher Strategy Framework

This module defines the abstract base class every cipher implements
and the registry the dispatch layer looks ciphers up in.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Type

from ..errors import InvalidKey


class CipherStrategy(ABC):
    """Abstract base class that all ciphers must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The registry name for this cipher."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for help text."""
        pass

    @property
    @abstractmethod
    def key_type(self) -> Type:
        """The key material class this cipher accepts."""
        pass

    def check_key(self, key: Any) -> None:
        """
        Make sure the key material has the type this cipher expects.

        Raises:
            InvalidKey: If key is not an instance of key_type
        """
        if not isinstance(key, self.key_type):
            raise InvalidKey(
                f"Cipher '{self.name}' expects a {self.key_type.__name__}, "
                f"got {type(key).__name__}"
            )

    @abstractmethod
    def encrypt(self, plaintext, key):
        pass

    @abstractmethod
    def decrypt(self, ciphertext, key):
        pass


CIPHER_REGISTRY: Dict[str, CipherStrategy] = {}


def register_cipher(cls):
    """Decorator to auto-register ciphers."""
    cipher = cls()
    CIPHER_REGISTRY[cipher.name] = cipher
    return cls
