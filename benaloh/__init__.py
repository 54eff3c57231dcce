"""Benaloh additively homomorphic public-key cryptosystem (teaching implementation)."""

from benaloh.crypto import (
    BenalohError,
    CiphertextTooLargeError,
    DecryptionError,
    KeyGenerationExhaustedError,
    MessageTooLargeError,
    PrivateKey,
    PublicKey,
    bytes_to_int,
    generate_key,
    int_to_bytes,
)

__version__ = "0.1.0"

__all__ = [
    "BenalohError",
    "CiphertextTooLargeError",
    "DecryptionError",
    "KeyGenerationExhaustedError",
    "MessageTooLargeError",
    "PrivateKey",
    "PublicKey",
    "bytes_to_int",
    "generate_key",
    "int_to_bytes",
]
