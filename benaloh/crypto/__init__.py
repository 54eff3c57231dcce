from benaloh.crypto.encoding import bytes_to_int, int_to_bytes
from benaloh.crypto.errors import (
    BenalohError,
    CiphertextTooLargeError,
    DecryptionError,
    KeyGenerationExhaustedError,
    MessageTooLargeError,
)
from benaloh.crypto.keygen import generate_key
from benaloh.crypto.keys import PrivateKey, PublicKey

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
