class BenalohError(Exception):
    """Base class for every error raised by the Benaloh primitives."""


class MessageTooLargeError(BenalohError, ValueError):
    def __init__(self, message: str = "benaloh: message is larger than the message space"):
        super().__init__(message)


class CiphertextTooLargeError(BenalohError, ValueError):
    def __init__(self, message: str = "benaloh: ciphertext is larger than the public modulus"):
        super().__init__(message)


class DecryptionError(BenalohError):
    def __init__(self, message: str = "benaloh: no plaintext matches the ciphertext"):
        super().__init__(message)


class KeyGenerationExhaustedError(BenalohError, RuntimeError):
    """Raised when the bounded keypair search runs out of attempts."""

    def __init__(self, attempts: int):
        super().__init__(f"benaloh: key generation exhausted after {attempts} attempts")
        self.attempts = attempts
