import math
from dataclasses import dataclass

from benaloh.crypto.encoding import bytes_to_int, int_to_bytes
from benaloh.crypto.errors import CiphertextTooLargeError, DecryptionError, MessageTooLargeError
from benaloh.crypto.primes import system_random

ONE = 1


@dataclass(frozen=True)
class PublicKey:
    y: int
    r: int
    n: int

    def _check_ciphertext(self, c: int) -> None:
        if c < 0:
            raise ValueError("ciphertext must be non-negative")
        if c >= self.n:
            raise CiphertextTooLargeError()

    def _check_message(self, m: int) -> None:
        if m < 0:
            raise ValueError("message must be non-negative")
        if m >= self.r:
            raise MessageTooLargeError()

    def random_blinding(self, rng=None) -> int:
        """Draw u uniformly from [1, n-1], coprime with n."""
        if rng is None:
            rng = system_random
        while True:
            u = rng.randrange(1, self.n)
            if math.gcd(u, self.n) == 1:
                return u

    def raw_encrypt(self, m: int, u: int | None = None, rng=None) -> int:
        """Encrypt integer ``m`` as y^m * u^r mod n.

        ``u`` is drawn fresh when omitted; pass it explicitly to replay a
        known ciphertext.
        """
        self._check_message(m)
        if u is None:
            u = self.random_blinding(rng)
        elif not 1 <= u < self.n:
            raise ValueError("blinding factor out of range")
        return (pow(self.y, m, self.n) * pow(u, self.r, self.n)) % self.n

    def encrypt(self, plaintext: bytes, rng=None) -> bytes:
        return int_to_bytes(self.raw_encrypt(bytes_to_int(plaintext), rng=rng))

    def raw_combine(self, *ciphertexts: int) -> int:
        """Multiply ciphertexts mod n; decrypts to the sum of their plaintexts mod r."""
        for c in ciphertexts:
            self._check_ciphertext(c)
        result = ONE
        for c in ciphertexts:
            result = (result * c) % self.n
        return result

    def combine(self, c1: bytes, c2: bytes) -> bytes:
        return int_to_bytes(self.raw_combine(bytes_to_int(c1), bytes_to_int(c2)))

    def combine_many(self, *ciphertexts: bytes) -> bytes:
        return int_to_bytes(self.raw_combine(*(bytes_to_int(c) for c in ciphertexts)))

    def add_plain(self, ciphertext: bytes, m: int) -> bytes:
        c = bytes_to_int(ciphertext)
        self._check_ciphertext(c)
        self._check_message(m)
        return int_to_bytes((c * pow(self.y, m, self.n)) % self.n)


@dataclass(frozen=True)
class PrivateKey:
    public_key: PublicKey
    phi_div_r: int
    x: int

    @property
    def y(self) -> int:
        return self.public_key.y

    @property
    def r(self) -> int:
        return self.public_key.r

    @property
    def n(self) -> int:
        return self.public_key.n

    def raw_decrypt(self, c: int) -> int:
        """Recover m from c by searching x^i == c^(phi/r) mod n over [0, r).

        Costs up to r modular multiplications, so only small message spaces
        are practical.
        """
        self.public_key._check_ciphertext(c)
        a = pow(c, self.phi_div_r, self.n)
        candidate = ONE
        for i in range(self.r):
            if candidate == a:
                return i
            candidate = (candidate * self.x) % self.n
        raise DecryptionError()

    def decrypt(self, ciphertext: bytes) -> bytes:
        return int_to_bytes(self.raw_decrypt(bytes_to_int(ciphertext)))
