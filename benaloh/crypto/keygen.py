import logging
import math

from benaloh import config
from benaloh.crypto.errors import KeyGenerationExhaustedError
from benaloh.crypto.keys import PrivateKey, PublicKey
from benaloh.crypto.primes import generate_prime, system_random

logger = logging.getLogger(__name__)


def _find_q(bits: int, r: int, rng, max_attempts: int) -> int | None:
    # gcd(r, q-1) = 1
    for _ in range(max_attempts):
        q = generate_prime(bits, rng)
        if math.gcd(q - 1, r) == 1:
            return q
    return None


def _find_y(n: int, phi_div_r: int, rng, max_attempts: int) -> tuple[int, int] | None:
    # x = y^(phi/r) mod n must differ from 1 so that x has order exactly r
    for _ in range(max_attempts):
        y = rng.randrange(1, n)
        if math.gcd(y, n) != 1:
            continue
        x = pow(y, phi_div_r, n)
        if x > 1:
            return y, x
    return None


def generate_key(bits: int, rng=None, max_attempts: int | None = None) -> PrivateKey:
    """Generate a Benaloh private key whose primes p and q have ``bits`` bits.

    The message space r is a ``bits // 2``-bit prime with r | p-1,
    gcd(r, (p-1)/r) = 1 and gcd(r, q-1) = 1. Every rejection loop is bounded
    by ``max_attempts``; a failed q or y search restarts with fresh p and r.
    """
    if bits < 4:
        raise ValueError("key size must be at least 4 bits")
    if max_attempts is None:
        max_attempts = config.MAX_ATTEMPTS
    if max_attempts < 1:
        raise ValueError("max_attempts must be positive")
    if rng is None:
        rng = system_random

    for attempt in range(1, max_attempts + 1):
        p = generate_prime(bits, rng)
        r = generate_prime(bits // 2, rng)
        quotient, remainder = divmod(p - 1, r)
        if remainder != 0 or math.gcd(r, quotient) != 1:
            continue

        q = _find_q(bits, r, rng, max_attempts)
        if q is None:
            logger.debug("no q coprime with r=%d found, restarting (attempt %d)", r, attempt)
            continue

        phi = (p - 1) * (q - 1)
        n = p * q
        phi_div_r = phi // r

        found = _find_y(n, phi_div_r, rng, max_attempts)
        if found is None:
            logger.debug("no y with y^(phi/r) > 1 found, restarting (attempt %d)", attempt)
            continue
        y, x = found

        logger.info(
            "generated Benaloh key: r=%d, n=%d bits, after %d attempt(s)",
            r,
            n.bit_length(),
            attempt,
        )
        return PrivateKey(public_key=PublicKey(y=y, r=r, n=n), phi_div_r=phi_div_r, x=x)

    logger.warning("Benaloh key generation gave up after %d attempts (bits=%d)", max_attempts, bits)
    raise KeyGenerationExhaustedError(max_attempts)
