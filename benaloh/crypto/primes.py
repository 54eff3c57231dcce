import secrets

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)

# process-wide default randomness source (OS entropy)
system_random = secrets.SystemRandom()


def is_probable_prime(n: int, rounds: int = 20, rng=None) -> bool:
    """Miller-Rabin with trial division by the first few primes.

    Witnesses are drawn from ``rng`` so that a seeded source gives a fully
    reproducible key search.
    """
    if n < 2:
        return False
    if n in SMALL_PRIMES:
        return True
    if any((n % p) == 0 for p in SMALL_PRIMES):
        return False
    if rng is None:
        rng = system_random

    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for _ in range(rounds):
        a = rng.randrange(2, n - 1)
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def generate_prime(bits: int, rng=None) -> int:
    """Draw a prime of exactly ``bits`` bits.

    The two top bits are forced so that the product of two such primes has
    ``2 * bits`` bits, and the low bit is forced odd. A 2-bit prime is
    therefore always 3.
    """
    if bits < 2:
        raise ValueError("prime size must be at least 2 bits")
    if rng is None:
        rng = system_random
    while True:
        candidate = rng.getrandbits(bits) | (3 << (bits - 2)) | 1
        if is_probable_prime(candidate, rng=rng):
            return candidate
