import random
from typing import Optional, Tuple

PRIME_THRESHOLD = 1_000_000
NUM_TRIALS = 128


def is_prime(n: int, rng: Optional[random.Random] = None) -> bool:
    """Determine if a non-negative integer is prime.

    Inputs below PRIME_THRESHOLD are answered exactly by trial division.
    Larger inputs use Miller-Rabin with NUM_TRIALS random witnesses drawn
    from `rng`; a fresh generator is used for the call when none is given.
    """
    if n < PRIME_THRESHOLD:
        return trial_division_is_prime(n)
    return miller_rabin_is_prime(n, NUM_TRIALS, rng)


def trial_division_is_prime(n: int) -> bool:
    """Naive prime test using the 6k +/- 1 optimization. Exact for any n."""
    if n <= 3:
        return n > 1

    if n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6

    return True


def find_k_and_m(n: int) -> Tuple[int, int]:
    """Find k and m where (n - 1) = 2^k * m with m odd."""
    m = n - 1
    k = (m & -m).bit_length() - 1
    return k, m >> k


def miller_rabin_is_prime(n: int, trials: int = NUM_TRIALS, rng: Optional[random.Random] = None) -> bool:
    """Probabilistic Miller-Rabin test. A single failing trial means composite."""
    if n == 2 or n == 3:
        return True

    if n <= 1 or n % 2 == 0:
        return False

    if rng is None:
        rng = random.Random()

    k, m = find_k_and_m(n)

    for _ in range(trials):
        a = rng.randrange(2, n)
        b = pow(a, m, n)
        if b == 1:
            continue  # n may be prime

        for _ in range(k):
            if b == n - 1:
                break  # n may be prime
            b = pow(b, 2, n)
        else:
            return False  # a witnesses that n is composite

    return True
