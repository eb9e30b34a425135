"""Prime sieve and n-th prime lookup."""

from __future__ import annotations

from math import log

__all__ = ["create_prime_sieve", "get_nth_prime"]

# Below this count the n(ln n + ln ln n) bound is not an upper bound.
_SMALL_N_LIMIT = 6
_SMALL_SIEVE_SIZE = 12


def create_prime_sieve(size: int) -> list[bool]:
    """Return a list where ``sieve[i]`` tells whether ``i`` is prime.

    Only multiples are struck out, so indices 0 and 1 stay marked True;
    callers that care must skip them.
    """
    if size < 0:
        raise ValueError(f"sieve size must not be negative: {size}")
    sieve = [True] * size
    i = 2
    while i * i < size:
        if sieve[i]:
            start = 2 * i
            sieve[start::i] = [False] * len(range(start, size, i))
        i += 1
    return sieve


def get_nth_prime(n: int) -> int:
    """Return the ``n``-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError(f"n must be at least 1: {n}")
    if n == 1:
        return 2
    if n < _SMALL_N_LIMIT:
        sieve_size = _SMALL_SIEVE_SIZE
    else:
        sieve_size = int(n * (log(n) + log(log(n))))
    sieve = create_prime_sieve(sieve_size)
    count = 1
    for i in range(3, sieve_size):
        if sieve[i]:
            count += 1
            if count == n:
                return i
    raise RuntimeError(f"sieve of size {sieve_size} holds fewer than {n} primes")