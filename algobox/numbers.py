"""Number checks: happy numbers and primality."""

from __future__ import annotations

import math


def _digit_square_sum(n: int) -> int:
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """True if repeatedly summing squared digits reaches 1."""
    seen: set[int] = set()
    while True:
        n = _digit_square_sum(n)
        if n == 1:
            return True
        if n in seen:
            return False
        seen.add(n)


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def prime_sieve(limit: int) -> list[bool]:
    """Sieve of Eratosthenes: element i tells whether i is prime, 0..limit."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    sieve = [True] * (limit + 1)
    sieve[0] = False
    if limit >= 1:
        sieve[1] = False
    for i in range(2, math.isqrt(limit) + 1):
        if sieve[i]:
            sieve[i * i :: i] = [False] * len(range(i * i, limit + 1, i))
    return sieve