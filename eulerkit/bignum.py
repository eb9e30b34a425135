"""Arbitrary-length decimal numbers stored digit by digit."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest

__all__ = ["BigNum"]


@dataclass(frozen=True)
class BigNum:
    """A non-negative decimal number.

    ``digits`` runs from least to most significant, so 123 is ``(3, 2, 1)``.
    Arithmetic results are normalised so that every digit is below ten and
    there are no leading zeros.
    """

    digits: tuple[int, ...]

    def __post_init__(self) -> None:
        digits = tuple(self.digits)
        if any(d < 0 for d in digits):
            raise ValueError("digits must not be negative")
        object.__setattr__(self, "digits", digits)

    @classmethod
    def zeros(cls, num_digits: int) -> BigNum:
        """Return a number of ``num_digits`` zero digits."""
        if num_digits < 0:
            raise ValueError(f"digit count must not be negative: {num_digits}")
        return cls((0,) * num_digits)

    @classmethod
    def from_string(cls, text: str) -> BigNum:
        """Parse a string of decimal digits, keeping any leading zeros."""
        if not text or not all(ch in "0123456789" for ch in text):
            raise ValueError(f"not a decimal number: {text!r}")
        return cls(tuple(int(ch) for ch in reversed(text)))

    @property
    def num_digits(self) -> int:
        """How many digits are stored."""
        return len(self.digits)

    def carryover(self) -> BigNum:
        """Return the same value with every digit brought below ten."""
        normalised: list[int] = []
        carry = 0
        for digit in self.digits:
            carry, remainder = divmod(digit + carry, 10)
            normalised.append(remainder)
        while carry:
            carry, remainder = divmod(carry, 10)
            normalised.append(remainder)
        while len(normalised) > 1 and normalised[-1] == 0:
            normalised.pop()
        return BigNum(tuple(normalised) or (0,))

    def __add__(self, other: object) -> BigNum:
        if not isinstance(other, BigNum):
            return NotImplemented
        summed = tuple(
            a + b for a, b in zip_longest(self.digits, other.digits, fillvalue=0)
        )
        return BigNum(summed).carryover()

    def __mul__(self, other: object) -> BigNum:
        if not isinstance(other, BigNum):
            return NotImplemented
        product = [0] * (self.num_digits + other.num_digits)
        for i, a in enumerate(self.digits):
            for j, b in enumerate(other.digits):
                product[i + j] += a * b
        return BigNum(tuple(product)).carryover()

    def __str__(self) -> str:
        return "".join(str(d) for d in reversed(self.digits))