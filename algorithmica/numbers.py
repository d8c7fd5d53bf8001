"""Small number-theory and arithmetic helpers."""

from __future__ import annotations

from operator import add, mul, sub, truediv

_OPERATIONS = {"+": add, "-": sub, "*": mul, "/": truediv}


def calculate(operator: str, a: float, b: float) -> float:
    """Apply one of the operators +, -, * or / to a and b."""
    try:
        operation = _OPERATIONS[operator]
    except KeyError:
        raise ValueError(f"operator is not correct: {operator!r}") from None
    return operation(a, b)


def prime_factors(n: int) -> list[int]:
    """Return the distinct primes dividing n, in ascending order."""
    factors: list[int] = []
    remaining = n
    candidate = 2
    while candidate * candidate <= remaining:
        if remaining % candidate == 0:
            factors.append(candidate)
            while remaining % candidate == 0:
                remaining //= candidate
        candidate += 1
    if remaining > 1:
        factors.append(remaining)
    return factors


def quotient_and_remainder(dividend: int, divisor: int) -> tuple[int, int]:
    """Divide integers, truncating the quotient towards zero.

    The remainder takes the sign of the dividend.
    """
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - divisor * quotient


def binary_to_decimal(n: int | str) -> int:
    """Read the decimal digits of n (all 0 or 1) as a binary number."""
    digits = str(n).strip()
    sign = 1
    if digits.startswith("-"):
        sign = -1
        digits = digits[1:]
    if not digits or set(digits) - {"0", "1"}:
        raise ValueError(f"not a binary number: {n!r}")
    return sign * int(digits, 2)


def decimal_to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return format(n, "b")


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting from fibonacci(0) == 0."""
    if n < 0:
        raise ValueError(f"index must be non-negative, got {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> list[int]:
    """Return the first count Fibonacci numbers."""
    series: list[int] = []
    current, following = 0, 1
    for _ in range(max(count, 0)):
        series.append(current)
        current, following = following, current + following
    return series


def reverse_digits(n: int) -> str:
    """Return the decimal digits of n in reverse order, leading zeros kept."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return str(n)[::-1]


def is_palindrome_number(n: int) -> bool:
    """Tell whether n reads the same forwards and backwards."""
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]


def is_perfect_number(n: int) -> bool:
    """Tell whether n equals the sum of its proper divisors."""
    if n < 2:
        return False
    total = 1
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            total += divisor
            partner = n // divisor
            if partner != divisor:
                total += partner
        divisor += 1
    return total == n


def cyclic_swap(a, b, c):
    """Rotate three values: a takes c, b takes a, c takes b."""
    return c, a, b