import pytest

from algorithmica.numbers import (
    binary_to_decimal,
    calculate,
    cyclic_swap,
    decimal_to_binary,
    fibonacci,
    fibonacci_series,
    is_palindrome_number,
    is_perfect_number,
    prime_factors,
    quotient_and_remainder,
    reverse_digits,
)


@pytest.mark.parametrize("a, b", [(2.5, 4.0), (-3, 7), (10, 0.5)])
def test_calculate_inverse_operations(a, b):
    assert calculate("-", calculate("+", a, b), b) == pytest.approx(a)
    assert calculate("/", calculate("*", a, b), b) == pytest.approx(a)


def test_calculate_unknown_operator():
    with pytest.raises(ValueError):
        calculate("%", 1, 2)


def test_calculate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate("/", 1, 0)


@pytest.mark.parametrize("factors", [[2, 2, 3], [13], [5, 7, 7, 11], [97], [2, 3, 5, 7, 11, 13]])
def test_prime_factors_of_product(factors):
    n = 1
    for factor in factors:
        n *= factor
    assert prime_factors(n) == sorted(set(factors))


def test_prime_factors_of_one_is_empty():
    assert not prime_factors(1)


def test_prime_factors_divide_out_completely():
    for n in range(2, 300):
        remaining = n
        for p in prime_factors(n):
            assert remaining % p == 0
            while remaining % p == 0:
                remaining //= p
        assert remaining == 1


def test_quotient_truncates_towards_zero():
    assert quotient_and_remainder(-7, 2) == (-3, -1)


@pytest.mark.parametrize("dividend", [-17, -5, 0, 3, 22])
@pytest.mark.parametrize("divisor", [-4, -1, 3, 7])
def test_quotient_and_remainder_invariant(dividend, divisor):
    quotient, remainder = quotient_and_remainder(dividend, divisor)
    assert quotient * divisor + remainder == dividend
    assert abs(remainder) < abs(divisor)
    assert remainder == 0 or (remainder < 0) == (dividend < 0)


def test_quotient_by_zero():
    with pytest.raises(ZeroDivisionError):
        quotient_and_remainder(5, 0)


@pytest.mark.parametrize("digits", ["10101001", "0", "1", "1111", "100000"])
def test_binary_to_decimal_matches_int(digits):
    assert binary_to_decimal(int(digits)) == int(digits, 2)
    assert binary_to_decimal(digits) == int(digits, 2)


def test_binary_to_decimal_rejects_other_digits():
    with pytest.raises(ValueError):
        binary_to_decimal(1021)


def test_decimal_to_binary_value():
    assert decimal_to_binary(244) == "11110100"


def test_binary_round_trip():
    for n in range(300):
        bits = decimal_to_binary(n)
        assert set(bits) <= {"0", "1"}
        assert binary_to_decimal(bits) == n


def test_decimal_to_binary_negative():
    with pytest.raises(ValueError):
        decimal_to_binary(-1)


def test_fibonacci_series_start():
    assert fibonacci_series(5) == [0, 1, 1, 2, 3]


def test_fibonacci_recurrence_and_series_agree():
    series = fibonacci_series(25)
    assert len(series) == 25
    assert series == [fibonacci(i) for i in range(25)]
    for i in range(2, 25):
        assert series[i] == series[i - 1] + series[i - 2]


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


@pytest.mark.parametrize("n", [1230, 5, 98765, 1000])
def test_reverse_digits_invariants(n):
    reversed_digits = reverse_digits(n)
    assert sorted(reversed_digits) == sorted(str(n))
    assert reversed_digits[-1] == str(n)[0]
    assert reverse_digits(int(reversed_digits[::-1])) == reversed_digits


@pytest.mark.parametrize("half", ["1", "12", "907", "4550"])
def test_palindrome_numbers(half):
    assert is_palindrome_number(int(half + half[::-1]))
    assert is_palindrome_number(int(half + half[-2::-1]))


@pytest.mark.parametrize("n", [12, 10, 123, -121])
def test_not_palindrome_numbers(n):
    assert not is_palindrome_number(n)


@pytest.mark.parametrize("n", [6, 28, 496, 8128])
def test_perfect_numbers(n):
    assert is_perfect_number(n)


@pytest.mark.parametrize("n", [1, 2, 12, 27, 495, -6])
def test_not_perfect_numbers(n):
    assert not is_perfect_number(n)


def test_cyclic_swap():
    assert cyclic_swap(1, 2, 3) == (3, 1, 2)
    assert cyclic_swap(*cyclic_swap(*cyclic_swap(1, 2, 3))) == (1, 2, 3)