"""Ones' complement checksum over fixed-width binary words."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

Bits = list[int]


def _as_bits(word: str | Iterable[int]) -> Bits:
    if isinstance(word, str):
        if set(word) - {"0", "1"}:
            raise ValueError(f"not a bit string: {word!r}")
        return [int(char) for char in word]
    bits = list(word)
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError(f"bits must be 0 or 1: {bits!r}")
    return [int(bit) for bit in bits]


def _to_int(bits: Sequence[int]) -> int:
    value = 0
    for bit in bits:
        value = value << 1 | bit
    return value


def _to_bits(value: int, width: int) -> Bits:
    return [int(char) for char in format(value, f"0{width}b")]


def ones_complement_sum(words: Iterable[str | Iterable[int]]) -> Bits:
    """Add equal-width words in ones' complement, wrapping carries around."""
    rows = [_as_bits(word) for word in words]
    if not rows:
        raise ValueError("at least one word is needed")
    width = len(rows[0])
    if width == 0:
        raise ValueError("words must not be empty")
    if any(len(row) != width for row in rows):
        raise ValueError("all words must have the same width")
    modulus = 1 << width
    total = 0
    for row in rows:
        total += _to_int(row)
        if total >= modulus:
            total = total - modulus + 1
    return _to_bits(total, width)


def complement(bits: Iterable[int]) -> Bits:
    """Flip every bit."""
    return [1 - bit for bit in _as_bits(bits)]


def checksum(words: Iterable[str | Iterable[int]]) -> Bits:
    """Return the complement of the ones' complement sum of the words."""
    return complement(ones_complement_sum(words))


def format_report(words: Iterable[str | Iterable[int]]) -> str:
    """Describe the sum of the words and its complement."""
    total = ones_complement_sum(words)
    return "\n".join(
        [
            "the final result",
            "".join(map(str, total)),
            "complement",
            "".join(map(str, complement(total))),
        ]
    )


def _split_words(text: str, width: int) -> list[str]:
    if width <= 0:
        raise ValueError("width must be positive")
    bits = "".join(text.split())
    if not bits or len(bits) % width:
        raise ValueError(f"expected a whole number of {width}-bit words")
    return [bits[start:start + width] for start in range(0, len(bits), width)]


def main(argv: Sequence[str] | None = None) -> int:
    """Compute a checksum of words given as arguments or read from stdin."""
    parser = argparse.ArgumentParser(
        prog="checksum", description="Ones' complement checksum of binary words."
    )
    parser.add_argument("words", nargs="*", help="data words as bit strings")
    parser.add_argument("-w", "--width", type=int, default=8,
                        help="word width when reading bits from stdin (default 8)")
    parser.add_argument("-o", "--output", type=Path, help="write the report to this file")
    args = parser.parse_args(argv)
    try:
        words = args.words or _split_words(sys.stdin.read(), args.width)
        report = format_report(words)
    except ValueError as exc:
        print(f"checksum: {exc}", file=sys.stderr)
        return 1
    if args.output is not None:
        args.output.write_text(report + "\n", encoding="utf-8")
    else:
        print(report)
    return 0