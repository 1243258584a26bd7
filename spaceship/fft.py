"""Flawed Frequency Transmission of digit signals."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def from_string(text: str, repetition: int) -> list[int]:
    """The digits of text, repeated repetition times."""
    return [int(c) for c in text] * repetition


def output_signal(signal: Sequence[int]) -> list[int]:
    """One FFT phase using the repeating 0, 1, 0, -1 pattern."""
    prefix = [0, *accumulate(signal)]
    count = len(signal)
    result = []
    for element in range(count):
        period = (element + 1) * 2
        total = 0
        factor = 1
        for start in range(element, count, period):
            end = min(start + element + 1, count)
            total += factor * (prefix[end] - prefix[start])
            factor = -factor
        result.append(abs(total) % 10)
    return result


def output_message(signal: Sequence[int], repetition: int,
                   offset: int) -> list[int]:
    """Eight digits at offset after repetition phases, for offsets in the back half."""
    digits = list(signal[offset:])
    for _ in range(repetition):
        suffix = accumulate(reversed(digits), lambda a, b: (a + b) % 10)
        digits = list(suffix)[::-1]
    return digits[:8]