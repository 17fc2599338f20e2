"""Random integers, letters and strings for exercising the sorting routines."""

from __future__ import annotations

import random
import string

ALPHABET_LENGTH = 26

_DEFAULT_RNG = random.Random()


def _pick(rng: random.Random | None) -> random.Random:
    return _DEFAULT_RNG if rng is None else rng


def random_integer(max_value: int, rng: random.Random | None = None) -> int:
    """Return a random integer from 0 to max_value, both inclusive."""
    if max_value < 0:
        raise ValueError("max_value must not be negative")
    return _pick(rng).randint(0, max_value)


def random_int_array(
    size: int, max_value: int, rng: random.Random | None = None
) -> list[int]:
    """Return size random integers, each from 0 to max_value inclusive."""
    if size < 0:
        raise ValueError("size must not be negative")
    generator = _pick(rng)
    return [random_integer(max_value, generator) for _ in range(size)]


def random_char(upper_case: bool, rng: random.Random | None = None) -> str:
    """Return one random ASCII letter, upper or lower case."""
    letters = string.ascii_uppercase if upper_case else string.ascii_lowercase
    return letters[_pick(rng).randrange(ALPHABET_LENGTH)]


def random_string(
    upper_case: bool, max_length: int, rng: random.Random | None = None
) -> str:
    """Return a random string of letters whose length is 1 to max_length + 1."""
    generator = _pick(rng)
    size = random_integer(max_length, generator) + 1
    return "".join(random_char(upper_case, generator) for _ in range(size))