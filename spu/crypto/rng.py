#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU cryptographic random number generation utilities.

This module provides the secure source of random bytes and the unbiased range
sampler built on top of it. Raw bytes are mapped into an arbitrary range using
rejection sampling, so no value of the range is more likely than any other
(no modulo bias).
"""

# Used security modules

import logging
from secrets import token_bytes
from typing import Any, Callable, Optional

from spu.exceptions import SPUInvalidArgumentError, SPUInvalidRangeError

logger = logging.getLogger(__name__)

ByteSource = Callable[[int], bytes]

MAX_RANGE_END = 1 << 16
SINGLE_BYTE_DOMAIN = 1 << 8


def random_bytes(length: int) -> bytes:
    """Generate cryptographically secure random bytes.

    This is the default byte source of every generator in SPU.

    :param length: The number of random bytes to generate.
    :raises ValueError: If length is negative.
    :return: Cryptographically secure random bytes of specified length.
    """
    return token_bytes(length)


def is_integer(value: Any) -> bool:
    """Check that value is an integer, booleans excluded.

    :param value: Value to check.
    :return: True if value is a plain integer.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_range(start: int, end: int) -> None:
    """Validate range for the uniform sampling.

    :param start: First value of the range (inclusive).
    :param end: End of the range (exclusive).
    :raises SPUInvalidArgumentError: Start or end is not an integer.
    :raises SPUInvalidRangeError: The range is empty, has one value or exceeds two bytes.
    """
    if not is_integer(start):
        raise SPUInvalidArgumentError("Invalid argument: start must be an integer")
    if not is_integer(end):
        raise SPUInvalidArgumentError("Invalid argument: end must be an integer")
    if start < 0:
        raise SPUInvalidRangeError("Invalid range: start must be greater than or equal to 0")
    if end > MAX_RANGE_END:
        raise SPUInvalidRangeError(
            f"Invalid range: end must be less than or equal to {MAX_RANGE_END}"
        )
    if end - start < 2:
        raise SPUInvalidRangeError("Invalid range: range must contain at least two values")


def _sample(start: int, end: int, byte_source: ByteSource) -> int:
    """Draw one value from an already validated range.

    :param start: First value of the range (inclusive).
    :param end: End of the range (exclusive).
    :param byte_source: Source of random bytes.
    :return: Uniformly distributed value from [start, end).
    """
    range_size = end - start
    byte_count = 2 if range_size > SINGLE_BYTE_DOMAIN else 1
    domain = 1 << (8 * byte_count)
    # Largest multiple of range size that fits the domain, candidates above are rejected
    cutoff = range_size * (domain // range_size)

    while True:
        candidate = int.from_bytes(byte_source(byte_count), "big")
        if candidate < cutoff:
            return start + candidate % range_size


def sample_uniform(start: int, end: int, *, byte_source: Optional[ByteSource] = None) -> int:
    """Get a random value greater than or equal to start and less than end.

    Candidates are drawn from one byte when the range holds at most 256 values,
    from two big-endian bytes otherwise. Candidates at or above the largest
    multiple of the range size are discarded and redrawn, which gives every
    value in the range the same number of candidate origins.

    Example:

        sample_uniform(0, 64)  # value in [0, 64), one byte per draw
        sample_uniform(11, 50000)  # value in [11, 50000), two bytes per draw

    :param start: First value of the range (inclusive), at least 0.
    :param end: End of the range (exclusive), at most 65536.
    :param byte_source: Source of random bytes, defaults to the OS CSPRNG.
    :raises SPUInvalidArgumentError: Start or end is not an integer.
    :raises SPUInvalidRangeError: Range is too small or too large.
    :return: Uniformly distributed value from [start, end).
    """
    validate_range(start, end)
    return _sample(start, end, byte_source or random_bytes)


def sample_uniform_sequence(
    count: int, start: int, end: int, *, byte_source: Optional[ByteSource] = None
) -> list[int]:
    """Get a list of independent random values from the range [start, end).

    All arguments are validated before any random byte is drawn.

    :param count: Number of values to draw, at least 1.
    :param start: First value of the range (inclusive), at least 0.
    :param end: End of the range (exclusive), at most 65536.
    :param byte_source: Source of random bytes, defaults to the OS CSPRNG.
    :raises SPUInvalidArgumentError: Invalid count, start or end type.
    :raises SPUInvalidRangeError: Range is too small or too large.
    :return: List of count uniformly distributed values.
    """
    if not is_integer(count) or count < 1:
        raise SPUInvalidArgumentError(
            "Invalid argument: count must be an integer greater than or equal to 1"
        )
    validate_range(start, end)
    logger.debug(f"Sampling {count} values from range [{start}, {end})")
    source = byte_source or random_bytes
    return [_sample(start, end, source) for _ in range(count)]


def get_random_numbers_in_range(
    length: int, start: int, end: int, *, byte_source: Optional[ByteSource] = None
) -> list[int]:
    """Get length random numbers greater than or equal to start and less than end.

        get_random_numbers_in_range(6, 0, 10)  # [3, 9, 0, 0, 7, 1]

    :param length: Number of values to return, at least 1.
    :param start: First value of the range (inclusive).
    :param end: End of the range (exclusive), at most 65536.
    :param byte_source: Source of random bytes, defaults to the OS CSPRNG.
    :return: List of uniformly distributed values.
    """
    return sample_uniform_sequence(length, start, end, byte_source=byte_source)
