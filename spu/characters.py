#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU random character generation and shuffling.

This module provides generation of random strings from an arbitrary charset
and random reordering of characters, both driven by the unbiased range sampler.
"""

from typing import Any, Optional

from spu.crypto.rng import ByteSource, is_integer, sample_uniform_sequence
from spu.exceptions import SPUInvalidArgumentError, SPUInvalidCharsetError


def validate_charset(charset: Any, name: str = "charset") -> None:
    """Validate the charset used for random character selection.

    A character present more than once would be picked more often than the
    others, so duplicates are rejected.

    :param charset: Charset to validate.
    :param name: Name of the charset used in error messages.
    :raises SPUInvalidCharsetError: Charset is not a string, is too short or has duplicates.
    """
    if not isinstance(charset, str) or len(charset) < 2:
        raise SPUInvalidCharsetError(
            f"Invalid argument: {name} must be a string with length greater than or equal to 2"
        )
    if len(set(charset)) != len(charset):
        duplicates = sorted({char for char in charset if charset.count(char) > 1})
        raise SPUInvalidCharsetError(
            f"Invalid argument: {name} must not contain duplicate characters: {''.join(duplicates)}"
        )


def generate_characters(
    length: int, charset: str, *, byte_source: Optional[ByteSource] = None
) -> str:
    """Generate a string of length characters chosen randomly from the given charset.

    Characters are drawn independently (with replacement) and kept in draw order.

        generate_characters(4, "$%^&")           # "&$&^"
        generate_characters(6, "0123456789")     # "947682"

    :param length: The number of random characters to generate, at least 0.
    :param charset: The set of characters to randomly sample from.
    :param byte_source: Source of random bytes, defaults to the OS CSPRNG.
    :raises SPUInvalidArgumentError: Length is not a non-negative integer.
    :raises SPUInvalidCharsetError: Charset is invalid.
    :return: A random string of length characters from charset.
    """
    if not is_integer(length) or length < 0:
        raise SPUInvalidArgumentError(
            "Invalid argument: length must be an integer greater than or equal to 0"
        )
    validate_charset(charset)
    if length == 0:
        return ""

    indexes = sample_uniform_sequence(length, 0, len(charset), byte_source=byte_source)
    return "".join(charset[i] for i in indexes)


def randomize_characters(characters: str, *, byte_source: Optional[ByteSource] = None) -> str:
    """Randomize the ordering of the characters in the given string.

        randomize_characters("randomize me")  # "e znmaedimro"
        randomize_characters("randomize me")  # "arndimz moee"

    :param characters: A string of characters to randomize.
    :param byte_source: Source of random bytes, defaults to the OS CSPRNG.
    :raises SPUInvalidArgumentError: Characters is not a string.
    :return: A random ordering of the characters argument.
    """
    if not isinstance(characters, str):
        raise SPUInvalidArgumentError("Invalid argument: characters argument must be a string")

    characters_length = len(characters)
    if characters_length < 2:
        return characters

    # Swap indexes may repeat, every position i is swapped with a random position of the whole string
    swap_indexes = sample_uniform_sequence(
        characters_length, 0, characters_length, byte_source=byte_source
    )
    result = list(characters)
    for i, j in enumerate(swap_indexes):
        result[i], result[j] = result[j], result[i]

    return "".join(result)
