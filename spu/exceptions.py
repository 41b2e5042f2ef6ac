#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU exception classes and error handling utilities.

This module defines the hierarchy of custom exception classes used throughout
the SPU library. Every validation failure is raised before any random byte is
consumed, so a raised exception always means no output was produced.
"""

from typing import Optional

#######################################################################
# # Secure Password Utilities Exceptions
#######################################################################


class SPUError(Exception):
    """Secure Password Utilities Base Exception.

    Base exception class for all SPU-related errors. It provides consistent
    error formatting across the library.

    :cvar fmt: Default error message format template.
    """

    fmt = "SPU: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base SPU Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        If no description is provided, defaults to "Unknown Error".

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class SPUKeyError(SPUError, KeyError):
    """SPU Key Error exception for missing or invalid keys."""


class SPUValueError(SPUError, ValueError):
    """SPU standard value error exception."""


class SPUInvalidArgumentError(SPUValueError):
    """SPU invalid argument exception.

    Raised when an argument has a wrong type or its value is out of the allowed
    bounds, e.g. a negative length or a wordlist with less than two words.
    """


class SPUInvalidLengthError(SPUInvalidArgumentError):
    """SPU invalid password length exception.

    Raised when the requested password length is not an integer of at least 1.
    """


class SPUInvalidRangeError(SPUValueError):
    """SPU invalid sampling range exception.

    Raised when the range for uniform sampling holds less than two values,
    starts below zero or ends above 65536.
    """


class SPUInvalidCategorySpecError(SPUValueError):
    """SPU malformed password category option exception.

    A category option must be a boolean, a non-negative integer or a mapping
    ``{"min": <non-negative integer>}``.
    """


class SPUInvalidCharsetError(SPUValueError):
    """SPU invalid charset exception.

    Raised when a charset is not a string, has less than two characters or
    contains a character more than once.
    """


class SPULengthMismatchError(SPUValueError):
    """SPU password length mismatch exception.

    Raised when the guaranteed character counts of all categories exceed the
    password length, or fall short of it while no category may supply filler.
    """
