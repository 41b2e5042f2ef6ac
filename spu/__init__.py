#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU - Secure Password Utilities.

Cryptographically secure generation of passwords, PINs, passphrases and
random character sequences. All randomness comes from the operating system
CSPRNG and is mapped into the requested ranges without modulo bias.

Usage:
    from spu import generate_password, generate_pin, generate_passphrase
    generate_password()                               # 12 characters, all categories
    generate_password(8, symbols=False, digits=2)     # exactly two digits
    generate_password(8, digits={"min": 2})           # at least two digits
    generate_pin(6)                                   # "036919"
    generate_passphrase(6)                            # "fox-bread-moon-key-tea-owl"
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs


def get_spu_version() -> Version:
    """Get SPU version information.

    :return: Parsed version object containing SPU version information.
    """
    from .__version__ import __version__ as spu_version

    return parse(spu_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_spu_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)


# The SPU behavior settings
SPU_VERSION_BASE = version.base_version
SPU_DATA_FOLDER = os.environ.get("SPU_DATA_FOLDER") or os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "data"
)
SPU_PLATFORM_DIRS = PlatformDirs(appname="spu", appauthor="nxp", version=SPU_VERSION_BASE)

# Wordlists are searched in SPU_WORDLIST_FOLDER, then in the user data folder, then in bundled data
SPU_WORDLIST_FOLDER = os.environ.get("SPU_WORDLIST_FOLDER")
SPU_USER_WORDLIST_FOLDER = os.path.join(SPU_PLATFORM_DIRS.user_data_dir, "wordlists")

SPU_DEBUG = value_to_bool(os.environ.get("SPU_DEBUG"))
SPU_SCHEMA_STRICT = value_to_bool(os.environ.get("SPU_SCHEMA_STRICT"))

# pylint: disable=wrong-import-position
from spu.charsets import DIGIT_CHARSET, LOWERCASE_CHARSET, SYMBOL_CHARSET, UPPERCASE_CHARSET
from spu.characters import generate_characters, randomize_characters
from spu.crypto.rng import get_random_numbers_in_range
from spu.passphrase import DEFAULT_WORDLIST, generate_passphrase
from spu.password import generate_password, generate_pin

__all__ = [
    "DEFAULT_WORDLIST",
    "DIGIT_CHARSET",
    "LOWERCASE_CHARSET",
    "SYMBOL_CHARSET",
    "UPPERCASE_CHARSET",
    "generate_characters",
    "generate_passphrase",
    "generate_password",
    "generate_pin",
    "get_random_numbers_in_range",
    "randomize_characters",
]
