#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU password and PIN generation test suite.

This module contains tests for password composition: category options and their
decoding, length and charset validation, exact and minimal category counts,
custom charsets and loading password policies from configuration files.
"""

import os
import re

import pytest

from spu.charsets import DIGIT_CHARSET, LOWERCASE_CHARSET, SYMBOL_CHARSET, UPPERCASE_CHARSET
from spu.exceptions import (
    SPUError,
    SPUInvalidArgumentError,
    SPUInvalidCategorySpecError,
    SPUInvalidCharsetError,
    SPUInvalidLengthError,
    SPULengthMismatchError,
)
from spu.password import (
    CategoryKind,
    CategorySpec,
    PasswordRequest,
    generate_password,
    generate_password_from_config,
    generate_pin,
)
from spu.utils.config import Config
from tests.misc import RecordingByteSource

ALL_CHARSETS = DIGIT_CHARSET + SYMBOL_CHARSET + LOWERCASE_CHARSET + UPPERCASE_CHARSET


def count_in(value: str, charset: str) -> int:
    """Count characters of value present in charset.

    :param value: Examined string.
    :param charset: Charset to count.
    :return: Number of characters of value from charset.
    """
    return sum(1 for char in value if char in charset)


@pytest.mark.parametrize(
    "option,kind,count",
    [
        (True, CategoryKind.INCLUDE, 0),
        (False, CategoryKind.EXCLUDE, 0),
        (0, CategoryKind.EXACT, 0),
        (3, CategoryKind.EXACT, 3),
        ({"min": 0}, CategoryKind.AT_LEAST, 0),
        ({"min": 2}, CategoryKind.AT_LEAST, 2),
    ],
)
def test_category_spec_from_option(option: object, kind: CategoryKind, count: int) -> None:
    """Test decoding of category options into category rules.

    :param option: Option in the loose form.
    :param kind: Expected rule kind.
    :param count: Expected guaranteed count.
    """
    spec = CategorySpec.from_option(option)  # type: ignore[arg-type]
    assert spec.kind == kind
    assert spec.guaranteed == count
    assert spec.eligible_for_more == (kind in (CategoryKind.INCLUDE, CategoryKind.AT_LEAST))
    assert CategorySpec.from_option(spec.to_option()) == spec


@pytest.mark.parametrize(
    "option", ["%@", -1, {"min": -1}, {"max": 2}, {"min": 1, "max": 2}, {"min": "2"}, 1.5, None]
)
def test_category_spec_invalid_option(option: object) -> None:
    """Test that malformed category options are rejected.

    :param option: Invalid option.
    """
    with pytest.raises(SPUInvalidCategorySpecError, match="digits option"):
        CategorySpec.from_option(option, "digits")  # type: ignore[arg-type]


def test_category_spec_invalid_values() -> None:
    """Test that category rules can't be constructed with inconsistent values."""
    with pytest.raises(SPUInvalidCategorySpecError):
        CategorySpec.exact(-1)
    with pytest.raises(SPUInvalidCategorySpecError):
        CategorySpec(CategoryKind.INCLUDE, 2)
    with pytest.raises(SPUInvalidCategorySpecError):
        CategorySpec("exact", 2)  # type: ignore[arg-type]


def test_password_default() -> None:
    """Test that default password has 12 characters from the standard charsets."""
    for _ in range(20):
        password = generate_password()
        assert len(password) == 12
        assert all(char in ALL_CHARSETS for char in password)


def test_password_length() -> None:
    """Test that password has the requested length."""
    for length in (1, 8, 64, 300):
        assert len(generate_password(length)) == length


@pytest.mark.parametrize("length", [0, -1, "12", 12.0, True, None])
def test_password_invalid_length(length: object) -> None:
    """Test that invalid password length is rejected.

    :param length: Invalid length.
    """
    with pytest.raises(SPUInvalidLengthError, match="at least 1"):
        generate_password(length)  # type: ignore[arg-type]


@pytest.mark.parametrize("category", ["digits", "symbols", "lowercase", "uppercase"])
@pytest.mark.parametrize("option", ["%@", -1, {"min": -1}])
def test_password_invalid_category_option(category: str, option: object) -> None:
    """Test that malformed category option is rejected for every category.

    :param category: Name of the category.
    :param option: Invalid option.
    """
    with pytest.raises(SPUInvalidCategorySpecError, match=f"{category} option"):
        generate_password(**{category: option})  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "length,options",
    [
        (6, {"digits": 8}),
        (6, {"digits": 2, "symbols": 2, "lowercase": 2, "uppercase": {"min": 1}}),
        (6, {"digits": {"min": 4}, "symbols": {"min": 3}}),
        (6, {"digits": False, "symbols": False, "lowercase": 2, "uppercase": 2}),
        (6, {"digits": 1, "symbols": 1, "lowercase": 1, "uppercase": 1}),
        (6, {"digits": False, "symbols": False, "lowercase": False, "uppercase": False}),
    ],
)
def test_password_length_mismatch(length: int, options: dict) -> None:
    """Test that over- and underspecified category counts are rejected.

    :param length: Password length.
    :param options: Category options.
    """
    source = RecordingByteSource()
    with pytest.raises(SPULengthMismatchError):
        generate_password(length, **options, byte_source=source)
    assert source.calls == 0


def test_password_all_exact() -> None:
    """Test password with exact counts of all categories summing to the length."""
    for _ in range(10):
        password = generate_password(8, digits=2, symbols=2, lowercase=2, uppercase=2)
        assert len(password) == 8
        assert count_in(password, DIGIT_CHARSET) == 2
        assert count_in(password, SYMBOL_CHARSET) == 2
        assert count_in(password, LOWERCASE_CHARSET) == 2
        assert count_in(password, UPPERCASE_CHARSET) == 2


@pytest.mark.parametrize(
    "category,charset",
    [
        ("digits", DIGIT_CHARSET),
        ("symbols", SYMBOL_CHARSET),
        ("lowercase", LOWERCASE_CHARSET),
        ("uppercase", UPPERCASE_CHARSET),
    ],
)
def test_password_exclude_category(category: str, charset: str) -> None:
    """Test that excluded category doesn't appear in the password.

    :param category: Name of the excluded category.
    :param charset: Charset of the excluded category.
    """
    for _ in range(10):
        password = generate_password(64, **{category: False})
        assert len(password) == 64
        assert count_in(password, charset) == 0


def test_password_without_symbols_is_alphanumeric() -> None:
    """Test that password without symbols contains only letters and digits."""
    for _ in range(10):
        assert re.fullmatch(r"[a-zA-Z0-9]{16}", generate_password(16, symbols=False))


@pytest.mark.parametrize(
    "category,charset",
    [
        ("digits", DIGIT_CHARSET),
        ("symbols", SYMBOL_CHARSET),
        ("lowercase", LOWERCASE_CHARSET),
        ("uppercase", UPPERCASE_CHARSET),
    ],
)
def test_password_exact_category(category: str, charset: str) -> None:
    """Test that category with exact count has exactly that many characters.

    :param category: Name of the category.
    :param charset: Charset of the category.
    """
    for _ in range(10):
        password = generate_password(8, **{category: 2})
        assert len(password) == 8
        assert count_in(password, charset) == 2


@pytest.mark.parametrize(
    "category,charset",
    [
        ("digits", DIGIT_CHARSET),
        ("symbols", SYMBOL_CHARSET),
        ("lowercase", LOWERCASE_CHARSET),
        ("uppercase", UPPERCASE_CHARSET),
    ],
)
def test_password_minimum_category(category: str, charset: str) -> None:
    """Test that category with minimal count has at least that many characters.

    :param category: Name of the category.
    :param charset: Charset of the category.
    """
    for _ in range(10):
        password = generate_password(8, **{category: {"min": 2}})
        assert len(password) == 8
        assert count_in(password, charset) >= 2


def test_password_mix_of_exact_and_minimum() -> None:
    """Test password combining exact, minimal, excluded and included categories."""
    for _ in range(10):
        password = generate_password(
            10, digits={"min": 2}, symbols=2, lowercase=False, uppercase={"min": 1}
        )
        assert len(password) == 10
        assert count_in(password, DIGIT_CHARSET) >= 2
        assert count_in(password, SYMBOL_CHARSET) == 2
        assert count_in(password, LOWERCASE_CHARSET) == 0
        assert count_in(password, UPPERCASE_CHARSET) >= 1


def test_password_minimum_fills_whole_length() -> None:
    """Test that the only category accepting more characters fills the rest."""
    password = generate_password(10, digits={"min": 1}, symbols=False, lowercase=3, uppercase=0)
    assert count_in(password, DIGIT_CHARSET) == 7
    assert count_in(password, LOWERCASE_CHARSET) == 3


def test_password_custom_charsets() -> None:
    """Test that custom charsets replace the standard ones."""
    for _ in range(10):
        password = generate_password(
            12, digits=3, symbols=False, digit_charset="01", lowercase_charset="xyz"
        )
        assert count_in(password, "01") == 3
        assert all(char in "01xyz" + UPPERCASE_CHARSET for char in password)


@pytest.mark.parametrize(
    "charsets",
    [
        {"digit_charset": "0"},
        {"symbol_charset": ""},
        {"lowercase_charset": "abca"},
        {"uppercase_charset": 12},
    ],
)
def test_password_invalid_charset(charsets: dict) -> None:
    """Test that invalid custom charset is rejected.

    :param charsets: Custom charset arguments.
    """
    with pytest.raises(SPUInvalidCharsetError):
        generate_password(12, **charsets)


def test_password_overlapping_fill_charsets() -> None:
    """Test that overlapping charsets are rejected only when they fill the password."""
    with pytest.raises(SPUInvalidCharsetError, match="overlap"):
        generate_password(12, digit_charset="abc")
    password = generate_password(
        4, digits=2, symbols=False, lowercase=2, uppercase=False, digit_charset="abc"
    )
    assert all(char in LOWERCASE_CHARSET for char in password)


def test_password_differ() -> None:
    """Test that two generated passwords differ."""
    assert generate_password(32) != generate_password(32)


def test_password_draws_only_after_validation() -> None:
    """Test that valid request consumes randomness and invalid one doesn't."""
    source = RecordingByteSource()
    with pytest.raises(SPUInvalidCategorySpecError):
        generate_password(12, digits="2", byte_source=source)
    assert source.calls == 0
    generate_password(12, byte_source=source)
    assert source.calls >= 24


@pytest.mark.parametrize("length", [65537, 100000])
def test_password_too_long(length: int) -> None:
    """Test that password longer than the shuffle range is rejected before any draw.

    :param length: Too large password length.
    """
    source = RecordingByteSource()
    with pytest.raises(SPUInvalidLengthError, match="at most 65536"):
        generate_password(length, byte_source=source)
    assert source.calls == 0


def test_password_longest() -> None:
    """Test that the longest allowed password is generated."""
    assert len(generate_password(65536, symbols=False)) == 65536


def test_password_request_properties() -> None:
    """Test guaranteed and filler counts of a password request."""
    request = PasswordRequest.create(10, digits={"min": 2}, symbols=3, lowercase=False)
    assert request.guaranteed_count == 5
    assert request.fill_count == 5
    assert request.fill_charset == DIGIT_CHARSET + UPPERCASE_CHARSET
    assert len(request.generate()) == 10


def test_password_request_requires_decoded_specs() -> None:
    """Test that direct construction requires category rules."""
    with pytest.raises(SPUInvalidCategorySpecError):
        PasswordRequest(12, digits=True)  # type: ignore[arg-type]
    request = PasswordRequest(8, digits=CategorySpec.exact(8), symbols=CategorySpec.exclude())
    assert PasswordRequest.create(8, digits=8, symbols=False) == request


def test_password_request_config(data_dir: str) -> None:
    """Test loading password policy from configuration file.

    :param data_dir: Path to test data directory.
    """
    config = Config.create_from_file(os.path.join(data_dir, "password_policy.yaml"))
    request = PasswordRequest.load_from_config(config.get_config("password"))
    assert request.length == 16
    assert request.digits == CategorySpec.exact(3)
    assert request.symbols == CategorySpec.exclude()
    assert request.lowercase == CategorySpec.at_least(4)
    assert request.uppercase == CategorySpec.include()
    assert PasswordRequest.load_from_config(request.get_config()) == request


def test_password_from_config_file(data_dir: str) -> None:
    """Test generating password directly from configuration file.

    :param data_dir: Path to test data directory.
    """
    password = generate_password_from_config(os.path.join(data_dir, "password_policy.yaml"))
    assert len(password) == 16
    assert count_in(password, DIGIT_CHARSET) == 3
    assert count_in(password, SYMBOL_CHARSET) == 0
    assert count_in(password, LOWERCASE_CHARSET) >= 4


def test_password_from_config_custom_charsets(data_dir: str) -> None:
    """Test password policy with custom charsets stored in the configuration root.

    :param data_dir: Path to test data directory.
    """
    password = generate_password_from_config(
        os.path.join(data_dir, "password_custom_charsets.yaml")
    )
    assert len(password) == 10
    assert count_in(password, "#@!") == 2
    assert all(char in "#@!abcdef" for char in password)


def test_password_from_invalid_config(data_dir: str) -> None:
    """Test that configuration not matching the schema is rejected.

    :param data_dir: Path to test data directory.
    """
    with pytest.raises(SPUError, match="Configuration validation failed"):
        generate_password_from_config(os.path.join(data_dir, "password_invalid.yaml"))


def test_pin() -> None:
    """Test that pin consists of the requested number of digits."""
    for length in (1, 4, 6, 8):
        pin = generate_pin(length)
        assert len(pin) == length
        assert pin.isdigit()
    assert generate_pin(32) != generate_pin(32)


@pytest.mark.parametrize("length", [0, -1, "6", None, 6.0])
def test_pin_invalid_length(length: object) -> None:
    """Test that invalid pin length is rejected.

    :param length: Invalid length.
    """
    with pytest.raises(SPUInvalidArgumentError, match="greater than or equal to 1"):
        generate_pin(length)  # type: ignore[arg-type]
