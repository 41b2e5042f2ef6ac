#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU password and PIN generation.

A password is composed from four character categories (digits, symbols,
lowercase and uppercase letters). Every category can be excluded, included,
requested with an exact number of characters or with a minimal number of
characters. Guaranteed characters are generated first, the rest of the password
is filled from the union of categories that accept more characters and the
whole result is shuffled, so the guaranteed characters are not clustered.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from typing_extensions import Self

from spu.characters import generate_characters, randomize_characters, validate_charset
from spu.charsets import DIGIT_CHARSET, LOWERCASE_CHARSET, SYMBOL_CHARSET, UPPERCASE_CHARSET
from spu.crypto.rng import MAX_RANGE_END, ByteSource, is_integer
from spu.exceptions import (
    SPUInvalidArgumentError,
    SPUInvalidCategorySpecError,
    SPUInvalidCharsetError,
    SPUInvalidLengthError,
    SPULengthMismatchError,
)
from spu.utils.config import Config
from spu.utils.database import get_schema_file
from spu.utils.spu_enum import SpuEnum

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD_LENGTH = 12

CategoryOption = Union[bool, int, Mapping[str, int], "CategorySpec"]


class CategoryKind(SpuEnum):
    """Kind of the rule applied to one character category."""

    EXCLUDE = (0, "exclude", "No characters of the category")
    INCLUDE = (1, "include", "Characters of the category may fill the password")
    EXACT = (2, "exact", "Exact number of characters of the category")
    AT_LEAST = (3, "at_least", "Minimal number of characters, more may fill the password")


class PasswordCategory(SpuEnum):
    """Character categories of a password in the order of generation."""

    DIGITS = (0, "digits", "Digits")
    SYMBOLS = (1, "symbols", "Symbols")
    LOWERCASE = (2, "lowercase", "Lowercase letters")
    UPPERCASE = (3, "uppercase", "Uppercase letters")


DEFAULT_CHARSETS: Mapping[str, str] = MappingProxyType(
    {
        PasswordCategory.DIGITS.label: DIGIT_CHARSET,
        PasswordCategory.SYMBOLS.label: SYMBOL_CHARSET,
        PasswordCategory.LOWERCASE.label: LOWERCASE_CHARSET,
        PasswordCategory.UPPERCASE.label: UPPERCASE_CHARSET,
    }
)

# Configuration keys of custom charsets
CHARSET_KEYS: Mapping[str, str] = MappingProxyType(
    {
        PasswordCategory.DIGITS.label: "digit_charset",
        PasswordCategory.SYMBOLS.label: "symbol_charset",
        PasswordCategory.LOWERCASE.label: "lowercase_charset",
        PasswordCategory.UPPERCASE.label: "uppercase_charset",
    }
)


@dataclass(frozen=True)
class CategorySpec:
    """Rule for one character category of a password.

    Decoded once from the loose option form accepted by the public API:

    - ``False`` excludes the category,
    - ``True`` includes the category with no guaranteed characters,
    - ``n`` requests exactly n characters of the category,
    - ``{"min": n}`` requests at least n characters of the category.
    """

    kind: CategoryKind
    count: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.kind, CategoryKind):
            raise SPUInvalidCategorySpecError(
                f"Invalid category kind: {self.kind}, expected one of {CategoryKind.labels()}"
            )
        if not is_integer(self.count) or self.count < 0:
            raise SPUInvalidCategorySpecError(
                f"Invalid category count: {self.count!r}, must be a non-negative integer"
            )
        if self.kind in (CategoryKind.EXCLUDE, CategoryKind.INCLUDE) and self.count:
            raise SPUInvalidCategorySpecError(
                f"Category rule '{self.kind.label}' doesn't take a character count"
            )

    @classmethod
    def exclude(cls) -> Self:
        """Create rule excluding the category."""
        return cls(CategoryKind.EXCLUDE)

    @classmethod
    def include(cls) -> Self:
        """Create rule including the category without guaranteed characters."""
        return cls(CategoryKind.INCLUDE)

    @classmethod
    def exact(cls, count: int) -> Self:
        """Create rule requesting an exact number of characters.

        :param count: Number of characters, non-negative.
        """
        return cls(CategoryKind.EXACT, count)

    @classmethod
    def at_least(cls, count: int) -> Self:
        """Create rule requesting a minimal number of characters.

        :param count: Minimal number of characters, non-negative.
        """
        return cls(CategoryKind.AT_LEAST, count)

    @classmethod
    def from_option(cls, option: CategoryOption, name: str = "category") -> Self:
        """Decode the category option into the category rule.

        :param option: Boolean, non-negative integer, ``{"min": n}`` mapping or CategorySpec.
        :param name: Name of the category used in error messages.
        :raises SPUInvalidCategorySpecError: The option has none of the supported forms.
        :return: Decoded category rule.
        """
        if isinstance(option, cls):
            return option
        if isinstance(option, bool):
            return cls.include() if option else cls.exclude()
        if is_integer(option) and option >= 0:
            return cls.exact(option)
        if isinstance(option, Mapping) and set(option.keys()) == {"min"}:
            minimum = option["min"]
            if is_integer(minimum) and minimum >= 0:
                return cls.at_least(minimum)
        raise SPUInvalidCategorySpecError(
            f"Invalid option: {name} option must be a boolean, number, or object"
        )

    def to_option(self) -> Union[bool, int, dict[str, int]]:
        """Encode the rule back into the option form.

        :return: Boolean, integer or ``{"min": n}`` dictionary.
        """
        if self.kind == CategoryKind.EXCLUDE:
            return False
        if self.kind == CategoryKind.INCLUDE:
            return True
        if self.kind == CategoryKind.EXACT:
            return self.count
        return {"min": self.count}

    @property
    def guaranteed(self) -> int:
        """Number of characters the category always contributes."""
        return self.count

    @property
    def eligible_for_more(self) -> bool:
        """True if the category may supply the filler characters."""
        return self.kind in (CategoryKind.INCLUDE, CategoryKind.AT_LEAST)


@dataclass(frozen=True)
class PasswordRequest:
    """Complete description of a password to generate.

    The request is validated on creation, an invalid request can't exist.
    """

    length: int = DEFAULT_PASSWORD_LENGTH
    digits: CategorySpec = field(default_factory=CategorySpec.include)
    symbols: CategorySpec = field(default_factory=CategorySpec.include)
    lowercase: CategorySpec = field(default_factory=CategorySpec.include)
    uppercase: CategorySpec = field(default_factory=CategorySpec.include)
    digit_charset: str = DIGIT_CHARSET
    symbol_charset: str = SYMBOL_CHARSET
    lowercase_charset: str = LOWERCASE_CHARSET
    uppercase_charset: str = UPPERCASE_CHARSET

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def create(
        cls,
        length: int = DEFAULT_PASSWORD_LENGTH,
        digits: CategoryOption = True,
        symbols: CategoryOption = True,
        lowercase: CategoryOption = True,
        uppercase: CategoryOption = True,
        digit_charset: str = DIGIT_CHARSET,
        symbol_charset: str = SYMBOL_CHARSET,
        lowercase_charset: str = LOWERCASE_CHARSET,
        uppercase_charset: str = UPPERCASE_CHARSET,
    ) -> Self:
        """Create the request from the loose option form of categories.

        :param length: Length of the password, at least 1.
        :param digits: Option for digits.
        :param symbols: Option for symbols.
        :param lowercase: Option for lowercase letters.
        :param uppercase: Option for uppercase letters.
        :param digit_charset: Charset of digits.
        :param symbol_charset: Charset of symbols.
        :param lowercase_charset: Charset of lowercase letters.
        :param uppercase_charset: Charset of uppercase letters.
        :raises SPUInvalidLengthError: Password length is not in range 1 to 65536.
        :raises SPUInvalidCategorySpecError: Malformed category option.
        :raises SPUInvalidCharsetError: Invalid charset.
        :raises SPULengthMismatchError: Category counts don't fit the password length.
        :return: Validated password request.
        """
        cls._validate_length(length)
        return cls(
            length=length,
            digits=CategorySpec.from_option(digits, PasswordCategory.DIGITS.label),
            symbols=CategorySpec.from_option(symbols, PasswordCategory.SYMBOLS.label),
            lowercase=CategorySpec.from_option(lowercase, PasswordCategory.LOWERCASE.label),
            uppercase=CategorySpec.from_option(uppercase, PasswordCategory.UPPERCASE.label),
            digit_charset=digit_charset,
            symbol_charset=symbol_charset,
            lowercase_charset=lowercase_charset,
            uppercase_charset=uppercase_charset,
        )

    @staticmethod
    def _validate_length(length: Any) -> None:
        if not is_integer(length) or length < 1:
            raise SPUInvalidLengthError("Invalid option: length option must be at least 1")
        # The final shuffle draws indexes of the whole password
        if length > MAX_RANGE_END:
            raise SPUInvalidLengthError(
                f"Invalid option: length option must be at most {MAX_RANGE_END}"
            )

    @property
    def categories(self) -> list[tuple[PasswordCategory, CategorySpec, str]]:
        """Category rules with their charsets in the order of generation."""
        return [
            (PasswordCategory.DIGITS, self.digits, self.digit_charset),
            (PasswordCategory.SYMBOLS, self.symbols, self.symbol_charset),
            (PasswordCategory.LOWERCASE, self.lowercase, self.lowercase_charset),
            (PasswordCategory.UPPERCASE, self.uppercase, self.uppercase_charset),
        ]

    @property
    def guaranteed_count(self) -> int:
        """Sum of the characters guaranteed by all categories."""
        return sum(spec.guaranteed for _, spec, _ in self.categories)

    @property
    def fill_count(self) -> int:
        """Number of characters taken from the fill charset."""
        return self.length - self.guaranteed_count

    @property
    def fill_charset(self) -> str:
        """Union of charsets of categories that may supply more characters."""
        return "".join(charset for _, spec, charset in self.categories if spec.eligible_for_more)

    def validate(self) -> None:
        """Validate the password request.

        :raises SPUInvalidLengthError: Invalid password length.
        :raises SPUInvalidCategorySpecError: Category rule is not a CategorySpec.
        :raises SPUInvalidCharsetError: Invalid charset or overlapping fill charsets.
        :raises SPULengthMismatchError: Category counts don't fit the password length.
        """
        self._validate_length(self.length)
        for category, spec, charset in self.categories:
            if not isinstance(spec, CategorySpec):
                raise SPUInvalidCategorySpecError(
                    f"Invalid option: {category.label} rule must be a CategorySpec, "
                    "use PasswordRequest.create() for the option form"
                )
            validate_charset(charset, f"{category.label} charset")

        guaranteed = self.guaranteed_count
        if guaranteed > self.length:
            raise SPULengthMismatchError(
                f"Invalid option: Requested characters ({guaranteed}) exceeds "
                f"expected length ({self.length})"
            )
        if not any(spec.eligible_for_more for _, spec, _ in self.categories):
            if guaranteed != self.length:
                raise SPULengthMismatchError(
                    f"Invalid option: Requested less characters ({guaranteed}) than "
                    f"expected length ({self.length})"
                )
        elif self.fill_count:
            try:
                validate_charset(self.fill_charset, "fill charset")
            except SPUInvalidCharsetError as exc:
                raise SPUInvalidCharsetError(
                    f"Charsets of categories accepting more characters overlap: {exc.description}"
                ) from exc

    def generate(self, *, byte_source: Optional[ByteSource] = None) -> str:
        """Generate the password.

        :param byte_source: Source of random bytes, defaults to the OS CSPRNG.
        :return: Random password of the requested length.
        """
        logger.debug(
            f"Generating password of length {self.length}: "
            f"{self.guaranteed_count} guaranteed and {self.fill_count} filler characters"
        )
        result = "".join(
            generate_characters(spec.guaranteed, charset, byte_source=byte_source)
            for _, spec, charset in self.categories
        )
        if self.fill_count:
            result += generate_characters(
                self.fill_count, self.fill_charset, byte_source=byte_source
            )
        return randomize_characters(result, byte_source=byte_source)

    @classmethod
    def get_validation_schemas(cls) -> list[dict[str, Any]]:
        """Get validation schemas of the password configuration.

        :return: List of validation schemas.
        """
        return [get_schema_file("password")["password"]]

    @classmethod
    def load_from_config(cls, config: Config) -> Self:
        """Load the password request from configuration.

        Keys missing in the configuration use the defaults.

        :param config: Configuration with password policy.
        :return: Validated password request.
        """
        config.check(cls.get_validation_schemas(), check_unknown_props=True)
        options: dict[str, Any] = {}
        if "length" in config:
            options["length"] = config.get_int("length")
        for category in PasswordCategory:
            if category.label in config:
                options[category.label] = config[category.label]
            charset_key = CHARSET_KEYS[category.label]
            if charset_key in config:
                options[charset_key] = config.get_str(charset_key)
        return cls.create(**options)

    def get_config(self) -> Config:
        """Create configuration of the password request.

        :return: Configuration loadable by load_from_config.
        """
        config = Config({"length": self.length})
        for category, spec, charset in self.categories:
            config[category.label] = spec.to_option()
            if charset != DEFAULT_CHARSETS[category.label]:
                config[CHARSET_KEYS[category.label]] = charset
        return config


def generate_password(
    length: int = DEFAULT_PASSWORD_LENGTH,
    digits: CategoryOption = True,
    symbols: CategoryOption = True,
    lowercase: CategoryOption = True,
    uppercase: CategoryOption = True,
    *,
    digit_charset: str = DIGIT_CHARSET,
    symbol_charset: str = SYMBOL_CHARSET,
    lowercase_charset: str = LOWERCASE_CHARSET,
    uppercase_charset: str = UPPERCASE_CHARSET,
    byte_source: Optional[ByteSource] = None,
) -> str:
    """Generate a random password.

        generate_password()                               # "l[Nz8UfU.o4g"
        generate_password(8)                              # "i&n4Htp="
        generate_password(8, symbols=False, digits=2)     # "k9WTkaP6"
        generate_password(8, digits={"min": 2})           # "0(c69+.f"

    :param length: The length of the resulting password, defaults to 12.
    :param digits: Include (True), exclude (False), exact count (int) or ``{"min": n}``.
    :param symbols: Include (True), exclude (False), exact count (int) or ``{"min": n}``.
    :param lowercase: Include (True), exclude (False), exact count (int) or ``{"min": n}``.
    :param uppercase: Include (True), exclude (False), exact count (int) or ``{"min": n}``.
    :param digit_charset: Charset of digits.
    :param symbol_charset: Charset of symbols.
    :param lowercase_charset: Charset of lowercase letters.
    :param uppercase_charset: Charset of uppercase letters.
    :param byte_source: Source of random bytes, defaults to the OS CSPRNG.
    :return: A random password.
    """
    request = PasswordRequest.create(
        length=length,
        digits=digits,
        symbols=symbols,
        lowercase=lowercase,
        uppercase=uppercase,
        digit_charset=digit_charset,
        symbol_charset=symbol_charset,
        lowercase_charset=lowercase_charset,
        uppercase_charset=uppercase_charset,
    )
    return request.generate(byte_source=byte_source)


def generate_password_from_config(
    config: Union[str, Config], *, byte_source: Optional[ByteSource] = None
) -> str:
    """Generate a random password by the policy stored in configuration.

    :param config: Path to YAML/JSON configuration file or loaded configuration.
        Policy is read from the 'password' section if present, otherwise from the root.
    :param byte_source: Source of random bytes, defaults to the OS CSPRNG.
    :return: A random password.
    """
    if isinstance(config, str):
        config = Config.create_from_file(config)
    if "password" in config:
        config = config.get_config("password")
    return PasswordRequest.load_from_config(config).generate(byte_source=byte_source)


def generate_pin(length: int, *, byte_source: Optional[ByteSource] = None) -> str:
    """Generate a random digit pin.

        generate_pin(6)  # "036919"
        generate_pin(8)  # "45958396"

    :param length: The length of the resulting pin, at least 1.
    :param byte_source: Source of random bytes, defaults to the OS CSPRNG.
    :raises SPUInvalidArgumentError: Invalid length.
    :return: A random digit pin.
    """
    if not is_integer(length) or length < 1:
        raise SPUInvalidArgumentError(
            "Invalid argument: length argument must be a number greater than or equal to 1"
        )
    return generate_characters(length, DIGIT_CHARSET, byte_source=byte_source)
