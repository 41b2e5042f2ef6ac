#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU passphrase generation and wordlist handling.

Passphrases are built from words drawn independently and uniformly from a
wordlist. Wordlists are plain text files with one word per line; the EFF dice
format (``11111<TAB>word``) is accepted as well. Named wordlists are searched in
SPU_WORDLIST_FOLDER, in the user data folder, in SPU_DATA_FOLDER and in the
package data, which also holds the default wordlist.
"""

import logging
import os
from typing import Any, Optional, Sequence, Union

from spu import SPU_DATA_FOLDER, SPU_USER_WORDLIST_FOLDER, SPU_WORDLIST_FOLDER
from spu.crypto.rng import ByteSource, is_integer, sample_uniform_sequence
from spu.exceptions import SPUError, SPUInvalidArgumentError
from spu.utils.config import Config
from spu.utils.database import DataManager, get_schema_file
from spu.utils.misc import find_file, load_text

logger = logging.getLogger(__name__)

WORDLIST_EXTENSION = ".txt"
# Shipped with the package, independent of SPU_DATA_FOLDER
BUNDLED_WORDLIST_FOLDER = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "data", "wordlists"
)
DATA_WORDLIST_FOLDER = os.path.join(SPU_DATA_FOLDER, "wordlists")


def get_wordlist_search_paths() -> list[str]:
    """Get folders searched for named wordlists, in order of precedence.

    :return: List of existing folder paths.
    """
    folders = [
        SPU_WORDLIST_FOLDER,
        SPU_USER_WORDLIST_FOLDER,
        DATA_WORDLIST_FOLDER,
        BUNDLED_WORDLIST_FOLDER,
    ]
    ret: list[str] = []
    for folder in folders:
        if folder and os.path.isdir(folder) and folder not in ret:
            ret.append(folder)
    return ret


def validate_wordlist(wordlist: Any) -> None:
    """Validate the wordlist used for passphrase generation.

    :param wordlist: Wordlist to validate.
    :raises SPUInvalidArgumentError: Wordlist is not a sequence of at least two distinct words.
    """
    if isinstance(wordlist, str) or not isinstance(wordlist, Sequence) or len(wordlist) < 2:
        raise SPUInvalidArgumentError(
            "Invalid argument: wordlist must be a list of at least two words"
        )
    if not all(isinstance(word, str) and word for word in wordlist):
        raise SPUInvalidArgumentError("Invalid argument: wordlist must contain non-empty strings")
    if len(set(wordlist)) != len(wordlist):
        raise SPUInvalidArgumentError("Invalid argument: wordlist must not contain duplicate words")


def parse_wordlist(text: str) -> tuple[str, ...]:
    """Parse wordlist from text.

    Empty lines and lines starting with '#' are skipped. Lines with a numeric dice
    index followed by the word (EFF format) yield the word only.

    :param text: Content of the wordlist file.
    :return: Tuple of words in file order.
    """
    words = []
    for line in text.splitlines():
        parts = line.split()
        if not parts or parts[0].startswith("#"):
            continue
        if len(parts) == 2 and parts[0].isdigit():
            parts = parts[1:]
        if len(parts) != 1:
            raise SPUError(f"Invalid wordlist line: '{line.strip()}', expected one word per line")
        words.append(parts[0])
    return tuple(words)


def load_wordlist(path: str, search_paths: Optional[list[str]] = None) -> tuple[str, ...]:
    """Load and validate wordlist file.

    Loaded wordlists are cached, the returned tuple is immutable.

    :param path: Path to the wordlist file.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises SPUError: File can't be found or parsed.
    :raises SPUInvalidArgumentError: The loaded wordlist is invalid.
    :return: Tuple of words.
    """
    abs_path = find_file(path, search_paths=search_paths)
    cache = DataManager().wordlist_cache
    if abs_path not in cache:
        try:
            wordlist = parse_wordlist(load_text(abs_path))
        except (OSError, UnicodeDecodeError) as exc:
            raise SPUError(f"Can't load wordlist file {abs_path}: {str(exc)}") from exc
        validate_wordlist(wordlist)
        logger.debug(f"Loaded wordlist with {len(wordlist)} words from {abs_path}")
        cache[abs_path] = wordlist
    return cache[abs_path]


def get_wordlist(name: str) -> tuple[str, ...]:
    """Get wordlist by name or path.

    :param name: Name of the wordlist (file name without extension) or path to a wordlist file.
    :raises SPUError: The wordlist can't be found.
    :return: Tuple of words.
    """
    if os.path.isfile(name):
        return load_wordlist(name)
    file_name = name if name.endswith(WORDLIST_EXTENSION) else name + WORDLIST_EXTENSION
    return load_wordlist(file_name, search_paths=get_wordlist_search_paths())


def get_wordlist_names() -> list[str]:
    """Get names of all wordlists available in the wordlist folders.

    :return: Sorted list of wordlist names.
    """
    names = set()
    for folder in get_wordlist_search_paths():
        for file_name in os.listdir(folder):
            if file_name.endswith(WORDLIST_EXTENSION):
                names.add(file_name[: -len(WORDLIST_EXTENSION)])
    return sorted(names)


DEFAULT_WORDLIST = load_wordlist(os.path.join(BUNDLED_WORDLIST_FOLDER, "default.txt"))


def generate_passphrase(
    length: int,
    wordlist: Sequence[str] = DEFAULT_WORDLIST,
    separator: str = "-",
    *,
    byte_source: Optional[ByteSource] = None,
) -> str:
    """Generate a random passphrase.

        generate_passphrase(6)                       # "fox-bread-moon-key-tea-owl"
        generate_passphrase(4, separator="_")        # "wolf_salt_comet_bell"

    :param length: The number of words in the passphrase, at least 1.
    :param wordlist: Words to choose from, at least two distinct words.
    :param separator: String placed between the words, may be empty.
    :param byte_source: Source of random bytes, defaults to the OS CSPRNG.
    :raises SPUInvalidArgumentError: Invalid length, wordlist or separator.
    :return: A random passphrase.
    """
    if not is_integer(length) or length < 1:
        raise SPUInvalidArgumentError(
            "Invalid argument: length must be a number greater than or equal to 1"
        )
    validate_wordlist(wordlist)
    if not isinstance(separator, str):
        raise SPUInvalidArgumentError("Invalid argument: separator must be a string")

    indexes = sample_uniform_sequence(length, 0, len(wordlist), byte_source=byte_source)
    return separator.join(wordlist[i] for i in indexes)


def get_validation_schemas() -> list[dict[str, Any]]:
    """Get validation schemas of the passphrase configuration.

    :return: List of validation schemas.
    """
    return [get_schema_file("passphrase")["passphrase"]]


def generate_passphrase_from_config(
    config: Union[str, Config], *, byte_source: Optional[ByteSource] = None
) -> str:
    """Generate a random passphrase by the policy stored in configuration.

    Relative wordlist paths are resolved against the configuration folder first.

    :param config: Path to YAML/JSON configuration file or loaded configuration.
        Policy is read from the 'passphrase' section if present, otherwise from the root.
    :param byte_source: Source of random bytes, defaults to the OS CSPRNG.
    :return: A random passphrase.
    """
    if isinstance(config, str):
        config = Config.create_from_file(config)
    if "passphrase" in config:
        config = config.get_config("passphrase")
    config.check(get_validation_schemas(), check_unknown_props=True)

    wordlist = DEFAULT_WORDLIST
    if "wordlist" in config:
        name = config.get_str("wordlist")
        path = find_file(name, use_cwd=False, search_paths=config.search_paths, raise_exc=False)
        wordlist = load_wordlist(path) if path else get_wordlist(name)

    return generate_passphrase(
        config.get_int("length"),
        wordlist,
        config.get_str("separator", "-"),
        byte_source=byte_source,
    )
