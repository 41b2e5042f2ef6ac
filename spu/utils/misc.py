#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU file helpers.

Lookup of policy and wordlist files, reading them as text and parsing
policy files, plus the singleton metaclass of the data manager.
"""

import json
import logging
import os
from typing import Any, Optional, Type, TypeVar

import yaml

from spu.exceptions import SPUError

logger = logging.getLogger(__name__)


def find_file(
    file_path: str,
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
    raise_exc: bool = True,
) -> str:
    """Find file and return its absolute path.

    Relative paths are tried in the search paths first, then in the current
    working directory.

    :param file_path: File name or relative or absolute path.
    :param use_cwd: Try current working directory, defaults to True.
    :param search_paths: Folders tried before the working directory, defaults to None.
    :param raise_exc: Raise exception if file is not found, defaults to True.
    :raises SPUError: File not found and raise_exc is set.
    :return: Absolute path with '/' separators or empty string if not found.
    """
    file_path = file_path.replace("\\", "/")
    if os.path.isabs(file_path):
        candidates = [file_path]
    else:
        folders = [folder for folder in search_paths or [] if folder]
        if use_cwd:
            folders.append(os.getcwd())
        candidates = [os.path.join(folder, file_path) for folder in folders]

    for candidate in candidates:
        if os.path.isfile(candidate):
            return os.path.abspath(candidate).replace("\\", "/")

    message = f"Path '{file_path}' not found, tried: {', '.join(candidates) or 'nothing'}"
    if raise_exc:
        raise SPUError(message)
    logger.debug(message)
    return ""


def load_text(path: str) -> str:
    """Read whole UTF-8 text file.

    :param path: Path to the text file.
    :return: Content of the file.
    """
    path = find_file(path)
    logger.debug(f"Loading text file from {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_configuration(path: str) -> dict[str, Any]:
    """Load policy or schema file.

    JSON is tried first, YAML otherwise. The root of the file must be a mapping.

    :param path: Path to JSON or YAML file.
    :raises SPUError: The file can't be read or parsed or its root is not a mapping.
    :return: Parsed content of the file.
    """
    try:
        text = load_text(path)
    except (SPUError, OSError, UnicodeDecodeError) as exc:
        raise SPUError(f"Can't load configuration file: {str(exc)}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SPUError(f"Can't parse configuration file {path}: {str(exc)}") from exc

    if not isinstance(data, dict) or not data:
        raise SPUError(f"Invalid configuration file {path}: expected non-empty mapping")
    return data


TS = TypeVar("TS", bound="SingletonMeta")  # pylint: disable=invalid-name


class SingletonMeta(type):
    """Metaclass creating at most one instance of its classes."""

    _instance = None

    def __call__(cls: Type[TS], *args: Any, **kwargs: Any) -> TS:  # type: ignore
        if cls._instance is None:
            cls._instance = super().__call__(*args, **kwargs)
        return cls._instance
