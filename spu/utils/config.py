#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU generation policy configuration.

Policies are loaded from YAML or JSON files into a dictionary which remembers
where the file came from, so relative paths inside the policy (wordlists)
resolve against the policy folder.
"""

import logging
import os
from typing import Any, Optional

from typing_extensions import Self

from spu.crypto.rng import is_integer
from spu.exceptions import SPUError, SPUKeyError
from spu.utils.misc import load_configuration
from spu.utils.schema_validator import check_config

logger = logging.getLogger(__name__)


class Config(dict):
    """Policy configuration dictionary.

    Nested values are addressed by '/' separated paths, e.g. ``"password/digits/min"``.

    :cvar SEP: Separator of the key path.
    """

    SEP = "/"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.config_dir = os.getcwd()
        self.config_name = ""
        self.search_paths: list[str] = []

    @classmethod
    def create_from_file(cls, file_path: str) -> Self:
        """Load configuration from file.

        :param file_path: Path to YAML or JSON policy file.
        :return: Configuration with the file folder as the only search path.
        """
        abs_path = os.path.abspath(file_path).replace("\\", "/")
        cfg = cls(load_configuration(abs_path))
        cfg.config_dir = os.path.dirname(abs_path)
        cfg.config_name = os.path.basename(abs_path)
        cfg.search_paths = [cfg.config_dir]
        logger.debug(f"Loaded configuration {cfg.config_name} from {cfg.config_dir}")
        return cfg

    def __getitem__(self, key: str) -> Any:
        """Get value by key or '/' separated key path.

        :param key: Key or key path.
        :raises SPUKeyError: Some part of the path doesn't exist.
        :return: Value at the path.
        """
        value: Any = self
        for part in key.split(self.SEP):
            if not isinstance(value, dict) or part not in value:
                raise SPUKeyError(f"The {key} doesn't exist in configuration")
            value = dict.__getitem__(value, part)
        return value

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Get value by key path or the default if the path doesn't exist."""
        try:
            return self[key]
        except SPUKeyError:
            return default

    def get_config(self, key: str) -> "Config":
        """Get nested section as configuration sharing the file context.

        :param key: Key path of the section.
        :raises SPUError: The section doesn't exist or is not a mapping.
        :return: Section as Config object.
        """
        section = self[key]
        if not isinstance(section, dict):
            raise SPUError(f"The value at key {key} is not a configuration section")
        ret = Config(section)
        ret.config_dir = self.config_dir
        ret.config_name = self.config_name
        ret.search_paths = self.search_paths
        return ret

    def get_int(self, key: str, default: Optional[int] = None) -> int:
        """Get integer value.

        :param key: Key path.
        :param default: Value used when the key doesn't exist.
        :raises SPUError: The value is missing or not an integer.
        :return: Integer value.
        """
        ret = self.get(key, default)
        if not is_integer(ret):
            raise SPUError(f"The value is not integer at key: {key}")
        return ret

    def get_str(self, key: str, default: Optional[str] = None) -> str:
        """Get string value.

        :param key: Key path.
        :param default: Value used when the key doesn't exist.
        :raises SPUError: The value is missing or not a string.
        :return: String value.
        """
        ret = self.get(key, default)
        if not isinstance(ret, str):
            raise SPUError(f"The value is not string at key: {key}")
        return ret

    def check(self, schemas: list[dict[str, Any]], check_unknown_props: bool = False) -> None:
        """Validate the configuration by schemas.

        :param schemas: Validation schemas, merged before use.
        :param check_unknown_props: Report keys not described by the schemas.
        """
        check_config(self, schemas, check_unknown_props=check_unknown_props)
