#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU data folder access.

Validation schemas live in the SPU data folder, which can be redirected with
the SPU_DATA_FOLDER environment variable. Loaded schemas and wordlists are
cached by the singleton DataManager.
"""

import logging
import os
from copy import deepcopy
from typing import Any

from spu import SPU_DATA_FOLDER
from spu.exceptions import SPUError
from spu.utils.misc import SingletonMeta, load_configuration

logger = logging.getLogger(__name__)


class DataManager(metaclass=SingletonMeta):
    """Cache of the files loaded from the data folder and wordlist folders."""

    def __init__(self) -> None:
        self.data_folder = SPU_DATA_FOLDER
        self.schema_cache: dict[str, dict[str, Any]] = {}
        self.wordlist_cache: dict[str, tuple[str, ...]] = {}

    def get_schema_file(self, feature: str) -> dict[str, Any]:
        """Get validation schemas of the feature.

        The cached schema is never handed out, callers get a copy.

        :param feature: Name of the feature, e.g. 'password'.
        :raises SPUError: The schema file doesn't exist or is invalid.
        :return: Loaded schema file.
        """
        if feature not in self.schema_cache:
            path = os.path.join(self.data_folder, "jsonschemas", f"sch_{feature}.yaml")
            if not os.path.isfile(path):
                raise SPUError(f"There is no validation schema for {feature} in {self.data_folder}")
            self.schema_cache[feature] = load_configuration(path)
            logger.debug(f"Loaded validation schema {path}")
        return deepcopy(self.schema_cache[feature])


def get_schema_file(feature: str) -> dict[str, Any]:
    """Get validation schemas of the feature from the data manager."""
    return DataManager().get_schema_file(feature)
