#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU policy validation against JSON schemas.

Policy schemas are YAML files in the SPU data folder. The schemas of one policy
are merged and compiled with fastjsonschema before the policy is checked.
"""

import copy
import json
import logging
from typing import Any

import fastjsonschema
from deepmerge import always_merger

from spu import SPU_DEBUG, SPU_SCHEMA_STRICT
from spu.exceptions import SPUError

logger = logging.getLogger(__name__)


def _describe_failure(exc: fastjsonschema.JsonSchemaValueException) -> str:
    """Create readable description of a validation failure.

    :param exc: Validation exception raised by the compiled schema.
    :return: Message naming the failed rule.
    """
    message = str(exc)
    if exc.rule == "required" and isinstance(exc.value, dict):
        missing = [name for name in exc.rule_definition if name not in exc.value]
        message += f"; Missing field(s): {', '.join(missing)}"
    elif exc.rule == "anyOf":
        message += f"; Value '{exc.value}' doesn't match any of the allowed forms"
    return message


def check_unknown_properties(config: dict, schema: dict, path: str = "") -> None:
    """Report configuration keys that the schema doesn't describe.

    Nested objects are checked recursively. Unknown keys are errors when
    SPU_SCHEMA_STRICT is set and warnings otherwise.

    :param config: Configuration to check.
    :param schema: Schema of the configuration.
    :param path: Dotted path of the configuration, used in messages.
    :raises SPUError: Unknown key found in strict mode.
    """
    properties = schema.get("properties")
    if properties is None:
        return

    for key, value in config.items():
        key_path = f"{path}.{key}" if path else key
        if key not in properties:
            message = f"Unknown property found in configuration: '{key_path}'"
            if SPU_SCHEMA_STRICT:
                raise SPUError(message)
            logger.warning(message)
        elif isinstance(value, dict):
            check_unknown_properties(value, properties[key], key_path)


def check_config(
    config: dict[str, Any], schemas: list[dict[str, Any]], check_unknown_props: bool = False
) -> None:
    """Validate configuration by the merged schemas.

    :param config: Configuration to validate.
    :param schemas: Schemas merged into one before validation.
    :param check_unknown_props: Report keys the schemas don't describe.
    :raises SPUError: Invalid schema or the configuration doesn't match it.
    """
    schema: dict[str, Any] = {}
    for part in schemas:
        always_merger.merge(schema, copy.deepcopy(part))
    if SPU_DEBUG:
        logger.debug(f"Merged validation schema: {json.dumps(schema, indent=2)}")

    config_to_check = copy.deepcopy(dict(config))
    if check_unknown_props:
        check_unknown_properties(config_to_check, schema)

    try:
        validator = fastjsonschema.compile(schema)
    except (TypeError, fastjsonschema.JsonSchemaDefinitionException) as exc:
        raise SPUError(f"Invalid validation schema to check config: {str(exc)}") from exc
    try:
        validator(config_to_check)
    except fastjsonschema.JsonSchemaValueException as exc:
        raise SPUError(f"Configuration validation failed: {_describe_failure(exc)}") from exc
