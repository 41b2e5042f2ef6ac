#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU enumeration of tagged and labeled members.

Members are ``(tag, label, description)`` tuples. The label is the name used
in policy files and error messages.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class SpuEnumMember:
    """Values carried by one enumeration member."""

    tag: int
    label: str
    description: Optional[str] = None


class SpuEnum(SpuEnumMember, Enum):
    """Enumeration whose members also equal their tag and their label."""

    def __eq__(self, other: object) -> bool:
        return self.tag == other or self.label == other

    def __hash__(self) -> int:
        return hash((self.tag, self.label, self.description))

    @classmethod
    def labels(cls) -> list[str]:
        """Get labels of all members in definition order."""
        return [member.label for member in cls]
