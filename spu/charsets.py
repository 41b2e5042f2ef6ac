#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU standard character sets."""

DIGIT_CHARSET = "0123456789"
LOWERCASE_CHARSET = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# OWASP password special characters except space and backslash.
# See https://owasp.org/www-community/password-special-characters
SYMBOL_CHARSET = "!\"#$%&'()*+,-./:;<=>?@[]{}^_`|~"
