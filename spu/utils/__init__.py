#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU utilities package.

Configuration handling, schema validation, data folder access and other
helpers shared across the SPU library.
"""
