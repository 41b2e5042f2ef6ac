#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPU cryptographic randomness module.

This module wraps the operating system CSPRNG and provides unbiased sampling
of integers from arbitrary ranges.
"""
