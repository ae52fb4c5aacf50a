# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Credential authentication service: register, login, bearer tokens."""

__version__ = "0.1.0"
