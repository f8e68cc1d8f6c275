# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""User registration and authentication backend."""

__version__ = "0.1.0"
