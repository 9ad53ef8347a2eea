# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Utilities and helpers for the table client.
"""

__all__ = []
