# -*- coding: utf-8 -*-
# MinIO Python Library for Amazon S3 Compatible Cloud Storage,
# (C) 2025 MinIO, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
minio_transfer.error
~~~~~~~~~~~~~~~~~~~~

This module provides custom exception classes raised while adapting requests
and responses between the S3 object API and the native transfer engine.

:copyright: (c) 2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import annotations


class MinioException(Exception):
    """Base exception of minio-transfer."""


class UnsupportedConfigurationError(MinioException):
    """
    Raised to indicate that a request override option cannot be honored by
    the native transfer engine.
    """

    def __init__(self, option: str):
        self._option = option
        super().__init__(f"{option} is not supported")

    @property
    def option(self) -> str:
        """Get name of unsupported option."""
        return self._option

    def __reduce__(self):
        return type(self), (self._option,)


class UnrecognizedEnumValueError(MinioException, ValueError):
    """
    Raised to indicate that a string value does not match any member of a
    native enumeration.
    """

    def __init__(self, enum_name: str, value: str):
        self._enum_name = enum_name
        self._value = value
        super().__init__(f"unrecognized {enum_name} value '{value}'")

    @property
    def enum_name(self) -> str:
        """Get enumeration name."""
        return self._enum_name

    @property
    def value(self) -> str:
        """Get unrecognized value."""
        return self._value

    def __reduce__(self):
        return type(self), (self._enum_name, self._value)
