# -*- coding: utf-8 -*-
# MinIO Python Library for Amazon S3 Compatible Cloud Storage, (C)
# 2025 MinIO, Inc.
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

"""Helper functions."""

from __future__ import annotations

import platform
import re
import urllib.parse
from typing import Iterable, Mapping, Optional, Union

from . import __title__, __version__

HEADER_USER_AGENT = "User-Agent"

_DEFAULT_USER_AGENT = (
    f"MinIO ({platform.system()}; {platform.machine()}) "
    f"{__title__}/{__version__}"
)

# Identifies this library and its transfer feature on every native request.
TRANSFER_USER_AGENT = f"{_DEFAULT_USER_AGENT} ft/s3-transfer"

_REDACTED_HEADERS = {
    "authorization",
    "x-amz-security-token",
    "x-amz-server-side-encryption-customer-key",
    "x-amz-copy-source-server-side-encryption-customer-key",
}

QueryType = Mapping[str, Union[str, Iterable[Optional[str]], None]]


def quote(resource: str, safe: str = "/") -> str:
    """
    Wrapper to urllib.parse.quote() replacing back to '~' for older python
    versions.
    """
    return urllib.parse.quote(
        resource, safe=safe, encoding=None, errors=None,
    ).replace("%7E", "~")


def queryencode(query: str) -> str:
    """Encode query parameter value."""
    return quote(query, safe="")


def encode_and_flatten_query_parameters(parameters: QueryType | None) -> str:
    """
    Encode multi-valued query parameters into a single query string.

    Keys keep the iteration order of the mapping and values keep their list
    order; a key with N values yields N pairs. A None value yields the bare
    key. Empty or absent parameters produce an empty string.
    """
    query = []
    for key, values in (parameters or {}).items():
        if values is None or isinstance(values, (str, bytes)):
            values = [values]
        for value in values:
            query.append(
                queryencode(key) if value is None
                else f"{queryencode(key)}={queryencode(value)}"
            )
    return "&".join(query)


def headers_to_strings(
        headers: Iterable[tuple[str, str]] | Mapping[str, str | list[str]],
        titled_key: bool = False,
) -> str:
    """Convert HTTP headers to multi-line string with secrets redacted."""
    if isinstance(headers, Mapping):
        items = []
        for key, value in headers.items():
            for item in value if isinstance(value, (list, tuple)) else [value]:
                items.append((key, item))
    else:
        items = list(headers)

    values = []
    for key, item in items:
        if key.lower() in _REDACTED_HEADERS:
            item = "*REDACTED*"
        else:
            item = re.sub(
                r"Credential=([^/]+)",
                "Credential=*REDACTED*",
                re.sub(r"Signature=([0-9a-f]+)", "Signature=*REDACTED*", item),
            )
        values.append(f"{key.title() if titled_key else key}: {item}")
    return "\n".join(values)
