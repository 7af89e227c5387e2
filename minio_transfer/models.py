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

# pylint: disable=invalid-name

"""API request, response and request override configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

from urllib3.response import BaseHTTPResponse

from .credentials import Provider

ValuesType = Mapping[str, Union[str, Iterable[str]]]


def _check_object(bucket_name: str, object_name: str):
    """Check bucket and object names."""
    if not isinstance(bucket_name, str):
        raise TypeError("bucket name must be str type")
    if not bucket_name.strip():
        raise ValueError("bucket name must not be empty")
    if not isinstance(object_name, str):
        raise TypeError("object name must be str type")
    if not object_name.strip():
        raise ValueError("object name must not be empty")


def _normalize_values(
        values: Optional[ValuesType],
) -> Mapping[str, tuple[str, ...]]:
    """Normalize name to value(s) mapping into read-only name to values."""
    if values is None:
        return MappingProxyType({})
    if not isinstance(values, Mapping):
        raise TypeError(
            f"expected a mapping-like object, got {type(values).__name__}",
        )
    return MappingProxyType({
        key: (value,) if isinstance(value, str) else tuple(value)
        for key, value in values.items()
    })


################################################################################
###########                  Request override configuration          ###########
################################################################################


@dataclass(frozen=True)
class ApiName:
    """Name and version of a higher level API issuing a request."""
    name: str
    version: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("name must be provided")
        if not self.version:
            raise ValueError("version must be provided")


@dataclass(frozen=True)
class RequestOverrideConfig:  # pylint: disable=too-many-instance-attributes
    """
    Per-request customization layered on top of a request.

    Custom headers and raw query parameters are forwarded to the native
    engine. Metric publishers, signer, API names, API call timeouts and
    credentials provider are accepted here but the native engine cannot
    honor them.
    """
    headers: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    raw_query_parameters: Mapping[str, tuple[str, ...]] = field(
        default_factory=dict,
    )
    metric_publishers: tuple[Any, ...] = ()
    signer: Optional[Any] = None
    api_names: tuple[ApiName, ...] = ()
    api_call_attempt_timeout: Optional[timedelta] = None
    api_call_timeout: Optional[timedelta] = None
    credentials_provider: Optional[Provider] = None

    def __post_init__(self):
        object.__setattr__(self, "headers", _normalize_values(self.headers))
        object.__setattr__(
            self,
            "raw_query_parameters",
            _normalize_values(self.raw_query_parameters),
        )
        object.__setattr__(
            self, "metric_publishers", tuple(self.metric_publishers or ()),
        )
        object.__setattr__(self, "api_names", tuple(self.api_names or ()))
        for timeout in (self.api_call_attempt_timeout, self.api_call_timeout):
            if timeout is not None and not isinstance(timeout, timedelta):
                raise TypeError("API call timeout must be timedelta type")


################################################################################
###########                           Requests                       ###########
################################################################################


@dataclass(frozen=True)
class GetObjectRequest:
    """Request of GetObject API."""
    bucket_name: str
    object_name: str
    expected_bucket_owner: Optional[str] = None
    if_match: Optional[str] = None
    if_modified_since: Optional[datetime] = None
    if_none_match: Optional[str] = None
    override_config: Optional[RequestOverrideConfig] = None

    def __post_init__(self):
        _check_object(self.bucket_name, self.object_name)
        if (
                self.if_modified_since is not None and
                not isinstance(self.if_modified_since, datetime)
        ):
            raise ValueError("if_modified_since must be datetime type")


@dataclass(frozen=True)
class PutObjectRequest:  # pylint: disable=too-many-instance-attributes
    """
    Request of PutObject API.

    Enumerated fields (acl, object lock mode and legal hold status, request
    payer, server-side encryption and storage class) are plain strings here;
    they are parsed when converted to the native request.
    """
    bucket_name: str
    object_name: str
    content_length: Optional[int] = None
    content_md5: Optional[str] = None
    acl: Optional[str] = None
    bucket_key_enabled: Optional[bool] = None
    cache_control: Optional[str] = None
    content_disposition: Optional[str] = None
    content_encoding: Optional[str] = None
    content_language: Optional[str] = None
    content_type: Optional[str] = None
    expected_bucket_owner: Optional[str] = None
    expires: Optional[datetime] = None
    grant_full_control: Optional[str] = None
    grant_read: Optional[str] = None
    grant_read_acp: Optional[str] = None
    grant_write_acp: Optional[str] = None
    metadata: Optional[dict[str, str]] = None
    object_lock_legal_hold_status: Optional[str] = None
    object_lock_mode: Optional[str] = None
    object_lock_retain_until_date: Optional[datetime] = None
    request_payer: Optional[str] = None
    server_side_encryption: Optional[str] = None
    sse_customer_algorithm: Optional[str] = None
    sse_customer_key: Optional[str] = field(default=None, repr=False)
    sse_customer_key_md5: Optional[str] = None
    ssekms_encryption_context: Optional[str] = field(default=None, repr=False)
    ssekms_key_id: Optional[str] = None
    storage_class: Optional[str] = None
    tagging: Optional[str] = None
    website_redirect_location: Optional[str] = None
    override_config: Optional[RequestOverrideConfig] = None

    def __post_init__(self):
        _check_object(self.bucket_name, self.object_name)
        if self.content_length is not None and self.content_length < 0:
            raise ValueError("content length must not be negative")


################################################################################
###########                           Responses                      ###########
################################################################################


@dataclass(frozen=True)
class ResponseMetadata:
    """Snapshot of transport response headers, first value per header."""
    metadata: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "metadata", MappingProxyType(dict(self.metadata)),
        )

    def get(self, name: str) -> Optional[str]:
        """Get header value by case-insensitive name."""
        name = name.lower()
        return next(
            (
                value for key, value in self.metadata.items()
                if key.lower() == name
            ),
            None,
        )

    @property
    def request_id(self) -> Optional[str]:
        """Get request ID."""
        return self.get("x-amz-request-id")

    @property
    def extended_request_id(self) -> Optional[str]:
        """Get extended request ID."""
        return self.get("x-amz-id-2")

    @property
    def cloud_front_id(self) -> Optional[str]:
        """Get CloudFront ID."""
        return self.get("x-amz-cf-id")


@dataclass(frozen=True)
class GetObjectResponse:  # pylint: disable=too-many-instance-attributes
    """Response of GetObject API."""
    bucket_key_enabled: Optional[bool] = None
    accept_ranges: Optional[str] = None
    cache_control: Optional[str] = None
    content_disposition: Optional[str] = None
    content_encoding: Optional[str] = None
    content_language: Optional[str] = None
    content_range: Optional[str] = None
    content_length: Optional[int] = None
    content_type: Optional[str] = None
    delete_marker: Optional[bool] = None
    etag: Optional[str] = None
    expiration: Optional[str] = None
    expires: Optional[datetime] = None
    last_modified: Optional[datetime] = None
    metadata: Optional[dict[str, str]] = None
    response_metadata: Optional[ResponseMetadata] = None
    http_response: Optional[BaseHTTPResponse] = field(
        default=None, repr=False, compare=False,
    )


@dataclass(frozen=True)
class PutObjectResponse:  # pylint: disable=too-many-instance-attributes
    """Response of PutObject API."""
    bucket_key_enabled: Optional[bool] = None
    etag: Optional[str] = None
    expiration: Optional[str] = None
    request_charged: Optional[str] = None
    server_side_encryption: Optional[str] = None
    sse_customer_algorithm: Optional[str] = None
    sse_customer_key_md5: Optional[str] = None
    ssekms_encryption_context: Optional[str] = field(default=None, repr=False)
    ssekms_key_id: Optional[str] = None
    version_id: Optional[str] = None
    response_metadata: Optional[ResponseMetadata] = None
    http_response: Optional[BaseHTTPResponse] = field(
        default=None, repr=False, compare=False,
    )
