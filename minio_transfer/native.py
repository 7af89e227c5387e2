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

"""
Request, output and credential types of the native transfer engine.

The native engine performs the actual object transfer. It accepts its own
request types carrying custom headers and a custom query string, and returns
outputs holding protocol fields only; transport level details (status code,
raw headers) come back separately as a urllib3 response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import BinaryIO, Optional, Type, TypeVar

from typing_extensions import Protocol, runtime_checkable
from urllib3.response import BaseHTTPResponse

from .error import UnrecognizedEnumValueError

E = TypeVar("E", bound="NativeEnum")


class NativeEnum(str, Enum):
    """Closed set of string values understood by the native engine."""

    @classmethod
    def from_value(cls: Type[E], value: Optional[str]) -> Optional[E]:
        """
        Parse string value to enum member; None is passed through and
        unknown values are rejected.
        """
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError as exc:
            raise UnrecognizedEnumValueError(cls.__name__, value) from exc


class ObjectCannedACL(NativeEnum):
    """Canned access control list of an object."""
    PRIVATE = "private"
    PUBLIC_READ = "public-read"
    PUBLIC_READ_WRITE = "public-read-write"
    AUTHENTICATED_READ = "authenticated-read"
    AWS_EXEC_READ = "aws-exec-read"
    BUCKET_OWNER_READ = "bucket-owner-read"
    BUCKET_OWNER_FULL_CONTROL = "bucket-owner-full-control"


class ObjectLockMode(NativeEnum):
    """Object lock retention mode."""
    GOVERNANCE = "GOVERNANCE"
    COMPLIANCE = "COMPLIANCE"


class ObjectLockLegalHoldStatus(NativeEnum):
    """Object lock legal hold status."""
    ON = "ON"
    OFF = "OFF"


class RequestPayer(NativeEnum):
    """Party paying for the request."""
    REQUESTER = "requester"


class RequestCharged(NativeEnum):
    """Party charged for the request."""
    REQUESTER = "requester"


class ServerSideEncryption(NativeEnum):
    """Server-side encryption algorithm."""
    AES256 = "AES256"
    AWS_KMS = "aws:kms"
    AWS_KMS_DSSE = "aws:kms:dsse"


class StorageClass(NativeEnum):
    """Object storage class."""
    STANDARD = "STANDARD"
    REDUCED_REDUNDANCY = "REDUCED_REDUNDANCY"
    STANDARD_IA = "STANDARD_IA"
    ONEZONE_IA = "ONEZONE_IA"
    INTELLIGENT_TIERING = "INTELLIGENT_TIERING"
    GLACIER = "GLACIER"
    DEEP_ARCHIVE = "DEEP_ARCHIVE"
    OUTPOSTS = "OUTPOSTS"
    GLACIER_IR = "GLACIER_IR"
    SNOW = "SNOW"
    EXPRESS_ONEZONE = "EXPRESS_ONEZONE"


@dataclass(frozen=True)
class HttpHeader:
    """Single HTTP header sent by the native engine."""
    name: str
    value: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("header name must be provided")
        if self.value is None:
            raise ValueError("header value must be provided")


@dataclass(frozen=True)
class NativeCredentials:
    """Byte encoded credentials consumed by the native engine."""
    access_key_id: bytes
    secret_access_key: bytes = field(repr=False)
    session_token: Optional[bytes] = field(default=None, repr=False)

    def __post_init__(self):
        if not isinstance(self.access_key_id, bytes):
            raise TypeError("access key ID must be bytes")
        if not isinstance(self.secret_access_key, bytes):
            raise TypeError("secret access key must be bytes")
        if (
                self.session_token is not None and
                not isinstance(self.session_token, bytes)
        ):
            raise TypeError("session token must be bytes")


def _check_custom_fields(headers: tuple[HttpHeader, ...], query: str):
    """Check custom headers and query string of native requests."""
    if not all(isinstance(header, HttpHeader) for header in headers):
        raise TypeError("custom headers must be HttpHeader objects")
    if query and not query.startswith("?"):
        raise ValueError("custom query parameters must start with '?'")


@dataclass(frozen=True)
class GetObjectRequest:
    """Native GetObject request."""
    bucket: str
    key: str
    expected_bucket_owner: Optional[str] = None
    if_match: Optional[str] = None
    if_modified_since: Optional[datetime] = None
    if_none_match: Optional[str] = None
    custom_headers: tuple[HttpHeader, ...] = ()
    custom_query_parameters: str = ""

    def __post_init__(self):
        if not self.bucket:
            raise ValueError("bucket must be provided")
        if not self.key:
            raise ValueError("key must be provided")
        object.__setattr__(self, "custom_headers", tuple(self.custom_headers))
        _check_custom_fields(self.custom_headers, self.custom_query_parameters)


@dataclass(frozen=True)
class GetObjectOutput:
    """Native GetObject output."""
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


@dataclass(frozen=True)
class PutObjectRequest:  # pylint: disable=too-many-instance-attributes
    """Native PutObject request."""
    bucket: str
    key: str
    content_length: Optional[int] = None
    acl: Optional[ObjectCannedACL] = None
    bucket_key_enabled: Optional[bool] = None
    cache_control: Optional[str] = None
    content_disposition: Optional[str] = None
    content_encoding: Optional[str] = None
    content_language: Optional[str] = None
    content_md5: Optional[str] = None
    content_type: Optional[str] = None
    expected_bucket_owner: Optional[str] = None
    expires: Optional[datetime] = None
    grant_full_control: Optional[str] = None
    grant_read: Optional[str] = None
    grant_read_acp: Optional[str] = None
    grant_write_acp: Optional[str] = None
    metadata: Optional[dict[str, str]] = None
    object_lock_legal_hold_status: Optional[ObjectLockLegalHoldStatus] = None
    object_lock_mode: Optional[ObjectLockMode] = None
    object_lock_retain_until_date: Optional[datetime] = None
    request_payer: Optional[RequestPayer] = None
    server_side_encryption: Optional[ServerSideEncryption] = None
    sse_customer_algorithm: Optional[str] = None
    sse_customer_key: Optional[str] = field(default=None, repr=False)
    sse_customer_key_md5: Optional[str] = None
    ssekms_encryption_context: Optional[str] = field(default=None, repr=False)
    ssekms_key_id: Optional[str] = None
    storage_class: Optional[StorageClass] = None
    tagging: Optional[str] = None
    website_redirect_location: Optional[str] = None
    custom_headers: tuple[HttpHeader, ...] = ()
    custom_query_parameters: str = ""

    def __post_init__(self):
        if not self.bucket:
            raise ValueError("bucket must be provided")
        if not self.key:
            raise ValueError("key must be provided")
        if self.content_length is not None and self.content_length < 0:
            raise ValueError("content length must not be negative")
        object.__setattr__(self, "custom_headers", tuple(self.custom_headers))
        _check_custom_fields(self.custom_headers, self.custom_query_parameters)


@dataclass(frozen=True)
class PutObjectOutput:
    """Native PutObject output."""
    bucket_key_enabled: Optional[bool] = None
    etag: Optional[str] = None
    expiration: Optional[str] = None
    request_charged: Optional[RequestCharged] = None
    server_side_encryption: Optional[ServerSideEncryption] = None
    sse_customer_algorithm: Optional[str] = None
    sse_customer_key_md5: Optional[str] = None
    ssekms_encryption_context: Optional[str] = field(default=None, repr=False)
    ssekms_key_id: Optional[str] = None
    version_id: Optional[str] = None


@runtime_checkable
class NativeEngine(Protocol):
    """typing stub for the native transfer engine."""

    def get_object(
            self,
            request: GetObjectRequest,
            credentials: Optional[NativeCredentials],
    ) -> tuple[GetObjectOutput, BaseHTTPResponse]:
        """Download an object; return its output and transport response."""

    def put_object(
            self,
            request: PutObjectRequest,
            data: BinaryIO,
            credentials: Optional[NativeCredentials],
    ) -> tuple[PutObjectOutput, BaseHTTPResponse]:
        """Upload an object; return its output and transport response."""
