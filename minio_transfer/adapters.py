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

"""
minio_transfer.adapters
~~~~~~~~~~~~~~~~~~~~~~~

Conversion between S3 object API models and native transfer engine models.
All functions here are stateless and safe to call concurrently.

:copyright: (c) 2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Optional

from urllib3.response import BaseHTTPResponse

from . import native
from .credentials import Credentials, Provider
from .error import UnsupportedConfigurationError
from .helpers import (HEADER_USER_AGENT, TRANSFER_USER_AGENT,
                      encode_and_flatten_query_parameters)
from .models import (GetObjectRequest, GetObjectResponse, PutObjectRequest,
                     PutObjectResponse, RequestOverrideConfig,
                     ResponseMetadata)


def to_native_credentials(
        credentials: Credentials,
) -> native.NativeCredentials:
    """Convert resolved credentials to native credentials."""
    return native.NativeCredentials(
        access_key_id=credentials.access_key.encode("utf-8"),
        secret_access_key=credentials.secret_key.encode("utf-8"),
        session_token=(
            credentials.session_token.encode("utf-8")
            if credentials.session_token is not None else None
        ),
    )


def create_native_credentials(provider: Provider) -> native.NativeCredentials:
    """Resolve credentials from provider and convert to native credentials."""
    return to_native_credentials(provider.retrieve())


def check_override_config(config: Optional[RequestOverrideConfig]):
    """
    Check request override configuration does not use any option the native
    engine cannot honor. First violated option is reported.
    """
    if config is None:
        return

    if config.metric_publishers:
        raise UnsupportedConfigurationError("metric_publishers")

    if config.signer is not None:
        raise UnsupportedConfigurationError("signer")

    if config.api_names:
        raise UnsupportedConfigurationError("api_names")

    if config.api_call_attempt_timeout is not None:
        raise UnsupportedConfigurationError("api_call_attempt_timeout")

    if config.api_call_timeout is not None:
        raise UnsupportedConfigurationError("api_call_timeout")

    if config.credentials_provider is not None:
        raise UnsupportedConfigurationError("credentials_provider")


def add_custom_query_parameters(
        config: Optional[RequestOverrideConfig],
        consumer: Callable[[str], Any],
):
    """
    Check override configuration and pass its raw query parameters as
    encoded query string to consumer. Consumer is not called if there are no
    raw query parameters.
    """
    if config is None:
        return

    check_override_config(config)

    if config.raw_query_parameters:
        query = encode_and_flatten_query_parameters(
            config.raw_query_parameters,
        )
        consumer(f"?{query}" if query else "")


def add_custom_headers(
        config: Optional[RequestOverrideConfig],
        consumer: Callable[[tuple[native.HttpHeader, ...]], Any],
):
    """
    Pass identifying user agent header followed by override headers to
    consumer. A header with N values yields N headers of same name.
    """
    headers = [native.HttpHeader(HEADER_USER_AGENT, TRANSFER_USER_AGENT)]
    if config is not None and config.headers:
        for name, values in config.headers.items():
            headers += [native.HttpHeader(name, value) for value in values]
    consumer(tuple(headers))


def to_native_get_object_request(
        request: GetObjectRequest,
) -> native.GetObjectRequest:
    """Convert GetObject request to native GetObject request."""
    fields: dict[str, Any] = {
        "bucket": request.bucket_name,
        "key": request.object_name,
        "expected_bucket_owner": request.expected_bucket_owner,
        "if_match": request.if_match,
        "if_modified_since": request.if_modified_since,
        "if_none_match": request.if_none_match,
    }

    add_custom_query_parameters(
        request.override_config,
        partial(fields.__setitem__, "custom_query_parameters"),
    )
    add_custom_headers(
        request.override_config,
        partial(fields.__setitem__, "custom_headers"),
    )

    return native.GetObjectRequest(**fields)


def to_native_put_object_request(
        request: PutObjectRequest,
) -> native.PutObjectRequest:
    """Convert PutObject request to native PutObject request."""
    check_override_config(request.override_config)

    fields: dict[str, Any] = {
        "bucket": request.bucket_name,
        "key": request.object_name,
        "content_length": request.content_length,
        "acl": native.ObjectCannedACL.from_value(request.acl),
        "bucket_key_enabled": request.bucket_key_enabled,
        "cache_control": request.cache_control,
        "content_disposition": request.content_disposition,
        "content_encoding": request.content_encoding,
        "content_language": request.content_language,
        "content_md5": request.content_md5,
        "content_type": request.content_type,
        "expected_bucket_owner": request.expected_bucket_owner,
        "expires": request.expires,
        "grant_full_control": request.grant_full_control,
        "grant_read": request.grant_read,
        "grant_read_acp": request.grant_read_acp,
        "grant_write_acp": request.grant_write_acp,
        "metadata": request.metadata,
        "object_lock_legal_hold_status": (
            native.ObjectLockLegalHoldStatus.from_value(
                request.object_lock_legal_hold_status,
            )
        ),
        "object_lock_mode": native.ObjectLockMode.from_value(
            request.object_lock_mode,
        ),
        "object_lock_retain_until_date": request.object_lock_retain_until_date,
        "request_payer": native.RequestPayer.from_value(request.request_payer),
        "server_side_encryption": native.ServerSideEncryption.from_value(
            request.server_side_encryption,
        ),
        "sse_customer_algorithm": request.sse_customer_algorithm,
        "sse_customer_key": request.sse_customer_key,
        "sse_customer_key_md5": request.sse_customer_key_md5,
        "ssekms_encryption_context": request.ssekms_encryption_context,
        "ssekms_key_id": request.ssekms_key_id,
        "storage_class": native.StorageClass.from_value(request.storage_class),
        "tagging": request.tagging,
        "website_redirect_location": request.website_redirect_location,
    }

    add_custom_query_parameters(
        request.override_config,
        partial(fields.__setitem__, "custom_query_parameters"),
    )
    add_custom_headers(
        request.override_config,
        partial(fields.__setitem__, "custom_headers"),
    )

    return native.PutObjectRequest(**fields)


def create_response_metadata(
        http_response: BaseHTTPResponse,
) -> ResponseMetadata:
    """Build response metadata from first value of each response header."""
    headers = http_response.headers
    return ResponseMetadata(
        metadata={name: headers.getlist(name)[0] for name in headers},
    )


def from_native_get_object_output(
        output: native.GetObjectOutput,
        http_response: BaseHTTPResponse,
) -> GetObjectResponse:
    """Convert native GetObject output to GetObject response."""
    return GetObjectResponse(
        bucket_key_enabled=output.bucket_key_enabled,
        accept_ranges=output.accept_ranges,
        cache_control=output.cache_control,
        content_disposition=output.content_disposition,
        content_encoding=output.content_encoding,
        content_language=output.content_language,
        content_range=output.content_range,
        content_length=output.content_length,
        content_type=output.content_type,
        delete_marker=output.delete_marker,
        etag=output.etag,
        expiration=output.expiration,
        expires=output.expires,
        last_modified=output.last_modified,
        metadata=output.metadata,
        response_metadata=create_response_metadata(http_response),
        http_response=http_response,
    )


def from_native_put_object_output(
        output: native.PutObjectOutput,
        http_response: Optional[BaseHTTPResponse] = None,
) -> PutObjectResponse:
    """
    Convert native PutObject output to PutObject response. Response metadata
    and HTTP response are attached only if HTTP response is passed.
    """
    return PutObjectResponse(
        bucket_key_enabled=output.bucket_key_enabled,
        etag=output.etag,
        expiration=output.expiration,
        request_charged=(
            output.request_charged.value
            if output.request_charged is not None else None
        ),
        server_side_encryption=(
            output.server_side_encryption.value
            if output.server_side_encryption is not None else None
        ),
        sse_customer_algorithm=output.sse_customer_algorithm,
        sse_customer_key_md5=output.sse_customer_key_md5,
        ssekms_encryption_context=output.ssekms_encryption_context,
        ssekms_key_id=output.ssekms_key_id,
        version_id=output.version_id,
        response_metadata=(
            create_response_metadata(http_response)
            if http_response is not None else None
        ),
        http_response=http_response,
    )
