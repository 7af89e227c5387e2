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
minio_transfer.api
~~~~~~~~~~~~~~~~~~

This module implements the transfer client running S3 object requests
through a native transfer engine.

:copyright: (c) 2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import annotations

from typing import BinaryIO, Optional, TextIO

from urllib3.response import BaseHTTPResponse

from .adapters import (create_native_credentials,
                       from_native_get_object_output,
                       from_native_put_object_output,
                       to_native_get_object_request,
                       to_native_put_object_request)
from .credentials import Provider, StaticProvider
from .helpers import headers_to_strings
from .models import (GetObjectRequest, GetObjectResponse, PutObjectRequest,
                     PutObjectResponse)
from .native import HttpHeader, NativeCredentials, NativeEngine


class TransferClient:
    """
    Client to download and upload objects using a native transfer engine.
    """
    _engine: NativeEngine
    _provider: Optional[Provider]
    _trace_stream: Optional[TextIO]

    def __init__(
            self,
            engine: NativeEngine,
            access_key: Optional[str] = None,
            secret_key: Optional[str] = None,
            session_token: Optional[str] = None,
            credentials: Optional[Provider] = None,
    ):
        """
        Initializes a new TransferClient object.

        Args:
            engine (NativeEngine):
                Native transfer engine performing object transfers.

            access_key (Optional[str], default=None):
                Access key (aka user ID) of your account in the S3 service.

            secret_key (Optional[str], default=None):
                Secret key (aka password) of your account in the S3 service.

            session_token (Optional[str], default=None):
                Session token of your account in the S3 service.

            credentials (Optional[Provider], default=None):
                Credentials provider of your account in the S3 service.

        Notes:
            Credentials are resolved and converted once per transfer. Without
            access key and credentials provider, transfers are anonymous.

        Example:
            >>> from minio_transfer import TransferClient
            >>> from minio_transfer.credentials import StaticProvider
            >>>
            >>> client = TransferClient(
            ...     engine, credentials=StaticProvider("ACCESS-KEY", "SECRET-KEY"),
            ... )
        """
        if not isinstance(engine, NativeEngine):
            raise TypeError(
                "engine should be NativeEngine like object, "
                f"got {type(engine).__name__}",
            )

        self._engine = engine
        self._trace_stream = None
        if access_key:
            if secret_key is None:
                raise ValueError("secret key must be provided with access key")
            credentials = StaticProvider(access_key, secret_key, session_token)
        self._provider = credentials

    def trace_on(self, stream: TextIO):
        """
        Enable transfer trace.

        Args:
            stream (TextIO):
                Stream for writing transfer tracing.

        Example:
            >>> client.trace_on(sys.stdout)
        """
        if not stream:
            raise ValueError('Input stream for trace output is invalid.')
        # Save new output stream.
        self._trace_stream = stream

    def trace_off(self):
        """Disable transfer trace."""
        self._trace_stream = None

    def _native_credentials(self) -> Optional[NativeCredentials]:
        """Resolve credentials for a transfer."""
        if self._provider is None:
            return None
        return create_native_credentials(self._provider)

    def _trace_request(
            self,
            operation: str,
            bucket: str,
            key: str,
            headers: tuple[HttpHeader, ...],
            query: str,
    ):
        """Write native request to trace stream."""
        if not self._trace_stream:
            return
        self._trace_stream.write("---------START-TRANSFER---------\n")
        self._trace_stream.write(f"{operation} /{bucket}/{key}{query}\n")
        self._trace_stream.write(
            headers_to_strings(
                [(header.name, header.value) for header in headers],
                titled_key=True,
            ),
        )
        self._trace_stream.write("\n")

    def _trace_response(self, response: BaseHTTPResponse):
        """Write transport response to trace stream."""
        if not self._trace_stream:
            return
        self._trace_stream.write(f"HTTP/1.1 {response.status}\n")
        self._trace_stream.write(
            headers_to_strings(
                [
                    (name, value)
                    for name in response.headers
                    for value in response.headers.getlist(name)
                ],
            ),
        )
        self._trace_stream.write("\n")
        self._trace_stream.write("----------END-TRANSFER----------\n")

    def get_object(self, request: GetObjectRequest) -> GetObjectResponse:
        """
        Download an object using the native transfer engine.

        Args:
            request (GetObjectRequest):
                GetObject request.

        Returns:
            GetObjectResponse:
                Response with object information, response metadata and the
                transport response.

        Raises:
            UnsupportedConfigurationError:
                If request override configuration uses an option the native
                engine cannot honor.

        Example:
            >>> response = client.get_object(
            ...     GetObjectRequest(
            ...         bucket_name="my-bucket",
            ...         object_name="my-object",
            ...     ),
            ... )
            >>> print(response.etag)
        """
        native_request = to_native_get_object_request(request)
        credentials = self._native_credentials()
        self._trace_request(
            "GET",
            native_request.bucket,
            native_request.key,
            native_request.custom_headers,
            native_request.custom_query_parameters,
        )
        output, http_response = self._engine.get_object(
            native_request, credentials,
        )
        self._trace_response(http_response)
        return from_native_get_object_output(output, http_response)

    def put_object(
            self,
            request: PutObjectRequest,
            data: BinaryIO,
    ) -> PutObjectResponse:
        """
        Upload data to an object using the native transfer engine.

        Args:
            request (PutObjectRequest):
                PutObject request.

            data (BinaryIO):
                An object having callable read() returning bytes object.

        Returns:
            PutObjectResponse:
                Response with object write information, response metadata and
                the transport response.

        Raises:
            UnsupportedConfigurationError:
                If request override configuration uses an option the native
                engine cannot honor.

            UnrecognizedEnumValueError:
                If an enumerated field of the request has unknown value.

        Example:
            >>> with open("my-filename", "rb") as data:
            ...     response = client.put_object(
            ...         PutObjectRequest(
            ...             bucket_name="my-bucket",
            ...             object_name="my-object",
            ...             storage_class="STANDARD",
            ...         ),
            ...         data,
            ...     )
            >>> print(response.etag, response.version_id)
        """
        if not callable(getattr(data, "read", None)):
            raise ValueError("input data must have callable read()")

        native_request = to_native_put_object_request(request)
        credentials = self._native_credentials()
        self._trace_request(
            "PUT",
            native_request.bucket,
            native_request.key,
            native_request.custom_headers,
            native_request.custom_query_parameters,
        )
        output, http_response = self._engine.put_object(
            native_request, data, credentials,
        )
        self._trace_response(http_response)
        return from_native_put_object_output(output, http_response)
