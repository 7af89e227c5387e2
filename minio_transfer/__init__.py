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
minio_transfer - model adapters between MinIO/S3 object requests and a
native high-throughput transfer engine

    >>> from minio_transfer import TransferClient
    >>> from minio_transfer.models import GetObjectRequest
    >>> client = TransferClient(
    ...     engine,
    ...     access_key="Q3AM3UQ867SPQQA43P2F",
    ...     secret_key="zuf+tfteSlswRu7BJ86wekitnifILbZam1KYY3TG",
    ... )
    >>> response = client.get_object(
    ...     GetObjectRequest(bucket_name="my-bucket", object_name="my-object"),
    ... )
    >>> print(response.etag, response.response_metadata.request_id)

:copyright: (C) 2025 MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "minio-transfer-py"
__author__ = "MinIO, Inc."
__version__ = "0.1.0"
__license__ = "Apache 2.0"
__copyright__ = "Copyright 2025 MinIO, Inc."

# pylint: disable=unused-import,useless-import-alias
from .api import TransferClient as TransferClient
from .error import MinioException as MinioException
from .error import UnrecognizedEnumValueError as UnrecognizedEnumValueError
from .error import \
    UnsupportedConfigurationError as UnsupportedConfigurationError
