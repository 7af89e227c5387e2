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

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from unittest import TestCase

from minio_transfer.adapters import (from_native_get_object_output,
                                     to_native_get_object_request)
from minio_transfer.error import UnsupportedConfigurationError
from minio_transfer.helpers import TRANSFER_USER_AGENT
from minio_transfer.models import GetObjectRequest, RequestOverrideConfig
from minio_transfer.native import GetObjectOutput, HttpHeader

from .transfer_mocks import mock_http_response

MODIFIED_SINCE = datetime(2015, 3, 2, 7, 28, 0, tzinfo=timezone.utc)


class GetObjectRequestTest(TestCase):
    def test_object_is_string(self):
        with self.assertRaises(TypeError):
            GetObjectRequest("hello", 1234)

    def test_object_is_not_empty_string(self):
        with self.assertRaises(ValueError):
            GetObjectRequest("hello", " \t \n ")

    def test_bucket_is_not_empty_string(self):
        with self.assertRaises(ValueError):
            GetObjectRequest("", "obj")

    def test_fields_copied(self):
        request = to_native_get_object_request(
            GetObjectRequest(
                bucket_name="bucket",
                object_name="obj",
                expected_bucket_owner="111122223333",
                if_match="etag-1",
                if_modified_since=MODIFIED_SINCE,
                if_none_match="etag-2",
            ),
        )
        self.assertEqual(request.bucket, "bucket")
        self.assertEqual(request.key, "obj")
        self.assertEqual(request.expected_bucket_owner, "111122223333")
        self.assertEqual(request.if_match, "etag-1")
        self.assertEqual(request.if_modified_since, MODIFIED_SINCE)
        self.assertEqual(request.if_none_match, "etag-2")
        self.assertEqual(
            request.custom_headers,
            (HttpHeader("User-Agent", TRANSFER_USER_AGENT),),
        )
        self.assertEqual(request.custom_query_parameters, "")

    def test_override_headers(self):
        request = to_native_get_object_request(
            GetObjectRequest(
                bucket_name="bucket",
                object_name="obj",
                override_config=RequestOverrideConfig(
                    headers={"sample": ["value"]},
                ),
            ),
        )
        self.assertIn(HttpHeader("sample", "value"), request.custom_headers)
        self.assertEqual(
            request.custom_headers[0],
            HttpHeader("User-Agent", TRANSFER_USER_AGENT),
        )
        self.assertEqual(request.custom_query_parameters, "")

    def test_override_query(self):
        request = to_native_get_object_request(
            GetObjectRequest(
                bucket_name="bucket",
                object_name="obj",
                override_config=RequestOverrideConfig(
                    raw_query_parameters={"partNumber": ["1"]},
                ),
            ),
        )
        self.assertEqual(request.custom_query_parameters, "?partNumber=1")

    def test_unsupported_override(self):
        with self.assertRaises(UnsupportedConfigurationError) as ctx:
            to_native_get_object_request(
                GetObjectRequest(
                    bucket_name="bucket",
                    object_name="obj",
                    override_config=RequestOverrideConfig(
                        api_call_attempt_timeout=timedelta(seconds=1),
                    ),
                ),
            )
        self.assertEqual(ctx.exception.option, "api_call_attempt_timeout")


class GetObjectOutputTest(TestCase):
    def test_fields_copied(self):
        last_modified = datetime(2024, 10, 30, 9, 35, tzinfo=timezone.utc)
        output = GetObjectOutput(
            bucket_key_enabled=True,
            accept_ranges="bytes",
            cache_control="no-cache",
            content_disposition="attachment",
            content_encoding="gzip",
            content_language="en-US",
            content_range="bytes 0-9/100",
            content_length=10,
            content_type="text/plain",
            delete_marker=False,
            etag='"d41d8cd98f00b204e9800998ecf8427e"',
            expiration='expiry-date="Fri, 23 Dec 2012 00:00:00 GMT"',
            expires=MODIFIED_SINCE,
            last_modified=last_modified,
            metadata={"project": "one"},
        )
        http_response = mock_http_response(
            206,
            {
                "x-amz-request-id": "4442587FB7D0A2F9",
                "x-amz-id-2": "host-id",
                "sample": ["value", "other"],
            },
        )
        response = from_native_get_object_output(output, http_response)
        self.assertTrue(response.bucket_key_enabled)
        self.assertEqual(response.accept_ranges, "bytes")
        self.assertEqual(response.cache_control, "no-cache")
        self.assertEqual(response.content_disposition, "attachment")
        self.assertEqual(response.content_encoding, "gzip")
        self.assertEqual(response.content_language, "en-US")
        self.assertEqual(response.content_range, "bytes 0-9/100")
        self.assertEqual(response.content_length, 10)
        self.assertEqual(response.content_type, "text/plain")
        self.assertFalse(response.delete_marker)
        self.assertEqual(response.etag, '"d41d8cd98f00b204e9800998ecf8427e"')
        self.assertEqual(
            response.expiration,
            'expiry-date="Fri, 23 Dec 2012 00:00:00 GMT"',
        )
        self.assertEqual(response.expires, MODIFIED_SINCE)
        self.assertEqual(response.last_modified, last_modified)
        self.assertEqual(response.metadata, {"project": "one"})
        self.assertIs(response.http_response, http_response)
        self.assertEqual(response.response_metadata.get("sample"), "value")
        self.assertEqual(
            response.response_metadata.request_id, "4442587FB7D0A2F9",
        )
        self.assertEqual(
            response.response_metadata.extended_request_id, "host-id",
        )
        self.assertIsNone(response.response_metadata.cloud_front_id)


class ConcurrentAdaptTest(TestCase):
    def test_parallel_requests(self):
        def adapt(index):
            return to_native_get_object_request(
                GetObjectRequest(
                    bucket_name="bucket",
                    object_name=f"obj-{index}",
                    override_config=RequestOverrideConfig(
                        headers={"x-index": [str(index)]},
                    ),
                ),
            )

        with ThreadPoolExecutor(max_workers=8) as executor:
            requests = list(executor.map(adapt, range(64)))

        for index, request in enumerate(requests):
            self.assertEqual(request.key, f"obj-{index}")
            self.assertEqual(
                request.custom_headers[1], HttpHeader("x-index", str(index)),
            )
