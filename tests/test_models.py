"""Tests for genderize.models: rate-limit header parsing and record decoding."""

from __future__ import annotations

from datetime import timedelta

import httpx
import pydantic
import pytest

from genderize import (
    DecodeError,
    EmptyHeaderError,
    EmptyLimitHeaderError,
    EmptyRemainingHeaderError,
    EmptyResetHeaderError,
    Gender,
    GenderizeError,
    HeaderError,
    MalformedHeaderError,
    MalformedLimitHeaderError,
    MalformedRemainingHeaderError,
    MalformedResetHeaderError,
    RateLimitInfo,
)
from genderize.models import decode_genders

# ---------------------------------------------------------------------------
# RateLimitInfo
# ---------------------------------------------------------------------------


class TestRateLimitInfo:
    def test_from_headers_ok(self, rate_headers):
        info = RateLimitInfo.from_headers(rate_headers)
        assert info == RateLimitInfo(
            limit=123, remaining=456, reset=timedelta(seconds=789)
        )

    def test_from_httpx_headers_case_insensitive(self):
        headers = httpx.Headers(
            {
                "x-rate-limit-limit": "1000",
                "x-rate-limit-remaining": "998",
                "x-rate-reset": "3600",
            }
        )
        info = RateLimitInfo.from_headers(headers)
        assert info.limit == 1000
        assert info.remaining == 998
        assert info.reset == timedelta(hours=1)

    def test_from_lowercase_plain_dict(self):
        info = RateLimitInfo.from_headers(
            {
                "x-rate-limit-limit": "1",
                "x-rate-limit-remaining": "2",
                "x-rate-reset": "3",
            }
        )
        assert (info.limit, info.remaining) == (1, 2)

    @pytest.mark.parametrize(
        "missing, error",
        [
            ("X-Rate-Limit-Limit", EmptyLimitHeaderError),
            ("X-Rate-Limit-Remaining", EmptyRemainingHeaderError),
            ("X-Rate-Reset", EmptyResetHeaderError),
        ],
    )
    def test_missing_header(self, rate_headers, missing, error):
        del rate_headers[missing]
        with pytest.raises(error) as exc_info:
            RateLimitInfo.from_headers(rate_headers)
        assert type(exc_info.value) is error
        assert exc_info.value.header == missing

    @pytest.mark.parametrize(
        "header, error",
        [
            ("X-Rate-Limit-Limit", EmptyLimitHeaderError),
            ("X-Rate-Limit-Remaining", EmptyRemainingHeaderError),
            ("X-Rate-Reset", EmptyResetHeaderError),
        ],
    )
    def test_empty_header_value(self, rate_headers, header, error):
        rate_headers[header] = ""
        with pytest.raises(error):
            RateLimitInfo.from_headers(rate_headers)

    @pytest.mark.parametrize(
        "header, error",
        [
            ("X-Rate-Limit-Limit", MalformedLimitHeaderError),
            ("X-Rate-Limit-Remaining", MalformedRemainingHeaderError),
            ("X-Rate-Reset", MalformedResetHeaderError),
        ],
    )
    @pytest.mark.parametrize("value", ["abc", "1.5", " 12", "1_000", "0x10"])
    def test_malformed_header(self, rate_headers, header, error, value):
        rate_headers[header] = value
        with pytest.raises(error) as exc_info:
            RateLimitInfo.from_headers(rate_headers)
        assert type(exc_info.value) is error
        assert exc_info.value.value == value

    def test_repeated_httpx_header_takes_first_value(self):
        headers = httpx.Headers(
            [
                ("X-Rate-Limit-Limit", "1"),
                ("X-Rate-Limit-Limit", "2"),
                ("X-Rate-Limit-Remaining", "3"),
                ("X-Rate-Reset", "4"),
            ]
        )
        assert RateLimitInfo.from_headers(headers).limit == 1

    def test_empty_httpx_header_value(self):
        headers = httpx.Headers(
            {"X-Rate-Limit-Limit": "", "X-Rate-Limit-Remaining": "3", "X-Rate-Reset": "4"}
        )
        with pytest.raises(EmptyLimitHeaderError):
            RateLimitInfo.from_headers(headers)

    def test_first_failing_header_wins(self):
        with pytest.raises(EmptyLimitHeaderError):
            RateLimitInfo.from_headers({"X-Rate-Limit-Remaining": "abc"})

    def test_signed_values_accepted(self):
        info = RateLimitInfo.from_headers(
            {
                "X-Rate-Limit-Limit": "+10",
                "X-Rate-Limit-Remaining": "-1",
                "X-Rate-Reset": "0",
            }
        )
        assert info.limit == 10
        assert info.remaining == -1
        assert info.reset == timedelta(0)

    def test_error_hierarchy(self):
        assert issubclass(EmptyLimitHeaderError, EmptyHeaderError)
        assert issubclass(MalformedResetHeaderError, MalformedHeaderError)
        assert issubclass(EmptyHeaderError, HeaderError)
        assert issubclass(MalformedHeaderError, HeaderError)
        assert issubclass(HeaderError, GenderizeError)

    def test_frozen(self):
        info = RateLimitInfo(limit=60, remaining=59, reset=timedelta(seconds=42))
        with pytest.raises(AttributeError):
            info.limit = 0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Gender decoding
# ---------------------------------------------------------------------------


class TestDecodeGenders:
    def test_decode_array(self):
        genders = decode_genders(
            b'[{"name":"Alice","gender":"female","probability":0.9,"count":12345}]'
        )
        assert genders == [
            Gender(name="Alice", gender="female", probability=0.9, count=12345)
        ]

    def test_null_gender_becomes_empty(self):
        (gender,) = decode_genders(
            '[{"name":"Xqzt","gender":null,"probability":0,"count":0}]'
        )
        assert gender.gender == ""
        assert gender.probability == 0.0

    def test_empty_array(self):
        assert decode_genders(b"[]") == []

    @pytest.mark.parametrize(
        "body",
        [
            b"",
            b"not json",
            b'{"name":"Alice","gender":"female","probability":0.9,"count":1}',
            b'{"error":"Missing \'name\' parameter"}',
            b'[{"gender":"female"}]',
        ],
    )
    def test_invalid_body(self, body):
        with pytest.raises(DecodeError):
            decode_genders(body)

    def test_out_of_range_values_kept(self):
        (gender,) = decode_genders(b'[{"name":"Alice","probability":1.01,"count":-1}]')
        assert gender.probability == 1.01
        assert gender.count == -1

    def test_single_object_when_allowed(self):
        genders = decode_genders(
            b'{"name":"Name","gender":"male","probability":0,"count":0}',
            allow_single=True,
        )
        assert genders == [Gender(name="Name", gender="male")]

    def test_array_when_single_allowed(self):
        genders = decode_genders(b'[{"name":"A"},{"name":"B"}]', allow_single=True)
        assert [g.name for g in genders] == ["A", "B"]

    @pytest.mark.parametrize("body", [b"{}", b'{"error":"x"}', b"null"])
    def test_invalid_single_object(self, body):
        with pytest.raises(DecodeError):
            decode_genders(body, allow_single=True)

    def test_frozen(self):
        gender = Gender(name="Alice", gender="female", probability=0.9, count=1)
        with pytest.raises(pydantic.ValidationError):
            gender.name = "Bob"  # type: ignore[misc]
