"""Tests for text and repository decoding."""

import json
import sys

import pytest

from adapters.decoding import decode_repositories, decode_text, encode_repositories
from core.domain.models import Repository
from core.errors import EncodingError, SchemaError


class TestDecodeText:
    """Tests for decode_text."""

    def test_ascii(self):
        assert decode_text(b"Hello") == "Hello"

    def test_multibyte(self):
        assert decode_text("héllo ✓".encode("utf-8")) == "héllo ✓"

    def test_empty(self):
        assert decode_text(b"") == ""

    @pytest.mark.parametrize("data", [b"\xff", b"abc\xc3", b"\xed\xa0\x80", b"ok \x80 ok"])
    def test_invalid_utf8(self, data):
        with pytest.raises(EncodingError):
            decode_text(data)

    def test_operation_in_message(self):
        with pytest.raises(EncodingError) as exc_info:
            decode_text(b"\xff", operation="read 'x.txt'")
        assert str(exc_info.value).startswith("read 'x.txt' failed")


class TestDecodeRepositories:
    """Tests for decode_repositories."""

    def test_single_record(self):
        body = b'[{"name":"a","description":"d","fork":false}]'
        assert decode_repositories(body) == [Repository(name="a", description="d", fork=False)]

    def test_description_absent(self):
        records = decode_repositories(b'[{"name":"a","fork":true}]')
        assert records == [Repository(name="a", description=None, fork=True)]

    def test_description_null(self):
        records = decode_repositories(b'[{"name":"a","description":null,"fork":true}]')
        assert records[0].description is None

    def test_empty_array(self):
        assert decode_repositories(b"[]") == []

    def test_unknown_fields_ignored(self):
        body = json.dumps(
            [{"name": "repo", "fork": False, "id": 1, "owner": {"login": "x"}, "stargazers_count": 3}]
        ).encode()
        (record,) = decode_repositories(body)
        assert record == Repository(name="repo", fork=False)
        assert not hasattr(record, "id")

    def test_missing_required_field_fails_whole_decode(self):
        body = b'[{"name":"ok","fork":false},{"description":"no name","fork":true}]'
        with pytest.raises(SchemaError) as exc_info:
            decode_repositories(body)
        assert "1.name" in str(exc_info.value)

    def test_missing_fork(self):
        with pytest.raises(SchemaError):
            decode_repositories(b'[{"name":"a"}]')

    @pytest.mark.parametrize(
        "element",
        [
            {"name": "a", "fork": "true"},
            {"name": "a", "fork": 1},
            {"name": 5, "fork": False},
            {"name": "a", "description": 3, "fork": False},
        ],
    )
    def test_type_mismatch(self, element):
        with pytest.raises(SchemaError):
            decode_repositories(json.dumps([element]).encode())

    def test_non_object_element(self):
        with pytest.raises(SchemaError):
            decode_repositories(b'["a"]')

    def test_top_level_object_rejected(self):
        with pytest.raises(SchemaError) as exc_info:
            decode_repositories(b'{"message":"Not Found"}')
        assert "JSON array" in str(exc_info.value)

    def test_malformed_json(self):
        with pytest.raises(SchemaError):
            decode_repositories(b'[{"name":')

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit")
    def test_oversized_integer_in_ignored_field(self):
        body = b'[{"name":"a","fork":true,"id":' + b"1" * 5000 + b"}]"
        with pytest.raises(SchemaError):
            decode_repositories(body)

    def test_nesting_past_recursion_limit(self):
        with pytest.raises(SchemaError):
            decode_repositories(b"[" * 200_000 + b"]" * 200_000)

    def test_lone_surrogate_escape_rejected(self):
        with pytest.raises(EncodingError) as exc_info:
            decode_repositories(b'[{"name":"ok","fork":false},{"name":"\\ud800","fork":true}]')
        assert "1.name" in str(exc_info.value)

    def test_lone_surrogate_in_description_rejected(self):
        with pytest.raises(EncodingError):
            decode_repositories(b'[{"name":"a","description":"x\\udfff","fork":true}]')

    def test_surrogate_pair_escape_accepted(self):
        (record,) = decode_repositories(b'[{"name":"\\ud83d\\ude00","fork":false}]')
        assert record.name == "\U0001f600"
        assert decode_repositories(encode_repositories([record])) == [record]

    def test_invalid_utf8_is_encoding_error(self):
        with pytest.raises(EncodingError):
            decode_repositories(b'[{"name":"\xff","fork":true}]')


class TestEncodeRepositories:
    """Tests for encode_repositories."""

    def test_round_trip_on_recognized_fields(self):
        source = [
            {"name": "a", "description": "d", "fork": False, "id": 7},
            {"name": "b", "fork": True},
            {"name": "ü", "description": None, "fork": False},
        ]
        records = decode_repositories(json.dumps(source).encode())
        again = decode_repositories(encode_repositories(records))

        expected = {(item["name"], item.get("description"), item["fork"]) for item in source}
        assert {(r.name, r.description, r.fork) for r in again} == expected

    def test_output_is_utf8_json_array(self):
        encoded = encode_repositories([Repository(name="ü", fork=True)])
        assert json.loads(encoded.decode("utf-8")) == [{"name": "ü", "description": None, "fork": True}]
