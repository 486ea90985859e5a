"""Tests for JSON loading and parsing."""

import io

import pytest
import requests

from json2freezed import utils
from json2freezed.utils import (
    JSONLoaderError,
    ParseError,
    load_json,
    parse_json_text,
    read_json_text,
    read_json_text_from_file,
    read_json_text_from_stream,
    read_json_text_from_url,
)


class FakeResponse:
    def __init__(self, text, status_code=200, content_type="application/json"):
        self.text = text
        self.status_code = status_code
        self.headers = {"content-type": content_type}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)


class TestParseJsonText:
    """Strict JSON decoding."""

    def test_valid(self):
        assert parse_json_text('{"a": [1, 2.5, null, true]}') == {"a": [1, 2.5, None, True]}

    def test_malformed_reports_position(self):
        with pytest.raises(ParseError) as excinfo:
            parse_json_text('{\n  "a": }')

        assert excinfo.value.lineno == 2
        assert excinfo.value.colno is not None

    @pytest.mark.parametrize("text", ["NaN", '{"a": Infinity}', "[-Infinity]"])
    def test_non_standard_constants_rejected(self, text):
        with pytest.raises(ParseError, match="Non-standard JSON constant"):
            parse_json_text(text)

    def test_parse_error_is_loader_error(self):
        with pytest.raises(JSONLoaderError):
            parse_json_text("")


class TestFileInput:
    """Reading from disk."""

    def test_read_file(self, user_json_file):
        source, text = read_json_text_from_file(user_json_file)

        assert source == f"📄 {user_json_file}"
        assert '"name"' in text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_json_text_from_file(tmp_path / "nope.json")

    def test_other_extension_still_read(self, tmp_path):
        path = tmp_path / "data.txt"
        path.write_text("[1]", encoding="utf-8")

        assert read_json_text_from_file(path)[1] == "[1]"

    def test_load_json(self, user_json_file):
        _, data = load_json(file_path=user_json_file)

        assert data == {"id": 1, "name": "Bob"}


class TestUrlInput:
    """Fetching over HTTP with requests.get replaced."""

    def test_fetch(self, monkeypatch):
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse('{"ok": true}')

        monkeypatch.setattr(utils.requests, "get", fake_get)

        source, text = read_json_text_from_url("https://example.com/a.json", timeout=5)

        assert source == "🌐 https://example.com/a.json"
        assert text == '{"ok": true}'
        assert calls == [("https://example.com/a.json", 5)]

    def test_invalid_url(self):
        with pytest.raises(JSONLoaderError, match="Invalid URL"):
            read_json_text_from_url("not a url")

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(
            utils.requests, "get", lambda url, timeout: FakeResponse("", status_code=404)
        )

        with pytest.raises(JSONLoaderError, match="HTTP error 404"):
            read_json_text_from_url("https://example.com/missing")

    def test_timeout(self, monkeypatch):
        def fake_get(url, timeout):
            raise requests.exceptions.Timeout()

        monkeypatch.setattr(utils.requests, "get", fake_get)

        with pytest.raises(JSONLoaderError, match="timeout"):
            read_json_text_from_url("https://example.com/slow")

    def test_connection_error(self, monkeypatch):
        def fake_get(url, timeout):
            raise requests.exceptions.ConnectionError("refused")

        monkeypatch.setattr(utils.requests, "get", fake_get)

        with pytest.raises(JSONLoaderError, match="Connection error"):
            read_json_text_from_url("https://example.com/down")

    def test_load_json_from_url(self, monkeypatch):
        monkeypatch.setattr(
            utils.requests, "get", lambda url, timeout: FakeResponse("[1, 2]")
        )

        assert load_json(url="https://example.com/list.json")[1] == [1, 2]


class TestSourceSelection:
    """Choosing between inputs."""

    def test_neither(self):
        with pytest.raises(JSONLoaderError, match="Either"):
            read_json_text()

    def test_both(self, user_json_file):
        with pytest.raises(JSONLoaderError, match="both"):
            read_json_text(file_path=user_json_file, url="https://example.com")

    def test_stream(self):
        assert read_json_text_from_stream(io.StringIO("{}")) == ("⌨️ stdin", "{}")
