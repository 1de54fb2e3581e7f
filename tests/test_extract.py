"""
Тесты эвристики извлечения YAML из текста страницы.
"""

import logging

import pytest

from wydra.data.extract import extract, parse_yaml, unwrap


class TestUnwrap:

    def test_extracts_pre_content(self):
        assert unwrap("<p>x</p><pre>a: 1</pre><p>y</p>") == "a: 1"

    def test_first_open_last_close(self):
        assert unwrap("<pre>a</pre> mid <pre>b</pre>") == "a</pre> mid <pre>b"

    @pytest.mark.parametrize("text", ["", "plain text", "a: 1\nb: 2", "</pre> then <pre>", "<pre> only"])
    def test_idempotent_without_pre(self, text):
        assert unwrap(text) == text
        assert unwrap(unwrap(text)) == text

    def test_empty_pre(self):
        assert unwrap("<pre></pre>") == ""


class TestExtract:

    def test_pre_wrapped_yaml(self):
        raw = "<pre>title: Hello\nitems:\n  - a\n  - b\n</pre>"
        assert extract(raw) == {"title": "Hello", "items": ["a", "b"]}

    def test_pre_content_is_not_entity_decoded(self):
        assert extract("<pre>title: Tom &amp; Jerry</pre>") == {"title": "Tom &amp; Jerry"}

    def test_rich_text_is_decoded(self):
        raw = "title: Tom &amp; Jerry<br />\nnote: say &quot;hi&quot;<br />\n"
        assert extract(raw) == {"title": "Tom & Jerry", "note": 'say "hi"'}

    def test_em_dash_becomes_hyphen(self):
        assert extract("range: 1 &#8212; 5") == {"range": "1 - 5"}

    def test_em_dash_list_marker_inside_pre(self):
        assert extract("<pre>&#8212; a\n&#8212; b</pre>") == ["a", "b"]

    def test_top_level_list_is_unwrapped(self):
        assert extract("- a\n- b") == ["a", "b"]

    def test_top_level_list_of_mappings(self):
        raw = "- name: Ann\n  role: lead\n- name: Bob\n  role: dev"
        assert extract(raw) == [
            {"name": "Ann", "role": "lead"},
            {"name": "Bob", "role": "dev"},
        ]

    def test_surrounding_whitespace_trimmed(self):
        assert extract("\n\n   - x\n- y\n\n") == ["x", "y"]

    def test_empty_input(self):
        assert extract("") == {}
        assert extract("   ") == {}

    @pytest.mark.parametrize("raw", ["a: b: c", "key: [unclosed", "- a\n b: [", "<pre>{{{</pre>", "\t- x: y"])
    def test_never_raises(self, raw):
        result = extract(raw)
        assert result is not None


class TestParseYaml:

    def test_valid(self):
        assert parse_yaml("a: 1") == {"a": 1}

    def test_invalid_returns_empty(self):
        assert parse_yaml("a: b: c") == {}

    def test_silent_without_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="wydra"):
            parse_yaml("a: b: c")
        assert not caplog.records

    def test_debug_logs_details(self, caplog):
        with caplog.at_level(logging.WARNING, logger="wydra"):
            parse_yaml("a: b: c", debug=True)
        assert len(caplog.records) == 1
        assert "a: b: c" in caplog.records[0].getMessage()
