# SPDX-License-Identifier: MIT
"""Unit tests for display and diagnostic rendering."""

import pytest

from h_version import Version, debug_string, format_version, parse_version


class TestFormatVersion:
    """Tests for format_version and str()."""

    @pytest.mark.parametrize(
        "text",
        [
            "1:23423.553.845-rc+255",
            "1.2.3-alpha+001",
            "2023.03.01",
            "2.sjf.5djf",
            "1:2.3.4",
            "1.0.0-SNAPSHOT",
            "1.0-rc.1",
            "1..2",
            "",
        ],
    )
    def test_round_trip(self, text):
        """Test that canonical strings survive parse and format unchanged."""
        assert format_version(parse_version(text)) == text
        assert str(parse_version(text)) == text

    def test_dashes_in_components_become_dots(self):
        v = Version(epoch=None, components=("1", "2"), pre_release="rc-1")
        assert str(v) == "1.2-rc-1"

    def test_single_component_has_no_trailing_separator(self):
        assert str(Version(epoch=3, components=("7",))) == "3:7"

    def test_unparseable_epoch_is_not_shown(self):
        assert str(parse_version("abc:1.0")) == "1.0"

    def test_bare_integer_shows_epoch_and_component(self):
        assert str(parse_version("12345")) == "12345:12345"


class TestDebugString:
    """Tests for the diagnostic rendering."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            (
                "1.2.3-alpha+001",
                'epoch:0 components:["1", "2", "3"] pre_release:alpha build_metadata:0',
            ),
            (
                "2023.03.01",
                'epoch:0 components:["2023", "03", "01"] pre_release: build_metadata:0',
            ),
            (
                "2.sjf.5djf",
                'epoch:0 components:["2", "sjf", "5djf"] pre_release: build_metadata:0',
            ),
            (
                "1:2.3.4",
                'epoch:1 components:["2", "3", "4"] pre_release: build_metadata:1',
            ),
            (
                "1.0.0-SNAPSHOT",
                'epoch:0 components:["1", "0", "0"] pre_release:SNAPSHOT build_metadata:0',
            ),
        ],
    )
    def test_legacy_format(self, text, expected):
        """Test the legacy format, where build_metadata repeats the epoch."""
        assert debug_string(parse_version(text)) == expected

    def test_metadata_format(self):
        """Test the format that shows the real build metadata."""
        v = parse_version("1:2.3.4-rc+255")
        assert debug_string(v, legacy=False) == (
            'epoch:1 components:["2", "3", "4"] pre_release:rc build_metadata:255'
        )

    def test_metadata_format_without_metadata(self):
        v = parse_version("1.0")
        assert debug_string(v, legacy=False) == (
            'epoch:0 components:["1", "0"] pre_release: build_metadata:'
        )

    def test_components_are_escaped(self):
        """Test that quotes, backslashes and control characters are escaped."""
        v = Version(epoch=None, components=('a"b', "c\\d", "e\nf", "g\x07"))
        assert debug_string(v) == (
            'epoch:0 components:["a\\"b", "c\\\\d", "e\\nf", "g\\u{7}"] '
            "pre_release: build_metadata:0"
        )

    def test_empty_component(self):
        assert debug_string(parse_version("")) == (
            'epoch:0 components:[""] pre_release: build_metadata:0'
        )


    @pytest.mark.parametrize(
        "char,escaped",
        [
            ("­", "\\u{ad}"),
            ("​", "\\u{200b}"),
            (" ", "\\u{2028}"),
            (" ", "\\u{2029}"),
            (" ", "\\u{a0}"),
            ("͸", "\\u{378}"),
            ("", "\\u{e000}"),
        ],
    )
    def test_unprintable_characters_are_escaped(self, char, escaped):
        """Test that format, separator, unassigned and private-use characters are escaped."""
        v = Version(epoch=None, components=(f"a{char}b",))
        assert debug_string(v) == (
            f'epoch:0 components:["a{escaped}b"] pre_release: build_metadata:0'
        )

    def test_printable_characters_are_kept(self):
        v = Version(epoch=None, components=("é", "a b", "日本"))
        assert debug_string(v) == (
            'epoch:0 components:["é", "a b", "日本"] pre_release: build_metadata:0'
        )
