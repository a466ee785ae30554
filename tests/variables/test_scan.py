"""
Tests for the low-level scanning helpers and the pure recognizers.
"""

from mdvars.definition import scan_definition
from mdvars.reference import scan_reference
from mdvars.scan import find_closing, is_alnum, is_space, scan_name, skip_spaces


def _def(src: str):
    return scan_definition(src, 0, len(src))


def _ref(src: str):
    return scan_reference(src, 0, len(src))


class TestHelpers:

    def test_name_charset_is_ascii_only(self):
        assert all(is_alnum(ch) for ch in "azAZ09")
        for ch in "-_ }.é٣":
            assert not is_alnum(ch)

    def test_space_is_space_or_tab(self):
        assert is_space(" ") and is_space("\t")
        assert not is_space("\n")

    def test_skip_spaces_respects_max(self):
        assert skip_spaces("a   b", 1, 5) == 4
        assert skip_spaces("a   b", 1, 3) == 3

    def test_find_closing_needs_both_braces_inside_range(self):
        assert find_closing("x }} y", 0, 6) == 2
        assert find_closing("x }", 0, 3) == -1
        assert find_closing("x }}", 0, 3) == -1

    def test_scan_name(self):
        assert scan_name("abc def", 0, 7) == 3
        assert scan_name("abc", 0, 3) == 3
        assert scan_name("ab-c", 0, 4) is None
        assert scan_name("abc}}", 0, 5) is None
        assert scan_name("abc}}", 0, 5, stop_at_closing=True) == 3


class TestScanDefinition:

    def test_simple(self):
        m = _def("{{> greet Hello }}")
        assert m is not None
        assert m.name == "greet"
        assert m.content == "Hello"
        assert m.end == len("{{> greet Hello }}")

    def test_no_space_after_marker_and_inner_spaces_kept(self):
        m = _def("{{>greet   Hello  world  }}")
        assert m.name == "greet"
        assert m.content == "Hello  world"

    def test_content_stops_at_first_closing(self):
        m = _def("{{> a one }} two }}")
        assert m.content == "one"
        assert m.end == len("{{> a one }}")

    def test_single_brace_inside_content(self):
        assert _def("{{> a {b} }}").content == "{b}"

    def test_respects_start_offset(self):
        src = "  {{> a b }}"
        m = scan_definition(src, 2, len(src))
        assert (m.name, m.content, m.end) == ("a", "b", len(src))

    def test_rejects(self):
        cases = [
            "{{ a b }}",          # no '>'
            "{> a b }}",          # single brace
            "{{> }}",             # empty name
            "{{> my-var x }}",    # hyphen in name
            "{{> a_b x }}",       # underscore in name
            "{{> a}} x }}",       # name runs into braces
            "{{> a }}",           # empty content
            "{{> a      }}",      # whitespace-only content
            "{{> name",           # nothing after name
            "{{> name content",   # no closing markers
            "{{> name content }", # single closing brace
        ]
        for src in cases:
            assert _def(src) is None, src


class TestScanReference:

    def test_forms(self):
        for src in ("{{ name }}", "{{name}}", "{{ name}}", "{{name }}", "{{\tname\t}}"):
            m = _ref(src)
            assert m is not None, src
            assert m.name == "name"
            assert m.end == len(src)

    def test_only_matches_at_position(self):
        src = "x{{ a }}"
        assert scan_reference(src, 0, len(src)) is None
        assert scan_reference(src, 1, len(src)).end == len(src)

    def test_rejects(self):
        cases = [
            "{{ }}",
            "{{}}",
            "{{ my-var }}",
            "{{> name }}",
            "{{ a b }}",
            "{{ name",
            "{{ name }",
            "{ name }}",
        ]
        for src in cases:
            assert _ref(src) is None, src

    def test_closing_must_fit_before_max(self):
        assert scan_reference("{{a}}", 0, 4) is None
