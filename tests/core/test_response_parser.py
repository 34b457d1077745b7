"""
Tests for core/response_parser.py - Learning Drop message parsing
"""
import pytest
from learning_coach.core.response_parser import (
    LINE_MATCHERS,
    match_heading,
    match_link,
    match_resource,
    match_subheading,
    parse_line,
    parse_message,
)
from learning_coach.core.schemas import Heading, PlainLine, ResourceEntry, SubHeading


class TestMatchers:
    """Each matcher branch in isolation"""

    def test_matcher_order(self):
        """Test that the fallback order is heading, subheading, resource, link"""
        assert [name for name, _ in LINE_MATCHERS] == ["heading", "subheading", "resource", "link"]

    def test_heading_matches_marker_anywhere(self):
        block = match_heading("**Your Learning Drop 🚀**")

        assert block == Heading(text="Your Learning Drop 🚀")

    def test_heading_ignores_other_lines(self):
        assert match_heading("Your learning journey starts here") is None

    @pytest.mark.parametrize("line,expected", [
        ("**Hard Skills**", "Hard Skills"),
        ("**Soft Skills**", "Soft Skills"),
    ])
    def test_subheading_markers(self, line, expected):
        assert match_subheading(line) == SubHeading(text=expected)

    @pytest.mark.parametrize("line", ["Hard Skills", "**Hard Skills**:", "## Soft Skills", "**Other Skills**"])
    def test_subheading_requires_exact_marker(self, line):
        assert match_subheading(line) is None

    def test_resource_with_em_dashes(self):
        block = match_resource("[**Go Programming**](https://example.com/go) — Free — (Book 📚)")

        assert block == ResourceEntry(
            title="Go Programming",
            url="https://example.com/go",
            price="Free",
            type="Book 📚",
        )

    @pytest.mark.parametrize("separator", [" - ", " – ", " — ", " -- "])
    def test_resource_accepts_dash_variants(self, separator):
        line = f"[**System Design**](https://example.com/sd){separator}$45 USD{separator}(Course 🎓)"

        block = match_resource(line)

        assert block is not None
        assert block.price == "$45 USD"
        assert block.type == "Course 🎓"

    def test_resource_trims_captures(self):
        block = match_resource("[** Mentorship **](http://example.com/m) —   Paid   — ( Article 📰 )")

        assert block.title == "Mentorship"
        assert block.url == "http://example.com/m"
        assert block.price == "Paid"
        assert block.type == "Article 📰"

    def test_resource_requires_type_at_end_of_line(self):
        assert match_resource("[**Go**](https://example.com/go) — Free — (Book) extra") is None

    def test_resource_rejects_url_with_whitespace(self):
        assert match_resource("[**Go**](https://example.com/a b) — Free — (Book)") is None

    def test_link_found_mid_line(self):
        block = match_link("Bonus: check [**Go Tour**](https://go.dev/tour) when you can")

        assert block == ResourceEntry(title="Go Tour", url="https://go.dev/tour", price="", type="Link")

    def test_link_requires_http_scheme(self):
        assert match_link("[**Go**](ftp://example.com/go)") is None


class TestParseLine:
    """Ordered fallback for a single line"""

    def test_full_entry_uses_primary_pattern(self):
        block = parse_line("  [**Kubernetes**](https://example.com/k8s) — $120.000 COP — (Course 🎓)  ")

        assert isinstance(block, ResourceEntry)
        assert block.price == "$120.000 COP"
        assert block.type == "Course 🎓"

    @pytest.mark.parametrize("line", [
        "[**Go**](https://example.com/go)",
        "[**Go**](https://example.com/go) — Free",
        "[**Go**](https://example.com/go) — Free — Book 📚",
        "1. [**Go**](https://example.com/go) — Free — (Book 📚)",
    ])
    def test_malformed_suffix_falls_back_to_link(self, line):
        block = parse_line(line)

        assert isinstance(block, ResourceEntry)
        assert block.title == "Go"
        assert block.url == "https://example.com/go"
        assert block.type == "Link"
        assert block.price == ""

    def test_unstructured_line_kept_verbatim(self):
        line = "   This combo gives you the practical knowledge you need.  "

        block = parse_line(line)

        assert block == PlainLine(text=line)

    def test_heading_wins_over_link(self):
        block = parse_line("Your Learning Drop 🚀 [**Go**](https://example.com/go)")

        assert isinstance(block, Heading)

    def test_plain_markdown_link_is_not_a_resource(self):
        line = "[Go](https://example.com/go) — Free — (Book)"

        assert parse_line(line) == PlainLine(text=line)


class TestParseMessage:
    """Whole-message parsing"""

    def test_scenario_message(self):
        message = (
            "Hey Sam, welcome.\n"
            "Your Learning Drop 🚀\n"
            "**Hard Skills**\n"
            "[**Go Programming**](https://example.com/go) — Free — (Book 📚)\n"
        )

        blocks = parse_message(message)

        assert blocks == [
            PlainLine(text="Hey Sam, welcome."),
            Heading(text="Your Learning Drop 🚀"),
            SubHeading(text="Hard Skills"),
            ResourceEntry(title="Go Programming", url="https://example.com/go", price="Free", type="Book 📚"),
        ]

    def test_sample_message_structure(self, sample_message):
        blocks = parse_message(sample_message)
        kinds = [block.kind for block in blocks]

        assert kinds == [
            "plain", "heading",
            "subheading", "resource", "resource",
            "subheading", "resource", "resource",
            "plain", "plain",
        ]
        resources = [block for block in blocks if isinstance(block, ResourceEntry)]
        assert [r.title for r in resources] == ["Go Programming", "Kubernetes", "Mentorship", "Communication"]
        assert [r.price for r in resources] == ["Free", "$120.000 COP", "Free", "Paid"]

    def test_blank_lines_produce_no_blocks(self):
        blocks = parse_message("\n\n   \nHello\n\t\n")

        assert blocks == [PlainLine(text="Hello")]

    def test_empty_message(self):
        assert parse_message("") == []

    def test_unstructured_message_one_block_per_line(self):
        message = "First line\n  indented second line\nthird line  "

        blocks = parse_message(message)

        assert blocks == [
            PlainLine(text="First line"),
            PlainLine(text="  indented second line"),
            PlainLine(text="third line  "),
        ]

    def test_parse_is_idempotent(self, sample_message):
        assert parse_message(sample_message) == parse_message(sample_message)

    def test_crlf_lines(self):
        blocks = parse_message("**Soft Skills**\r\n[**Mentorship**](https://example.com/m) — Free — (Article 📰)\r\n")

        assert blocks[0] == SubHeading(text="Soft Skills")
        assert blocks[1].type == "Article 📰"
