"""
Tests for ui/formatter.py - Learning Drop display formatting
"""
from learning_coach.core.response_parser import parse_message
from learning_coach.core.schemas import Citation, Heading, PlainLine, ResourceEntry, SubHeading
from learning_coach.ui.formatter import (
    format_block_markdown,
    format_error_markdown,
    format_learning_drop_markdown,
    format_resource_entry,
    format_sources_markdown,
)


class TestFormatBlocks:
    """Test block formatting"""

    def test_heading(self):
        assert format_block_markdown(Heading(text="Your Learning Drop 🚀")) == "### Your Learning Drop 🚀"

    def test_subheading(self):
        assert format_block_markdown(SubHeading(text="Hard Skills")) == "#### Hard Skills"

    def test_full_resource(self):
        entry = ResourceEntry(title="Go", url="https://go.dev", price="Free", type="Book 📚")

        assert format_resource_entry(entry) == "**[Go](https://go.dev)**  \n(Book 📚) — **Free**"

    def test_fallback_resource_shows_link_only(self):
        entry = ResourceEntry(title="Go", url="https://go.dev")

        assert format_resource_entry(entry) == "**[Go](https://go.dev)**  \n(Link)"

    def test_plain_line_verbatim(self):
        assert format_block_markdown(PlainLine(text="Go crush it.")) == "Go crush it."

    def test_full_drop(self, sample_message):
        markdown = format_learning_drop_markdown(parse_message(sample_message))

        assert markdown.startswith("Hey Sam, your next challenge awaits.\n\n### Your Learning Drop 🚀")
        assert "#### Soft Skills" in markdown
        assert "**[Kubernetes](https://example.com/k8s)**  \n(Course 🎓) — **$120.000 COP**" in markdown

    def test_empty_drop(self):
        assert format_learning_drop_markdown([]) == ""


class TestFormatSources:
    """Test citation list formatting"""

    def test_sources(self):
        sources = [
            Citation(title="go.dev", uri="https://go.dev"),
            Citation(title="", uri="https://vimeo.com/1"),
        ]

        markdown = format_sources_markdown(sources)

        assert markdown.startswith("#### Sources")
        assert "- [go.dev](https://go.dev)" in markdown
        assert "- [https://vimeo.com/1](https://vimeo.com/1)" in markdown

    def test_no_sources(self):
        assert format_sources_markdown([]) == ""


class TestFormatError:
    def test_error(self):
        assert "Please try again." in format_error_markdown("Failed. Please try again.")

    def test_no_error(self):
        assert format_error_markdown(None) == ""
