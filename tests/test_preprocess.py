"""Tests for document preprocessing."""

from bs4 import BeautifulSoup

from boilerstrip.services.preprocess import (
    convert_breaks_to_paragraphs,
    preprocess_document,
    remove_font_tags,
    remove_non_content_tags,
    set_inner_markup,
)


class TestConvertBreaksToParagraphs:
    """Tests for convert_breaks_to_paragraphs function."""

    def test_replaces_each_break(self):
        """Test that every break becomes an empty paragraph."""
        assert convert_breaks_to_paragraphs("a<br>b<br/>c<BR />d") == "a\n<p />b\n<p />c\n<p />d"

    def test_consumes_surrounding_spaces(self):
        """Test that spaces before and whitespace after a break are absorbed."""
        assert convert_breaks_to_paragraphs("a  <br>\n\t b") == "a\n<p />b"

    def test_leaves_other_tags_alone(self):
        """Test that tags starting with br are not treated as breaks."""
        assert convert_breaks_to_paragraphs("<brand>x</brand>") == "<brand>x</brand>"


class TestRemoveFontTags:
    """Tests for remove_font_tags function."""

    def test_keeps_content(self):
        """Test that font tags go and their text stays."""
        assert remove_font_tags('<font color="red">hi</font> there') == "hi there"

    def test_case_insensitive(self):
        """Test that upper-case font tags are removed."""
        assert remove_font_tags("<FONT size=2>x</FONT>") == "x"


class TestPreprocessDocument:
    """Tests for preprocess_document function."""

    def test_rewrites_in_place(self):
        """Test that the same document object holds the rewritten tree."""
        soup = BeautifulSoup('<div id="c">one<br>two<font>three</font></div>', "html.parser")

        result = preprocess_document(soup)

        assert result is soup
        assert soup.find("br") is None
        assert soup.find("font") is None
        assert len(soup.find_all("p")) == 1
        assert "three" in soup.get_text()

    def test_unchanged_markup_keeps_nodes(self):
        """Test that a document without breaks or fonts is not re-parsed."""
        soup = BeautifulSoup("<div><p>text</p></div>", "html.parser")
        paragraph = soup.p

        preprocess_document(soup)

        assert soup.p is paragraph


class TestSetInnerMarkup:
    """Tests for set_inner_markup function."""

    def test_replaces_children(self):
        """Test that the tag holds the parsed fragment afterwards."""
        soup = BeautifulSoup("<div><span>old</span></div>", "html.parser")

        set_inner_markup(soup.div, "<b>new</b> text")

        assert soup.span is None
        assert soup.b.get_text() == "new"
        assert soup.div.get_text() == "new text"

    def test_decodes_entities(self):
        """Test that escaped text is stored unescaped."""
        soup = BeautifulSoup("<div></div>", "html.parser")

        set_inner_markup(soup.div, "a &amp; b")

        assert soup.div.get_text() == "a & b"
        assert str(soup.div) == "<div>a &amp; b</div>"


class TestRemoveNonContentTags:
    """Tests for remove_non_content_tags function."""

    def test_removes_scripts_styles_and_links(self):
        """Test that script, style and link elements are detached."""
        soup = BeautifulSoup(
            '<head><link rel="stylesheet" href="a.css"><style>p {}</style></head>'
            "<body><div><script>var x = 1;</script><p>text</p></div></body>",
            "html.parser",
        )

        removed = remove_non_content_tags(soup)

        assert removed == 3
        assert soup.find(["script", "style", "link"]) is None
        assert soup.p.get_text() == "text"

    def test_nothing_to_remove(self):
        """Test that a clean document is left alone."""
        soup = BeautifulSoup("<p>text</p>", "html.parser")
        assert remove_non_content_tags(soup) == 0

    def test_counts_each_sibling_once(self):
        """Test that adjacent scripts are each detached and counted."""
        soup = BeautifulSoup("<div><script>a()</script><script>b()</script><p>text</p></div>", "html.parser")

        assert remove_non_content_tags(soup) == 2
        assert [child.name for child in soup.div.children] == ["p"]
