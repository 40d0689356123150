"""Document preprocessing before candidate scanning.

Pages that fake paragraphs with line breaks are rewritten so that every
break becomes an empty paragraph, and presentational font tags are unwrapped.
Both rewrites run on the serialised markup, so they tolerate markup that is
not well formed.
"""

import logging
import re

from bs4 import BeautifulSoup, Tag

LOGGER = logging.getLogger(__name__)

# Empty paragraph that stands in for a line break
PARAGRAPH_BREAK = "<p />"

BREAK_TAGS_PATTERN = re.compile(r" *<br\b[^>]*>\s*", re.IGNORECASE)
FONT_TAGS_PATTERN = re.compile(r"</?font\b[^>]*>", re.IGNORECASE)

# Elements that never carry article text
NON_CONTENT_TAGS = ("script", "link", "style")

# Fragments are always parsed with html.parser; the lxml and html5lib
# builders wrap fragments in html/body (lxml also wraps bare text in <p>).
FRAGMENT_PARSER = "html.parser"


def convert_breaks_to_paragraphs(markup: str) -> str:
    """Replace every <br> (and the whitespace after it) with an empty paragraph."""
    return BREAK_TAGS_PATTERN.sub("\n" + PARAGRAPH_BREAK, markup)


def remove_font_tags(markup: str) -> str:
    """Drop <font> start and end tags, keeping their content."""
    return FONT_TAGS_PATTERN.sub("", markup)


def set_inner_markup(tag: Tag, markup: str, parser: str = FRAGMENT_PARSER) -> None:
    """
    Replace the children of a tag with the nodes parsed from markup.

    When tag is a BeautifulSoup document the whole document is rebuilt in
    place, so callers holding the document object see the rewritten tree.

    Args:
        tag: Element or document whose content is replaced.
        markup: New inner markup.
        parser: bs4 tree builder used to parse markup.
    """
    fragment = BeautifulSoup(markup, parser)
    tag.clear()
    for child in list(fragment.contents):
        tag.append(child.extract())


def preprocess_document(soup: BeautifulSoup, parser: str = FRAGMENT_PARSER) -> BeautifulSoup:
    """
    Rewrite line breaks and font tags across the whole document.

    Args:
        soup: Parsed document, rewritten in place.
        parser: bs4 tree builder used to re-parse the rewritten markup.

    Returns:
        The same document object.
    """
    original = str(soup)
    rewritten = remove_font_tags(convert_breaks_to_paragraphs(original))
    if rewritten != original:
        LOGGER.debug("Rewrote line breaks and font tags, re-parsing document")
        set_inner_markup(soup, rewritten, parser)
    return soup


def remove_non_content_tags(soup: BeautifulSoup) -> int:
    """
    Detach every script, link and style element from the document.

    Args:
        soup: Parsed document to modify in-place.

    Returns:
        Number of elements removed.
    """
    removed = 0
    for tag_name in NON_CONTENT_TAGS:
        for element in soup.find_all(tag_name):
            element.extract()
            removed += 1
    if removed:
        LOGGER.debug(f"Removed {removed} script/link/style elements")
    return removed
