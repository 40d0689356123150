"""Cleanup of surviving candidate blocks.

Each candidate loses inline styles, duplicate line breaks, boilerplate
divisions, forms, embeds, headings and short tables, and finally all of its
tags, so that only text remains.
"""

import logging
import re

from bs4 import Tag

from boilerstrip.services.preprocess import set_inner_markup
from boilerstrip.utils import attribute_text, word_count

LOGGER = logging.getLogger(__name__)

STRIPPED_ATTRIBUTES = ("style", "function")

DUPLICATE_BREAKS_PATTERN = re.compile(r"(?:<br\b[^>]*>\s*){2,}", re.IGNORECASE)
TAG_MARK_PATTERN = re.compile(r"<[a-zA-Z/][^>]*>")

# Division blacklist: the scorer's BAD_KEYWORDS plus clear, tag and tweetback
DIV_BLACKLIST_KEYWORDS = (
    "ad",
    "captcha",
    "classified",
    "clear",
    "comment",
    "footer",
    "footnote",
    "leftcolumn",
    "listing",
    "menu",
    "meta",
    "module",
    "nav",
    "navbar",
    "rightcolumn",
    "sidebar",
    "sponsor",
    "tab",
    "tag",
    "toolbar",
    "tools",
    "trackback",
    "tweetback",
    "widget",
)

DIV_MIN_WORDS = 25

# No element reaches this count, so these tags are always removed
ALWAYS_REMOVE = 1_000_000

MIN_WORDS_BY_TAG = (
    ("form", ALWAYS_REMOVE),
    ("object", ALWAYS_REMOVE),
    ("table", 250),
    ("h1", ALWAYS_REMOVE),
    ("h2", ALWAYS_REMOVE),
    ("iframe", ALWAYS_REMOVE),
)


def remove_element_styles(element: Tag) -> None:
    """Strip style and function attributes from element and all descendants."""
    for node in [element, *element.find_all(True)]:
        for attribute in STRIPPED_ATTRIBUTES:
            if attribute in node.attrs:
                del node[attribute]


def collapse_breaks(element: Tag) -> None:
    """Collapse runs of two or more <br> elements into one."""
    markup = element.decode_contents()
    collapsed = DUPLICATE_BREAKS_PATTERN.sub("<br />", markup)
    if collapsed != markup:
        set_inner_markup(element, collapsed)


def _child_counts(division: Tag) -> dict[str, int]:
    return {name: len(division.find_all(name, recursive=False)) for name in ("p", "img", "li", "a", "embed")}


def _is_blacklisted(division: Tag) -> bool:
    element_id = attribute_text(division, "id")
    class_name = attribute_text(division, "class")
    for keyword in DIV_BLACKLIST_KEYWORDS:
        if keyword in element_id or keyword in class_name:
            return True
    return False


def remove_non_content_divs(element: Tag, legacy_word_count: bool = False) -> int:
    """
    Remove boilerplate divisions below element.

    A division goes when it holds only text, when its id or class hits the
    blacklist, or when it is short and dominated by links, images, list
    items or embeds rather than paragraphs.

    Args:
        element: Candidate block to clean in-place.
        legacy_word_count: Passed through to word counting.

    Returns:
        Number of divisions removed.
    """
    removed = 0
    for division in reversed(element.find_all("div")):
        counts = _child_counts(division)
        p, img, li, a, embed = counts["p"], counts["img"], counts["li"], counts["a"], counts["embed"]

        if not any(counts.values()):
            if not any(isinstance(child, Tag) for child in division.contents):
                division.extract()
                removed += 1
                continue
        elif _is_blacklisted(division):
            division.extract()
            removed += 1
            continue

        if word_count(division.get_text(), legacy_word_count) < DIV_MIN_WORDS:
            if img > p or li > p or a > p or p == 0 or embed > 0:
                division.extract()
                removed += 1

    if removed:
        LOGGER.debug(f"Removed {removed} non-content divisions")
    return removed


def remove_elements_by_min_words(
    element: Tag, tag_name: str, min_words: int, legacy_word_count: bool = False
) -> int:
    """
    Remove descendants named tag_name that have fewer than min_words words.

    Args:
        element: Candidate block to clean in-place.
        tag_name: Tag to look for.
        min_words: Elements with fewer words are removed.
        legacy_word_count: Passed through to word counting.

    Returns:
        Number of elements removed.
    """
    removed = 0
    for target in reversed(element.find_all(tag_name)):
        if word_count(target.get_text(), legacy_word_count) < min_words:
            target.extract()
            removed += 1
    return removed


def strip_tags(markup: str) -> str:
    """Remove every start and end tag from markup, keeping the text between them."""
    stripped = TAG_MARK_PATTERN.sub("", markup)
    # Removing a tag can join "<" and ">" from around it into a new tag mark
    while stripped != markup:
        markup = stripped
        stripped = TAG_MARK_PATTERN.sub("", markup)
    return stripped


def strip_all_tags(element: Tag) -> None:
    """Replace the content of element with its tag-stripped markup."""
    set_inner_markup(element, strip_tags(element.decode_contents()))


def clean_candidate(element: Tag, malformed_content: bool = False, legacy_word_count: bool = False) -> Tag:
    """
    Run every cleanup step on a surviving candidate block.

    Args:
        element: Candidate block, cleaned in-place.
        malformed_content: Skip division removal for pages without paragraphs.
        legacy_word_count: Passed through to word counting.

    Returns:
        The same element.
    """
    remove_element_styles(element)
    collapse_breaks(element)

    if not malformed_content:
        remove_non_content_divs(element, legacy_word_count)

    for tag_name, min_words in MIN_WORDS_BY_TAG:
        removed = remove_elements_by_min_words(element, tag_name, min_words, legacy_word_count)
        if removed:
            LOGGER.debug(f"Removed {removed} <{tag_name}> elements")

    strip_all_tags(element)
    return element
