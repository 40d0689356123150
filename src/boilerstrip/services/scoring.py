"""Content scoring and candidate scanning.

Every paragraph (or, on pages without paragraphs, every division) adds to the
score of its parent element. The score comes from keyword matches on the
parent's class and id, plus a bonus for long paragraphs. Parents that end up
with a positive score become candidate blocks.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag

from boilerstrip.utils import attribute_text, word_count

LOGGER = logging.getLogger(__name__)

# Keyword sets are matched as case-insensitive substrings of class and id.
GOOD_KEYWORDS = (
    "article",
    "body",
    "content",
    "entry",
    "hentry",
    "post",
    "story",
    "text",
)

# Only counted once the score is already positive
SEMI_GOOD_KEYWORDS = (
    "area",
    "container",
    "inner",
    "main",
)

BAD_KEYWORDS = (
    "ad",
    "captcha",
    "classified",
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
    "toolbar",
    "tools",
    "trackback",
    "widget",
)

BAD_KEYWORD_PENALTY = 15
LONG_PARAGRAPH_WORDS = 20


def contains_node(nodes: Iterable[Tag], node: Tag) -> bool:
    """Membership test by identity (bs4 tags compare equal by content)."""
    return any(item is node for item in nodes)


class ScoreTable:
    """Content scores attached to nodes out of band, keyed by node identity."""

    def __init__(self) -> None:
        # id(node) -> (node, score); holding the node keeps its id stable
        self._entries: dict[int, tuple[Tag, int]] = {}

    def __contains__(self, node: Tag) -> bool:
        return id(node) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tag]:
        return (node for node, _ in self._entries.values())

    def attach(self, node: Tag) -> int:
        """Attach a zero score to node unless it already has one."""
        if id(node) not in self._entries:
            self._entries[id(node)] = (node, 0)
        return self.get(node)

    def get(self, node: Tag, default: int = 0) -> int:
        entry = self._entries.get(id(node))
        return entry[1] if entry is not None else default

    def set(self, node: Tag, score: int) -> None:
        self._entries[id(node)] = (node, score)

    def clear(self) -> None:
        self._entries.clear()


class ContentScorer:
    """
    Keyword and length heuristic for candidate parents.

    Keeps the highest score seen during one extraction pass; call reset()
    before reusing the scorer for another pass.
    """

    def __init__(self, legacy_word_count: bool = False) -> None:
        self.legacy_word_count = legacy_word_count
        self.scores = ScoreTable()
        self.highest_score = -1

    def reset(self) -> None:
        """Forget all scores and the running maximum."""
        self.scores.clear()
        self.highest_score = -1

    def score(self, score: int, parent: Tag, element: Tag) -> int:
        """
        Compute the updated score of parent after visiting element.

        Args:
            score: Score the parent has accumulated so far.
            parent: Parent whose class and id are matched against keywords.
            element: Child paragraph (or division) being visited.

        Returns:
            The new score for parent.
        """
        class_name = attribute_text(parent, "class")
        element_id = attribute_text(parent, "id")

        for keyword in GOOD_KEYWORDS:
            if keyword in class_name:
                score += 1
            if keyword in element_id:
                score += 1

        if score >= 1:
            for keyword in SEMI_GOOD_KEYWORDS:
                if keyword in class_name:
                    score += 1
                if keyword in element_id:
                    score += 1

        for keyword in BAD_KEYWORDS:
            if keyword in class_name:
                score -= BAD_KEYWORD_PENALTY
            if keyword in element_id:
                score -= BAD_KEYWORD_PENALTY

        if element.name and element.name.lower() == "p":
            if word_count(element.get_text(), self.legacy_word_count) > LONG_PARAGRAPH_WORDS:
                score += 1

        if score > self.highest_score:
            self.highest_score = score

        return score


@dataclass
class ScanResult:
    """Candidate blocks found by scan_candidates, in document order."""

    candidates: list[Tag] = field(default_factory=list)
    paragraphs: int = 0
    malformed_content: bool = False


def _parent_element(node: Tag) -> Tag | None:
    parent = node.parent
    if parent is None or isinstance(parent, BeautifulSoup):
        return None
    return parent


def scan_candidates(soup: BeautifulSoup, scorer: ContentScorer) -> ScanResult:
    """
    Score the parents of all paragraphs and collect the positive ones.

    Falls back to divisions when the page has no paragraphs; such pages are
    flagged as malformed content.

    Args:
        soup: Preprocessed document.
        scorer: Scorer holding the score table and running maximum.

    Returns:
        ScanResult with the candidate blocks.
    """
    result = ScanResult()

    paragraphs = soup.find_all("p")
    if not paragraphs:
        LOGGER.debug("No paragraphs found, falling back to divisions")
        paragraphs = soup.find_all("div")
        result.malformed_content = True
    result.paragraphs = len(paragraphs)

    for node in paragraphs:
        parent = _parent_element(node)
        if parent is None:
            continue

        current = scorer.scores.attach(parent)
        updated = scorer.score(current, parent, node)
        scorer.scores.set(parent, updated)

        if updated > 0 and not contains_node(result.candidates, parent):
            result.candidates.append(parent)

    LOGGER.debug(
        f"Scanned {result.paragraphs} elements, {len(result.candidates)} candidates, "
        f"highest score {scorer.highest_score}"
    )
    return result
