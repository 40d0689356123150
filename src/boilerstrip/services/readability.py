"""Main-content extraction session.

Usage:
    session = Readability(html)
    container = session.parse()        # bs4 Tag holding the cleaned blocks
    result = session.extract()         # ExtractionResult with text and stats
"""

import logging

from bs4 import BeautifulSoup, FeatureNotFound, Tag
from bs4.builder import ParserRejectedMarkup

from boilerstrip.config import ExtractorConfig
from boilerstrip.exceptions import ConfigurationError, ParseInputError, generate_correlation_id
from boilerstrip.models import PLACEHOLDER_TEXT, ExtractionResult, ExtractionStats
from boilerstrip.services.cleaner import clean_candidate
from boilerstrip.services.filtering import collapse_nested_candidates, filter_by_threshold
from boilerstrip.services.preprocess import preprocess_document, remove_non_content_tags
from boilerstrip.services.scoring import ContentScorer, scan_candidates
from boilerstrip.utils import log_with_correlation, normalise_whitespace

LOGGER = logging.getLogger(__name__)


def build_document(markup: str | bytes, parser: str, correlation_id: str | None = None) -> BeautifulSoup:
    """
    Parse raw markup into a document.

    Args:
        markup: HTML string or bytes.
        parser: bs4 tree builder name.
        correlation_id: Optional correlation ID for raised errors.

    Returns:
        Parsed document.

    Raises:
        ParseInputError: If the markup is rejected by the parser.
        ConfigurationError: If the parser backend is not installed.
    """
    try:
        return BeautifulSoup(markup, parser)
    except FeatureNotFound as e:
        raise ConfigurationError(
            f"Parser backend {parser!r} is not installed",
            setting="parser",
            correlation_id=correlation_id,
            context={"value": parser},
        ) from e
    except ParserRejectedMarkup as e:
        raise ParseInputError(
            f"Could not parse input markup: {e}",
            input_type=type(markup).__name__,
            correlation_id=correlation_id,
        ) from e


class Readability:
    """
    One extraction session over one document.

    Accepts raw markup (str or bytes) or an already parsed BeautifulSoup
    document. The document is mutated by parse(); a session built from raw
    markup re-parses it on every call, a session built from a document works
    on that document as it stands.
    """

    def __init__(self, source: str | bytes | BeautifulSoup, config: ExtractorConfig | None = None) -> None:
        if isinstance(source, BeautifulSoup):
            self._markup: str | bytes | None = None
            self._doc: BeautifulSoup | None = source
        elif isinstance(source, str | bytes):
            self._markup = source
            self._doc = None
        else:
            raise ParseInputError(
                f"Expected HTML markup or a BeautifulSoup document, got {type(source).__name__}",
                input_type=type(source).__name__,
            )

        self.config = config or ExtractorConfig()
        self._scorer = ContentScorer(legacy_word_count=self.config.legacy_word_count)
        self.candidates: list[Tag] = []
        self.stats = ExtractionStats()
        self.correlation_id: str | None = None

    @property
    def highest_score(self) -> int:
        """Highest content score seen during the last parse()."""
        return self._scorer.highest_score

    @property
    def malformed_content(self) -> bool:
        return self.stats.malformed_content

    def score_of(self, node: Tag) -> int:
        """Content score attached to node during the last parse(), 0 if none."""
        return self._scorer.scores.get(node)

    def _document(self) -> BeautifulSoup:
        if self._markup is not None:
            return build_document(self._markup, self.config.parser, self.correlation_id)
        assert self._doc is not None
        return self._doc

    def parse(self) -> Tag:
        """
        Extract the main content of the document.

        Never fails for content reasons: when nothing qualifies, a container
        holding PLACEHOLDER_TEXT is returned.

        Returns:
            A detached <div> holding the cleaned candidate blocks.
        """
        self.correlation_id = generate_correlation_id()
        self._scorer.reset()
        self.stats = ExtractionStats()

        soup = preprocess_document(self._document(), self.config.parser)

        scan = scan_candidates(soup, self._scorer)
        candidates = scan.candidates
        self.stats.paragraphs = scan.paragraphs
        self.stats.malformed_content = scan.malformed_content
        self.stats.highest_score = self._scorer.highest_score
        self.stats.candidates_scanned = len(candidates)

        remove_non_content_tags(soup)

        filter_by_threshold(candidates, self._scorer.scores, self._scorer.highest_score)
        self.stats.candidates_after_threshold = len(candidates)
        collapse_nested_candidates(candidates)
        self.stats.candidates_after_collapse = len(candidates)
        self.candidates = candidates

        log_with_correlation(
            LOGGER,
            logging.DEBUG,
            f"Candidates: {self.stats.candidates_scanned} scanned, "
            f"{self.stats.candidates_after_threshold} above threshold, "
            f"{self.stats.candidates_after_collapse} after collapse",
            self.correlation_id,
            highest_score=self.stats.highest_score,
            malformed_content=self.stats.malformed_content,
        )

        if not candidates:
            log_with_correlation(LOGGER, logging.INFO, "No content blocks found", self.correlation_id)
            placeholder = soup.new_tag("div")
            placeholder.string = PLACEHOLDER_TEXT
            return placeholder

        container = soup.new_tag("div")
        for candidate in candidates:
            clean_candidate(candidate, self.stats.malformed_content, self.config.legacy_word_count)
            container.append(candidate)

        log_with_correlation(
            LOGGER,
            logging.INFO,
            f"Extracted {len(candidates)} content blocks",
            self.correlation_id,
        )
        return container

    def extract(self) -> ExtractionResult:
        """
        Run parse() and summarise the outcome.

        Returns:
            ExtractionResult with the text, markup and statistics.
        """
        container = self.parse()
        if not self.candidates:
            return ExtractionResult(
                success=False,
                text=PLACEHOLDER_TEXT,
                html=str(container),
                stats=self.stats,
                correlation_id=self.correlation_id,
            )

        blocks = [normalise_whitespace(candidate.get_text()) for candidate in self.candidates]
        return ExtractionResult(
            success=True,
            text="\n\n".join(block for block in blocks if block),
            html=str(container),
            blocks=blocks,
            stats=self.stats,
            correlation_id=self.correlation_id,
        )


def extract_article(source: str | bytes | BeautifulSoup, config: ExtractorConfig | None = None) -> ExtractionResult:
    """
    Extract the main content of one document.

    Args:
        source: HTML markup or a parsed BeautifulSoup document.
        config: Optional extractor configuration.

    Returns:
        ExtractionResult for the document.
    """
    return Readability(source, config=config).extract()
