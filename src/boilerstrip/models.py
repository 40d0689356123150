"""Data models for boilerstrip."""

from pydantic import BaseModel, ConfigDict, Field

# Text of the container returned when no candidate block survives
PLACEHOLDER_TEXT = "Sorry, readability was unable to parse this page."


class ExtractionStats(BaseModel):
    """Counters collected during one extraction pass."""

    model_config = ConfigDict(extra="forbid")

    paragraphs: int = 0
    malformed_content: bool = False
    highest_score: int = -1
    candidates_scanned: int = 0
    candidates_after_threshold: int = 0
    candidates_after_collapse: int = 0


class ExtractionResult(BaseModel):
    """Result of an extraction.

    success is False only when the placeholder container was returned.
    """

    model_config = ConfigDict(extra="forbid")

    success: bool
    text: str
    html: str
    blocks: list[str] = Field(default_factory=list)  # Cleaned text per surviving candidate
    stats: ExtractionStats = Field(default_factory=ExtractionStats)
    correlation_id: str | None = None
