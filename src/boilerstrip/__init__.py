"""Main article content extraction from arbitrary HTML."""

from boilerstrip.config import ExtractorConfig, load_extractor_config
from boilerstrip.exceptions import BoilerstripError, ConfigurationError, ParseInputError
from boilerstrip.models import PLACEHOLDER_TEXT, ExtractionResult, ExtractionStats
from boilerstrip.services import Readability, extract_article

__version__ = "2026.1.0"

__all__ = [
    "PLACEHOLDER_TEXT",
    "BoilerstripError",
    "ConfigurationError",
    "ExtractionResult",
    "ExtractionStats",
    "ExtractorConfig",
    "ParseInputError",
    "Readability",
    "extract_article",
    "load_extractor_config",
]
