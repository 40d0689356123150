"""Extraction pipeline for boilerstrip.

This module provides the pipeline stages:
- preprocess: line-break and font tag rewriting, script/style removal
- scoring: keyword/length scoring and candidate scanning
- filtering: score threshold and nested candidate collapse
- cleaner: boilerplate removal and tag stripping inside candidates
- readability: the extraction session that runs all stages
"""

from boilerstrip.services.readability import Readability, build_document, extract_article
from boilerstrip.services.scoring import ContentScorer, ScoreTable

__all__ = [
    "ContentScorer",
    "Readability",
    "ScoreTable",
    "build_document",
    "extract_article",
]
