"""Candidate filtering: score threshold and ancestor/descendant collapse."""

import logging

from bs4 import Tag

from boilerstrip.services.scoring import ScoreTable

LOGGER = logging.getLogger(__name__)

# A candidate at or above this score is considered a strong match
STRONG_SCORE = 20


def filter_by_threshold(candidates: list[Tag], scores: ScoreTable, highest_score: int) -> list[Tag]:
    """
    Drop candidates that score too low relative to the best one.

    When no candidate reached STRONG_SCORE, everything below the highest score
    goes; otherwise everything below STRONG_SCORE goes.

    Args:
        candidates: Candidate blocks, modified in-place.
        scores: Score table filled during scanning.
        highest_score: Highest score seen during scanning.

    Returns:
        The same list.
    """
    for index in reversed(range(len(candidates))):
        score = scores.get(candidates[index])
        if highest_score < STRONG_SCORE and score < highest_score:
            del candidates[index]
        elif highest_score >= STRONG_SCORE and score < STRONG_SCORE:
            del candidates[index]
    return candidates


def has_candidate_descendant(element: Tag, candidates: list[Tag]) -> bool:
    """Return True if any element below element is itself a candidate."""
    candidate_ids = {id(candidate) for candidate in candidates if candidate is not element}
    if not candidate_ids:
        return False
    return any(id(descendant) in candidate_ids for descendant in element.find_all(True))


def collapse_nested_candidates(candidates: list[Tag]) -> list[Tag]:
    """
    Drop candidates that contain another candidate.

    The innermost candidate is the more precise match, so ancestors go.

    Args:
        candidates: Candidate blocks, modified in-place.

    Returns:
        The same list.
    """
    if len(candidates) <= 1:
        return candidates

    for index in reversed(range(len(candidates))):
        if has_candidate_descendant(candidates[index], candidates):
            del candidates[index]
    return candidates
