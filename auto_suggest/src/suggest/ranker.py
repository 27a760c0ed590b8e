from __future__ import annotations
import dataclasses
import logging
from typing import Dict, List, Sequence

from . import config as CFG
from .distance import calculate_similarity
from .models import Costs, Result

log = logging.getLogger(__name__)


def score_candidate(query: str, candidate: str, costs: Costs) -> int:
    """
    Distance with exact-match overrides applied.
    The case-sensitive check runs last so it wins over the case-insensitive one.
    """
    score = calculate_similarity(query, candidate, costs)
    if query.lower() == candidate.lower():
        score = CFG.CASE_INSENSITIVE_MATCH
    if query == candidate:
        score = CFG.EXACT_MATCH
    return score


def query_against(query: str, candidates: Sequence[str], costs: Costs) -> Result:
    """
    Rank `candidates` against `query`.

    Returns a Result whose `matches` are every candidate scoring <= the
    similarity threshold, best first. Equal scores keep the order in which the
    candidate first appears in `candidates`; a repeated candidate is listed once.
    `autocorrect` is the first candidate (input order) with the lowest score,
    or "" when autocorrect is disabled or nothing matched.
    """
    scores: List[int] = [score_candidate(query, c, costs) for c in candidates]

    # candidate -> score; dict keeps first-insertion order for the tie-break
    scoreboard: Dict[str, int] = {}
    for candidate, score in zip(candidates, scores):
        if CFG.VERBOSE:
            log.debug("query=%r candidate=%r score=%d", query, candidate, score)
        if score <= costs.similarity:
            scoreboard[candidate] = score

    if not scoreboard:
        log.debug("no candidate within similarity %d for %r", costs.similarity, query)
        return Result()

    autocorrect = ""
    if not costs.autocorrect_disabled:
        best = min(scores)
        autocorrect = candidates[scores.index(best)]

    # sorted() is stable, so ties stay in first-appearance order
    matches = sorted(scoreboard, key=scoreboard.__getitem__)
    return Result(autocorrect=autocorrect, matches=matches)


def autocorrect_against(query: str, candidates: Sequence[str], costs: Costs) -> str:
    """Best single correction for `query`, ignoring autocorrect_disabled; "" if none."""
    enabled = dataclasses.replace(costs, autocorrect_disabled=False)
    result = query_against(query, candidates, enabled)
    return result.autocorrect if result.success else ""


def exact_match_against(query: str, candidates: Sequence[str]) -> str:
    """First candidate equal to `query` ignoring case, in the candidate's own casing."""
    q = query.lower()
    for candidate in candidates:
        if candidate.lower() == q:
            return candidate
    return ""
