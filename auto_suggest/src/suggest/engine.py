# suggest/engine.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .models import Costs, Options, Result
from .distance import calculate_similarity
from . import ranker

log = logging.getLogger(__name__)


class Suggest:
    """
    Thin orchestration layer that glues together:
      - tuning options (Options -> resolved Costs),
      - a list of known commands,
      - the distance/ranking pipeline (ranker.query_against).

    Public API (used by CLI/Flask):
      * calculate_similarity(query, candidate): raw weighted distance
      * query(q) / query_against(q, commands): ranked Result
      * autocorrect(q) / autocorrect_against(q, commands): best pick or ""
      * exact_match(q) / exact_match_against(q, commands): case-insensitive lookup

    Options are resolved on every call from `self.options`, so callers may
    swap or edit them between calls; resolving never writes back.
    """

    # ------------- lifecycle -------------

    def __init__(self, options: Optional[Options] = None, commands: Optional[Iterable[str]] = None) -> None:
        self.options: Options = options if options is not None else Options()
        self.commands: List[str] = list(commands) if commands is not None else []

    def __repr__(self) -> str:
        return f"Suggest(options={self.options!r}, commands={len(self.commands)})"

    @property
    def costs(self) -> Costs:
        return self.options.resolve()

    # ------------- scoring -------------

    def calculate_similarity(self, query: str, candidate: str) -> int:
        return calculate_similarity(query, candidate, self.costs)

    # ------------- query -------------

    # /* ~~~ Rank the known commands for a user query ~~~ */
    def query(self, query: str) -> Result:
        return self.query_against(query, self.commands)

    def query_against(self, query: str, commands: Sequence[str]) -> Result:
        result = ranker.query_against(query, commands, self.costs)
        log.info("query %r: %d match(es), autocorrect=%r", query, len(result.matches), result.autocorrect)
        return result

    # ------------- autocorrect -------------

    def autocorrect(self, query: str) -> str:
        return self.autocorrect_against(query, self.commands)

    def autocorrect_against(self, query: str, commands: Sequence[str]) -> str:
        """Always picks a correction, even when options disable autocorrect."""
        return ranker.autocorrect_against(query, commands, self.costs)

    # ------------- exact lookup -------------

    def exact_match(self, query: str) -> str:
        return self.exact_match_against(query, self.commands)

    def exact_match_against(self, query: str, commands: Sequence[str]) -> str:
        return ranker.exact_match_against(query, commands)
