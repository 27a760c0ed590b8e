# src/suggest/models.py
"""
Data models for the suggest engine.

- Options: caller-facing tuning knobs. A value <= 0 means "use the default".
- Costs: the resolved, read-only record the distance and ranking code use.
- Result: what a query returns (ranked matches plus an autocorrect pick).

Resolution is an explicit step (Options.resolve) and never writes back into
the Options it reads, so one Options instance can be shared freely.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from . import config as CFG


def _or_default(value: int, default: int) -> int:
    return value if value > 0 else default


@dataclass(frozen=True, slots=True)
class Costs:
    """
    Fully resolved weights and threshold.

    Attributes
    ----------
    swap, substitution, insertion, deletion : int
        Per-operation weights. Insertion and deletion may differ, so the
        distance is not symmetric in general.
    similarity : int
        Highest score that still counts as a match.
    autocorrect_disabled : bool
        When True no autocorrect pick is produced; match filtering is unaffected.
    """
    swap: int = CFG.DEFAULT_COST_SWAP
    substitution: int = CFG.DEFAULT_COST_SUBSTITUTION
    insertion: int = CFG.DEFAULT_COST_INSERTION
    deletion: int = CFG.DEFAULT_COST_DELETION
    similarity: int = CFG.DEFAULT_SIMILARITY
    autocorrect_disabled: bool = False


@dataclass(slots=True)
class Options:
    """
    Tunable weights as supplied by a caller or a JSON config file.

    Every integer field uses 0 (or any negative value) as "unset". Call
    resolve() to get the Costs actually used for scoring.
    """
    cost_swap: int = 0
    cost_substitution: int = 0
    cost_insertion: int = 0
    cost_deletion: int = 0
    similarity_minimum: int = 0
    autocorrect_disabled: bool = False

    def resolve(self) -> Costs:
        return Costs(
            swap=_or_default(self.cost_swap, CFG.DEFAULT_COST_SWAP),
            substitution=_or_default(self.cost_substitution, CFG.DEFAULT_COST_SUBSTITUTION),
            insertion=_or_default(self.cost_insertion, CFG.DEFAULT_COST_INSERTION),
            deletion=_or_default(self.cost_deletion, CFG.DEFAULT_COST_DELETION),
            similarity=_or_default(self.similarity_minimum, CFG.DEFAULT_SIMILARITY),
            autocorrect_disabled=bool(self.autocorrect_disabled),
        )


@dataclass(frozen=True, slots=True)
class Result:
    """Ranked matches (best first) and the single best pick ("" when none)."""
    autocorrect: str = ""
    matches: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when at least one candidate cleared the similarity threshold."""
        return len(self.matches) > 0

    def to_dict(self) -> dict:
        return {"autocorrect": self.autocorrect, "matches": list(self.matches)}
