from __future__ import annotations
from .models import Costs


def calculate_similarity(query: str, candidate: str, costs: Costs) -> int:
    """
    /* ~~~ Weighted Damerau-Levenshtein (adjacent swaps only) ~~~ */
    Cost of turning `query` into `candidate`. Lower is more similar.

    Three rolling rows are kept:
      prev2 -> row i-2 (needed by the swap rule)
      prev  -> row i-1
      cur   -> row i
    Row 0 is j * insertion; column 0 of row i is i * deletion.
    """
    n = len(candidate)
    prev2 = [0] * (n + 1)
    prev = [j * costs.insertion for j in range(n + 1)]
    cur = [0] * (n + 1)

    for i, qc in enumerate(query):
        cur[0] = (i + 1) * costs.deletion

        for j, cc in enumerate(candidate):
            # substitution (free when the characters match)
            best = prev[j] if qc == cc else prev[j] + costs.substitution

            # swap: the two preceding chars are transposed in candidate
            if i > 0 and j > 0 and query[i - 1] == cc and qc == candidate[j - 1]:
                best = min(best, prev2[j - 1] + costs.swap)

            # deletion from the query
            best = min(best, prev[j + 1] + costs.deletion)

            # insertion into the query
            best = min(best, cur[j] + costs.insertion)

            cur[j + 1] = best

        prev2, prev, cur = prev, cur, prev2

    return prev[n]
