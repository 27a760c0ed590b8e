import os

# Edit operation weights used when an option is left unset (<= 0)
DEFAULT_COST_SWAP: int = 0
DEFAULT_COST_SUBSTITUTION: int = 2
DEFAULT_COST_INSERTION: int = 1
DEFAULT_COST_DELETION: int = 4

# Highest score a candidate may have and still count as a match
DEFAULT_SIMILARITY: int = 6

# /* ~~~ score sentinels: these beat any computed distance ~~~ */
EXACT_MATCH: int = -2              # query == candidate
CASE_INSENSITIVE_MATCH: int = -1   # query.lower() == candidate.lower()

# JSON keys understood by the options loader -> Options field
OPTION_KEYS = {
    "costswap": "cost_swap",
    "costsubstitution": "cost_substitution",
    "costinsertion": "cost_insertion",
    "costdeletion": "cost_deletion",
    "similarityminimum": "similarity_minimum",
    "autocorrectdisabled": "autocorrect_disabled",
}

# Command list served by the web handler when none is given
DEFAULT_COMMANDS = ["foo", "bar", "baz"]

DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8080

# Per-candidate score logging (set SUGGEST_VERBOSE=1 to enable)
VERBOSE = os.environ.get("SUGGEST_VERBOSE") == "1"
