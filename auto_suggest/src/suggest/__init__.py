"""
Suggest: a small command auto-correct engine.

Compares a user-entered command against a list of known commands using a
weighted edit distance (substitution, insertion, deletion and adjacent swap
each have their own cost) and returns either a ranked list of close matches,
a single autocorrect pick, or nothing when no command is similar enough.

Example Usage:
    from suggest import Suggest, Options

    suggester = Suggest(Options(similarity_minimum=6))
    suggester.commands = ["perfil", "profiel", "profile", "profil", "account"]

    result = suggester.query("proflie")
    if not result.success:
        print("No close matches")
    else:
        print("Similar matches:", result.matches)
        print("Autocorrect:", result.autocorrect)   # profile
"""

# src/suggest/__init__.py
from .models import Options, Costs, Result
from .distance import calculate_similarity
from .ranker import query_against, autocorrect_against, exact_match_against
from .options import options_from_dict, load_options, resolve_options
from .engine import Suggest

__version__ = "1.0.0"
__all__ = [
    "Suggest",
    "Options",
    "Costs",
    "Result",
    "calculate_similarity",
    "query_against",
    "autocorrect_against",
    "exact_match_against",
    "options_from_dict",
    "load_options",
    "resolve_options",
]
