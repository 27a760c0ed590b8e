import pytest
from suggest import Costs, Options, Result, Suggest, query_against
from suggest.ranker import score_candidate


@pytest.mark.parametrize(
    "query, commands, expected",
    [
        ("kittens", ["tests", "sitting", "mittens"], ["mittens", "sitting"]),
        ("isntall", ["help", "branch", "install"], ["install"]),
        ("Arnold Swarzeneger", ["Arnold Schwarzenegger", "skip", "list"], ["Arnold Schwarzenegger"]),
    ],
)
def test_query_against_orders_by_score(query, commands, expected):
    assert Suggest().query_against(query, commands).matches == expected


def test_query_uses_engine_commands():
    s = Suggest(commands=["tests", "sitting", "mittens"])
    assert s.query("kittens").matches == ["mittens", "sitting"]


def test_case_insensitive_match_is_sole_match_and_autocorrect():
    result = Suggest().query_against("test", ["key", "value", "Test"])
    assert result.matches == ["Test"]
    assert result.autocorrect == "Test"
    assert result.success


def test_score_sentinels():
    costs = Costs()
    assert score_candidate("test", "Test", costs) == -1
    assert score_candidate("Test", "Test", costs) == -2
    assert score_candidate("fgrep", "fgreps", costs) == 1


def test_exact_match_ranks_ahead_of_case_insensitive_and_swap():
    result = Suggest().query_against("install", ["insatll", "Install", "install"])
    assert result.matches == ["install", "Install", "insatll"]
    assert result.autocorrect == "install"


def test_ties_keep_input_order():
    result = Suggest().query_against("cat", ["cut", "bat", "cot"])
    assert result.matches == ["cut", "bat", "cot"]
    assert result.autocorrect == "cut"


def test_duplicate_candidates_are_listed_once():
    result = Suggest().query_against("cat", ["cot", "bat", "cot"])
    assert result.matches == ["cot", "bat"]


def test_nothing_within_threshold_gives_empty_result():
    result = Suggest().query_against("unique", ["key", "value", "Test"])
    assert result == Result()
    assert result.autocorrect == ""
    assert not result.success


def test_empty_candidate_list():
    result = query_against("anything", [], Costs())
    assert result.matches == [] and result.autocorrect == ""


def test_similarity_threshold_filters_matches():
    commands = ["tests", "sitting", "mittens"]
    assert Suggest(Options(similarity_minimum=1)).query_against("kittens", commands).matches == []
    assert Suggest(Options(similarity_minimum=2)).query_against("kittens", commands).matches == ["mittens"]


def test_disabled_autocorrect_still_lists_matches():
    s = Suggest(Options(autocorrect_disabled=True))
    for query, commands, expected in [
        ("test", ["test"], ["test"]),
        ("isntall", ["help", "branch", "install"], ["install"]),
        ("unique", ["key", "value", "test"], []),
    ]:
        result = s.query_against(query, commands)
        assert result.autocorrect == ""
        assert result.matches == expected


def test_repeated_queries_are_identical():
    s = Suggest(commands=["perfil", "profiel", "profile", "profil", "account"])
    first = s.query("proflie")
    second = s.query("proflie")
    assert first == second
    assert first.autocorrect == "profile"


def test_result_to_dict():
    result = Suggest().query_against("kittens", ["tests", "sitting", "mittens"])
    assert result.to_dict() == {"autocorrect": "mittens", "matches": ["mittens", "sitting"]}
