import math

import pytest

from nimengine.constants import Algorithm
from nimengine.search import NodeCounter, run_search, search


ALGORITHMS = [Algorithm.MINIMAX, Algorithm.ALPHABETA]


def test_full_game_from_seven_is_won_by_the_side_to_move() -> None:
    counter = NodeCounter()
    root = search(Algorithm.MINIMAX, 7, False, -math.inf, math.inf, 0, 7, counter)

    assert root.score == -1
    assert [child.score for child in root.children] == [1, 1, -1]
    # Full game tree of a 7 stone pile.
    assert counter.visits == 96


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("depth,target_depth", [(0, 0), (0, 5), (3, 7), (9, 2)])
def test_empty_pile_scores_against_the_side_to_move(algorithm: Algorithm, depth: int, target_depth: int) -> None:
    for alpha, beta in [(-math.inf, math.inf), (-1, 1), (0, 0)]:
        assert search(algorithm, 0, True, alpha, beta, depth, target_depth, NodeCounter()).score == -1
        assert search(algorithm, 0, False, alpha, beta, depth, target_depth, NodeCounter()).score == 1


def test_horizon_is_a_terminal_node() -> None:
    counter = NodeCounter()
    root = search(Algorithm.MINIMAX, 5, True, -math.inf, math.inf, 0, 0, counter)

    assert root.children == []
    assert root.score == -1
    assert counter.visits == 1


def test_small_minimax_counts() -> None:
    assert run_search(Algorithm.MINIMAX, 1, False, 1).nodes == 2
    assert run_search(Algorithm.MINIMAX, 2, False, 1).nodes == 3
    assert run_search(Algorithm.MINIMAX, 2, False, 2).nodes == 4
    assert run_search(Algorithm.MINIMAX, 3, False, 2).nodes == 7


def test_children_follow_move_size_order() -> None:
    root = run_search(Algorithm.MINIMAX, 5, False, 2).root

    assert [child.stones for child in root.children] == [4, 3, 2]
    assert all(child.is_maximizing for child in root.children)
    assert all(child.depth == 1 for child in root.children)


def test_near_empty_pile_limits_moves() -> None:
    root = run_search(Algorithm.MINIMAX, 2, False, 2).root
    assert [child.stones for child in root.children] == [1, 0]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_repeated_searches_are_identical(algorithm: Algorithm) -> None:
    first = run_search(algorithm, 9, False, 6)
    second = run_search(algorithm, 9, False, 6)

    assert first.root == second.root
    assert first.nodes == second.nodes


@pytest.mark.parametrize("stones", range(0, 11))
@pytest.mark.parametrize("target_depth", range(0, 8))
@pytest.mark.parametrize("is_maximizing", [False, True])
def test_pruning_keeps_score_and_never_adds_nodes(stones: int, target_depth: int, is_maximizing: bool) -> None:
    minimax = run_search(Algorithm.MINIMAX, stones, is_maximizing, target_depth)
    alphabeta = run_search(Algorithm.ALPHABETA, stones, is_maximizing, target_depth)

    assert alphabeta.score == minimax.score
    assert alphabeta.nodes <= minimax.nodes


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_visit_count_matches_non_pruned_tree_nodes(algorithm: Algorithm) -> None:
    result = run_search(algorithm, 8, False, 7)
    assert result.nodes == result.root.visited()


def test_alphabeta_prunes_from_seven() -> None:
    minimax = run_search(Algorithm.MINIMAX, 7, False, 7)
    alphabeta = run_search(Algorithm.ALPHABETA, 7, False, 7)

    assert alphabeta.nodes < minimax.nodes
    assert any(node.pruned for node in alphabeta.root.walk())
    assert not any(node.pruned for node in minimax.root.walk())
    assert alphabeta.root.size() > alphabeta.nodes


def test_pruned_placeholders_are_not_expanded() -> None:
    root = run_search(Algorithm.ALPHABETA, 7, False, 7).root
    for node in root.walk():
        if node.pruned:
            assert node.children == []
            assert node.score == 0


def test_root_children_are_never_pruned() -> None:
    for stones in range(1, 11):
        root = run_search(Algorithm.ALPHABETA, stones, False).root
        assert not any(child.pruned for child in root.children)


def test_negative_inputs_fail_fast() -> None:
    with pytest.raises(ValueError):
        search(Algorithm.MINIMAX, -1, False, -math.inf, math.inf, 0, 3, NodeCounter())
    with pytest.raises(ValueError):
        search(Algorithm.ALPHABETA, 3, False, -math.inf, math.inf, 0, -1, NodeCounter())


def test_run_search_defaults_to_capped_depth() -> None:
    assert run_search(Algorithm.MINIMAX, 3).target_depth == 3
    assert run_search(Algorithm.MINIMAX, 12).target_depth == 7
    assert run_search(Algorithm.MINIMAX, 12, max_depth=4).target_depth == 4


def test_caller_counter_accumulates_across_calls() -> None:
    counter = NodeCounter()
    search(Algorithm.MINIMAX, 4, False, -math.inf, math.inf, 0, 4, counter)
    assert counter.visits == 15

    search(Algorithm.MINIMAX, 1, False, -math.inf, math.inf, 0, 1, counter)
    assert counter.visits == 17
    assert run_search(Algorithm.MINIMAX, 4, False, 4).nodes == 15
