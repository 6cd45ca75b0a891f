"""
Unit tests for single-round random pairing
"""
import random

import pytest

from services.tournament_strategies import RandomPairingStrategy, generate_matches


def players(count):
    return [f"Player{i + 1}" for i in range(count)]


def paired_names(matches):
    return [name for match in matches for name in (match.player1, match.player2)]


def test_even_participants_match_count():
    """4 participants make 2 matches"""
    matches = generate_matches(["Alice", "Bob", "Charlie", "David"])

    assert len(matches) == 2
    for match in matches:
        assert match.id
        assert match.player1
        assert match.player2
        assert match.winner is None


def test_odd_participants_drop_one():
    """5 participants make 2 matches, one sits out"""
    participants = ["Alice", "Bob", "Charlie", "David", "Eve"]

    matches = generate_matches(participants)

    assert len(matches) == 2
    names = paired_names(matches)
    assert len(set(names)) == 4
    assert set(names) < set(participants)


def test_all_participants_included():
    """Every participant plays exactly once with an even count"""
    participants = ["Alice", "Bob", "Charlie", "David"]

    matches = generate_matches(participants)

    assert sorted(paired_names(matches)) == sorted(participants)


def test_unique_match_ids():
    """Match ids never repeat within a round"""
    matches = generate_matches(players(32))

    ids = [match.id for match in matches]
    assert len(set(ids)) == len(ids)


def test_match_ids_unique_across_rounds():
    """Regenerating a round yields fresh ids"""
    first = generate_matches(players(8))
    second = generate_matches(players(8))

    assert not {m.id for m in first} & {m.id for m in second}


def test_minimum_participants():
    """Two participants always meet each other"""
    for _ in range(20):
        matches = generate_matches(["Alice", "Bob"])

        assert len(matches) == 1
        assert {matches[0].player1, matches[0].player2} == {"Alice", "Bob"}


def test_no_self_pairing():
    """Nobody is paired against themselves"""
    matches = generate_matches(["Alice", "Bob", "Charlie", "David"])

    for match in matches:
        assert match.player1 != match.player2


def test_empty_participants():
    """No participants, no matches"""
    assert generate_matches([]) == []


def test_single_participant():
    """A lone participant gets no match"""
    assert generate_matches(["Alice"]) == []


def test_input_not_mutated():
    """Shuffling works on a copy"""
    participants = players(10)
    snapshot = list(participants)

    generate_matches(participants, rng=random.Random(7))

    assert participants == snapshot


def test_accepts_tuple_input():
    """Any sequence of names can be paired"""
    matches = generate_matches(("Alice", "Bob", "Charlie", "David"))

    assert len(matches) == 2


@pytest.mark.parametrize("count", range(2, 65, 2))
def test_even_counts_pair_everyone(count):
    """Even counts: n/2 matches covering everyone exactly once"""
    participants = players(count)

    matches = generate_matches(participants, rng=random.Random(count))

    assert len(matches) == count // 2
    assert sorted(paired_names(matches)) == sorted(participants)
    assert all(match.player1 != match.player2 for match in matches)


@pytest.mark.parametrize("count", range(3, 64, 2))
def test_odd_counts_leave_one_out(count):
    """Odd counts: (n-1)/2 matches, exactly one participant unpaired"""
    participants = players(count)

    matches = generate_matches(participants, rng=random.Random(count))

    assert len(matches) == (count - 1) // 2
    names = paired_names(matches)
    assert len(set(names)) == len(names) == count - 1
    assert len(set(participants) - set(names)) == 1


class TestRandomPairingStrategy:
    """Injected random source"""

    def test_same_seed_same_pairings(self):
        first = RandomPairingStrategy(random.Random(42)).pair(players(16))
        second = RandomPairingStrategy(random.Random(42)).pair(players(16))

        assert [(m.player1, m.player2) for m in first] == [(m.player1, m.player2) for m in second]
        assert {m.id for m in first}.isdisjoint({m.id for m in second})

    def test_uses_injected_shuffle(self):
        class ReverseShuffle:
            def shuffle(self, items):
                items.reverse()

        matches = RandomPairingStrategy(ReverseShuffle()).pair(["A", "B", "C", "D", "E"])

        assert [(m.player1, m.player2) for m in matches] == [("E", "D"), ("C", "B")]

    def test_default_source_is_random(self):
        strategy = RandomPairingStrategy()

        assert isinstance(strategy.rng, random.SystemRandom)

    def test_pairings_vary_between_runs(self):
        participants = players(16)

        rounds = {
            tuple((m.player1, m.player2) for m in generate_matches(participants))
            for _ in range(10)
        }

        assert len(rounds) > 1
