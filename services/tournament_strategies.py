from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
import random

from core.logging import logger
from schemas.tournament import Match
from services.tournament_factory import new_id


class PairingStrategy(ABC):
    """Abstract base class for single-round pairing strategies"""

    @abstractmethod
    def pair(self, participants: Sequence[str]) -> List[Match]:
        """Produce one round of one-on-one matches"""
        pass


class RandomPairingStrategy(PairingStrategy):
    """Random draw: shuffle the participants, then pair neighbours"""

    def __init__(self, rng: Optional[random.Random] = None):
        # Any object with shuffle(list) works; tests pass a seeded random.Random
        self.rng = rng if rng is not None else random.SystemRandom()

    def pair(self, participants: Sequence[str]) -> List[Match]:
        """
        Shuffle a copy of the participants and pair positions (0,1), (2,3), ...

        With an odd count the last participant after the shuffle gets no match
        this round. The input sequence is left untouched.
        """
        shuffled_participants = list(participants)
        self.rng.shuffle(shuffled_participants)

        matches = []
        for i in range(0, len(shuffled_participants) - 1, 2):
            matches.append(Match(
                id=new_id(),
                player1=shuffled_participants[i],
                player2=shuffled_participants[i + 1],
            ))

        if len(shuffled_participants) % 2 == 1:
            logger.debug(f"Odd participant count, {shuffled_participants[-1]} sits out this round")

        return matches


def generate_matches(participants: Sequence[str], rng: Optional[random.Random] = None) -> List[Match]:
    """Randomly pair participants for a single round"""
    return RandomPairingStrategy(rng).pair(participants)
