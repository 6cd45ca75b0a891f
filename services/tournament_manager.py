import random
from typing import List, Optional, Sequence

from core.logging import logger
from core.validators import ensure_valid_tournament, validate_tournament
from schemas.tournament import Match, Tournament, TournamentCreate, ValidationResult
from services.tournament_factory import create_tournament
from services.tournament_strategies import PairingStrategy, RandomPairingStrategy


class TournamentManager:
    """Main tournament manager using strategy pattern"""

    def __init__(self, pairing: str = "RANDOM", rng: Optional[random.Random] = None):
        self.pairing = pairing.upper()
        self.strategy = self._get_strategy(self.pairing, rng)

    def create_tournament(self, request: TournamentCreate) -> Tournament:
        """Build a draft and reject it with every violation if it breaks the rules"""
        tournament = create_tournament(request)
        return ensure_valid_tournament(tournament)

    def validate(self, request: TournamentCreate) -> ValidationResult:
        """Report what a draft built from the request would violate"""
        return validate_tournament(create_tournament(request))

    def generate_round(self, participants: Sequence[str]) -> List[Match]:
        """Pair the given participant snapshot for the next round"""
        matches = self.strategy.pair(participants)
        logger.info(f"Generated {len(matches)} matches for {len(participants)} participants ({self.pairing})")
        return matches

    def _get_strategy(self, pairing: str, rng: Optional[random.Random]) -> PairingStrategy:
        """Get appropriate strategy for pairing type"""
        strategies = {
            "RANDOM": RandomPairingStrategy,
        }

        if pairing not in strategies:
            logger.warning(f"Unknown pairing strategy {pairing}, falling back to RANDOM")
            self.pairing = "RANDOM"

        return strategies.get(pairing, RandomPairingStrategy)(rng)
