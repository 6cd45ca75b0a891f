from fastapi import APIRouter, Depends
from typing import List
from core.config import settings
from schemas.tournament import (
    Match, MatchesRequest, Tournament, TournamentCreate, ValidationResult
)
from services.tournament_manager import TournamentManager

router = APIRouter(prefix="/tournaments", tags=["Tournaments"])


def get_tournament_manager() -> TournamentManager:
    return TournamentManager(pairing=settings.pairing_strategy)


@router.post("/", response_model=Tournament)
async def create_new_tournament(
    tournament: TournamentCreate,
    manager: TournamentManager = Depends(get_tournament_manager)
):
    """Create a draft tournament; invalid drafts are rejected with all errors"""
    return manager.create_tournament(tournament)


@router.post("/validate", response_model=ValidationResult)
async def validate_tournament_request(
    tournament: TournamentCreate,
    manager: TournamentManager = Depends(get_tournament_manager)
):
    """Validate a tournament without rejecting it"""
    return manager.validate(tournament)


@router.post("/matches", response_model=List[Match])
async def generate_round_matches(
    request: MatchesRequest,
    manager: TournamentManager = Depends(get_tournament_manager)
):
    """Generate one randomly paired round from a participant snapshot"""
    return manager.generate_round(request.participants)
