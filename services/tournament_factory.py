import uuid
from datetime import datetime, timezone

from core.logging import logger
from schemas.tournament import Tournament, TournamentCreate, TournamentStatus


def new_id() -> str:
    """Random 128-bit identifier, collision-free without shared state"""
    return str(uuid.uuid4())


def create_tournament(request: TournamentCreate) -> Tournament:
    """
    Build a draft tournament from a creation request.

    No rules are checked here; an empty name or participant list is accepted
    and left for the validator to report. The participants list is copied so
    the stored tournament and the caller's list never share a container.
    """
    tournament = Tournament(
        id=new_id(),
        name=request.name,
        participants=list(request.participants),
        status=TournamentStatus.DRAFT,
        created_at=datetime.now(timezone.utc),
    )
    logger.info(f"Tournament draft {tournament.id} created with {len(tournament.participants)} participants")
    return tournament
