from pydantic import BaseModel, Field
from typing import Dict, Optional, List, Tuple
from datetime import datetime
from enum import Enum


class TournamentStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"


class TournamentCreate(BaseModel):
    """Creation request. Deliberately unconstrained: rules are checked by the validator."""
    name: str = Field(..., description="Tournament name")
    participants: List[str] = Field(default_factory=list, description="Participant names, in order")

    class Config:
        frozen = True


class Tournament(BaseModel):
    # status and participants may be edited later; identity and creation time may not
    id: str = Field(..., frozen=True)
    name: str
    participants: List[str]
    status: TournamentStatus = TournamentStatus.DRAFT
    created_at: datetime = Field(..., frozen=True)


class Match(BaseModel):
    id: str
    player1: str
    player2: str
    winner: Optional[str] = None

    class Config:
        frozen = True


class ValidationCode(str, Enum):
    NAME_REQUIRED = "NAME_REQUIRED"
    NAME_TOO_LONG = "NAME_TOO_LONG"
    TOO_FEW_PARTICIPANTS = "TOO_FEW_PARTICIPANTS"
    TOO_MANY_PARTICIPANTS = "TOO_MANY_PARTICIPANTS"
    DUPLICATE_PARTICIPANTS = "DUPLICATE_PARTICIPANTS"


class ValidationIssue(BaseModel):
    field: str
    code: ValidationCode
    message: str

    class Config:
        frozen = True


class ValidationResult(BaseModel):
    is_valid: bool
    errors: Tuple[str, ...] = ()
    issues: Tuple[ValidationIssue, ...] = ()

    class Config:
        frozen = True

    def field_map(self) -> Dict[str, List[str]]:
        """Group messages by the field they concern"""
        fields: Dict[str, List[str]] = {}
        for issue in self.issues:
            fields.setdefault(issue.field, []).append(issue.message)
        return fields


class MatchesRequest(BaseModel):
    participants: List[str] = Field(default_factory=list, description="Participant snapshot for the round")
