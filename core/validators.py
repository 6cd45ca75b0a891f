from typing import List

from core.config import Settings, settings as default_settings
from core.exceptions import TournamentValidationFailed
from core.logging import logger
from schemas.tournament import Tournament, ValidationCode, ValidationIssue, ValidationResult


def validate_tournament_name(name: str, max_length: int) -> List[ValidationIssue]:
    """Validate tournament name is present and not too long"""
    issues = []
    if not name or not name.strip():
        issues.append(ValidationIssue(
            field="name",
            code=ValidationCode.NAME_REQUIRED,
            message="Tournament name is required",
        ))

    # Length is measured on the raw, untrimmed name
    if name and len(name) > max_length:
        issues.append(ValidationIssue(
            field="name",
            code=ValidationCode.NAME_TOO_LONG,
            message=f"Tournament name must be less than {max_length} characters",
        ))
    return issues


def validate_participants_count(participants: List[str], min_count: int, max_count: int) -> List[ValidationIssue]:
    """Validate participants count is within tournament limits"""
    issues = []
    if len(participants) < min_count:
        issues.append(ValidationIssue(
            field="participants",
            code=ValidationCode.TOO_FEW_PARTICIPANTS,
            message=f"Tournament must have at least {min_count} participants",
        ))

    if len(participants) > max_count:
        issues.append(ValidationIssue(
            field="participants",
            code=ValidationCode.TOO_MANY_PARTICIPANTS,
            message=f"Tournament cannot have more than {max_count} participants",
        ))
    return issues


def validate_participants_unique(participants: List[str]) -> List[ValidationIssue]:
    """Validate no participant name appears twice (case-sensitive)"""
    if len(set(participants)) != len(participants):
        return [ValidationIssue(
            field="participants",
            code=ValidationCode.DUPLICATE_PARTICIPANTS,
            message="Tournament participants must be unique",
        )]
    return []


def validate_tournament(tournament: Tournament, settings: Settings = default_settings) -> ValidationResult:
    """
    Check a tournament against the structural rules and collect every violation.

    Checks never short-circuit; issues are ordered name checks first, then
    participant count, then uniqueness. The tournament is not modified.
    """
    issues = []
    issues += validate_tournament_name(tournament.name, settings.tournament_name_max_length)
    issues += validate_participants_count(
        tournament.participants,
        settings.tournament_min_participants,
        settings.tournament_max_participants,
    )
    issues += validate_participants_unique(tournament.participants)

    if issues:
        logger.debug(f"Tournament {tournament.id} failed validation: {[i.code.value for i in issues]}")

    return ValidationResult(
        is_valid=not issues,
        errors=tuple(issue.message for issue in issues),
        issues=tuple(issues),
    )


def ensure_valid_tournament(tournament: Tournament, settings: Settings = default_settings) -> Tournament:
    """Validate tournament and raise with every issue if it is invalid"""
    result = validate_tournament(tournament, settings)
    if not result.is_valid:
        raise TournamentValidationFailed(result.issues)
    return tournament
