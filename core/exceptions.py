from typing import Sequence

from fastapi import HTTPException, status

from schemas.tournament import ValidationIssue


class TournamentException(HTTPException):
    def __init__(self, detail: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class TournamentValidationFailed(TournamentException):
    def __init__(self, issues: Sequence[ValidationIssue]):
        super().__init__("Tournament validation failed")
        self.issues = list(issues)
        self.errors = [issue.message for issue in self.issues]
