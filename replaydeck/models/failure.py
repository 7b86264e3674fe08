"""
Failure classification for deck reconstruction.

Nothing in the reconstruction core terminates the run. Problems are
classified here and either raised as KnownError at the input boundary
(unreadable replay or legality file) or collected into an ExportReport
so the caller sees every file that was and was not written.

Outcome types:
- Success: every requested file was written
- NothingToExport: the replay held no usable card events
- PartialFailure: some files could not be written
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input failures
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    MALFORMED_RECORD = "malformed_record"

    # Reconstruction gaps (reported, never fatal)
    UNRESOLVED_SERIAL = "unresolved_serial"
    NO_GAME_BOUNDARY = "no_game_boundary"
    EMPTY_RESULT = "empty_result"

    # Output failures
    WRITE_FAILED = "write_failed"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    NOTHING_TO_EXPORT = "nothing_to_export"
    PARTIAL_FAILURE = "partial_failure"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="What went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )
    player: str | None = Field(
        default=None,
        description="Player whose output was affected, if any",
    )
    path: Path | None = Field(
        default=None,
        description="File that was affected, if any",
    )


class ExportReport(BaseModel):
    """Everything a reconstruction run produced or failed to produce."""

    outcome: OutcomeType = OutcomeType.SUCCESS
    written: list[Path] = Field(default_factory=list)
    failures: list[FailureDetail] = Field(default_factory=list)
    unresolved_cards: list[str] = Field(
        default_factory=list,
        description="Card names exported with the UNKNOWN serial",
    )

    @property
    def nothing_to_export(self) -> bool:
        """True if the replay produced no deck to write."""
        return self.outcome == OutcomeType.NOTHING_TO_EXPORT

    @property
    def ok(self) -> bool:
        """True unless some file failed to write."""
        return not self.failures

    def add_failure(self, failure: FailureDetail) -> None:
        """Record a failed file and downgrade the outcome."""
        self.failures.append(failure)
        self.outcome = OutcomeType.PARTIAL_FAILURE


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_failure(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class ExportError(KnownError):
    """
    A single output file could not be written.

    Fatal for that file only. The exporter records it and moves on
    to the remaining files.
    """

    def __init__(
        self,
        player: str,
        path: Path,
        detail: str | None = None,
    ):
        self.player = player
        self.path = path
        super().__init__(
            kind=FailureKind.WRITE_FAILED,
            message=f"Could not write deck file for {player}: {path}",
            detail=detail,
            suggestion="Check that the output directory exists and is writable.",
        )

    def to_failure(self) -> FailureDetail:
        """Convert to a FailureDetail naming the player and file."""
        failure = super().to_failure()
        return failure.model_copy(update={"player": self.player, "path": self.path})
