"""
Replay record models.

These models describe one play as recorded by DuelingBook's
view-replay payload. They are UNTRUSTED input: every field the
reconstruction reads is optional, and unknown keys are ignored.
"""

from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


class LogEntry(BaseModel):
    """
    One line of narration attached to a play.

    Attributes:
        username: Acting player, or the system username for service narration
        public_log: Text shown to both players
        private_log: Text shown only to the acting player
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    username: str | None = None
    public_log: str = ""
    private_log: str = ""

    @field_validator("public_log", "private_log", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class CardMetadata(BaseModel):
    """Name and serial of a card, embedded in a play when it is revealed."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    serial: str = Field(validation_alias=AliasChoices("serial", "serial_number", "id"))

    @field_validator("serial", mode="before")
    @classmethod
    def _serial_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class PlayRecord(BaseModel):
    """
    One element of a replay.

    A play whose log is a list is a "wrapper" that groups the entries
    of a new game; a play whose log is a single entry is one action.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    log: LogEntry | list[LogEntry] | None = None
    card: CardMetadata | None = None

    @field_validator("log", mode="before")
    @classmethod
    def _drop_malformed_entries(cls, value: Any) -> Any:
        # A wrapper must keep opening its game even if some entries are junk
        if not isinstance(value, list):
            return value
        entries: list[LogEntry] = []
        for item in value:
            try:
                entries.append(LogEntry.model_validate(item))
            except ValidationError:
                continue
        return entries

    @field_validator("card", mode="wrap")
    @classmethod
    def _drop_incomplete_card(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        # Partial metadata must not cost us the log on the same play
        try:
            return handler(value)
        except ValidationError:
            return None

    @property
    def is_wrapper(self) -> bool:
        """True if this record carries a list of log entries."""
        return isinstance(self.log, list)

    def entries(self) -> list[LogEntry]:
        """Log entries of this record, in order."""
        if self.log is None:
            return []
        if isinstance(self.log, list):
            return list(self.log)
        return [self.log]
