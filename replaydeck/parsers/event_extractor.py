"""
Turns log entries into card events.

One LogEntry can report several actions (a single public line may hold
more than one "Sent ... to GY"), so every enabled pattern is applied to
its channel and every match becomes an event.
"""

from replaydeck.models.events import CardEvent, LogChannel
from replaydeck.models.replay import LogEntry
from replaydeck.parsers.log_patterns import LogPattern, find_card_names


class EventExtractor:
    """Applies a pattern list to log entries of one replay."""

    def __init__(self, patterns: list[LogPattern], system_username: str) -> None:
        """
        Args:
            patterns: Enabled patterns, applied in list order
            system_username: Username of service narration, never counted
        """
        self._patterns = patterns
        self._system_username = system_username

    def extract(self, entry: LogEntry, game_index: int) -> list[CardEvent]:
        """
        Extract card events from one log entry.

        Args:
            entry: Log entry to scan
            game_index: Game the entry belongs to

        Returns:
            Events in pattern order, then match order. Empty for system
            narration or entries without a username.
        """
        player = entry.username
        if not player or player == self._system_username:
            return []

        events: list[CardEvent] = []
        for pattern in self._patterns:
            text = entry.private_log if pattern.channel == LogChannel.PRIVATE else entry.public_log
            for card_name in find_card_names(pattern, text):
                events.append(
                    CardEvent(
                        game_index=game_index,
                        player=player,
                        card_name=card_name,
                        action=pattern.action,
                    )
                )
        return events
