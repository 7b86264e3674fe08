"""
Card Serial Resolution Service.

Maps card names seen in replay logs to card serials (the numbers a
YDK file lists). Serials come only from card metadata embedded in the
replay's own plays; there is no external card database.

INVARIANTS:
1. A name resolved to a real serial is never downgraded to UNKNOWN
2. The first real serial seen for a name wins
3. A miss looks ahead over the WHOLE replay, not just plays scanned so far
4. Names with no metadata anywhere resolve to UNKNOWN, never raise

Decks already exported before new metadata arrives keep their UNKNOWN
lines; resolution is not retroactive.
"""

import logging
from collections.abc import Sequence

from replaydeck.config import UNKNOWN_SERIAL
from replaydeck.models.replay import PlayRecord

logger = logging.getLogger(__name__)


class CardSerialResolver:
    """
    Resolves card name -> serial for one replay.

    Owned by a single reconstruction run and passed to the stages that
    need it.
    """

    def __init__(self, records: Sequence[PlayRecord] = ()) -> None:
        """
        Args:
            records: The full replay, used for look-ahead on a miss
        """
        self._records = records
        self._serials: dict[str, str] = {}
        self._backfilled = False

    def observe(self, record: PlayRecord) -> None:
        """Harvest the card metadata of a play, if it has any."""
        if record.card is not None:
            self.register(record.card.name, record.card.serial)

    def register(self, name: str, serial: str) -> None:
        """
        Record a serial for a card name.

        Replaces UNKNOWN; never replaces a real serial.
        """
        if not serial or serial == UNKNOWN_SERIAL:
            self._serials.setdefault(name, UNKNOWN_SERIAL)
            return

        current = self._serials.get(name)
        if current is None or current == UNKNOWN_SERIAL:
            self._serials[name] = serial
        elif current != serial:
            logger.debug("Ignoring second serial %s for %s (keeping %s)", serial, name, current)

    def _backfill(self) -> None:
        for record in self._records:
            self.observe(record)
        self._backfilled = True

    def resolve(self, name: str) -> str:
        """
        Resolve a card name to its serial.

        Args:
            name: Card name exactly as it appears in the log

        Returns:
            The card's serial, or UNKNOWN if the replay never revealed it
        """
        serial = self._serials.get(name)
        if serial is not None and serial != UNKNOWN_SERIAL:
            return serial

        if not self._backfilled:
            self._backfill()
            serial = self._serials.get(name)
            if serial is not None and serial != UNKNOWN_SERIAL:
                return serial

        self._serials[name] = UNKNOWN_SERIAL
        return UNKNOWN_SERIAL

    def unresolved(self) -> list[str]:
        """Names currently mapped to UNKNOWN, in first-seen order."""
        return [name for name, serial in self._serials.items() if serial == UNKNOWN_SERIAL]
