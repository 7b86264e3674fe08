"""
Deck Formatter.

THIS MODULE HANDLES OUTPUT RENDERING ONLY.

It turns already-merged, already-clamped deck entries into file text.
It does not sort, merge or clamp; entries are rendered in the order given.

Readable format:
    Sangan x1
    Pot of Greed x1

YDK format:
    #created by replaydeck
    #main
    26202165
    55144522
    #extra
    !side
"""

from replaydeck.models.deck import DeckEntry
from replaydeck.services.serial_resolver import CardSerialResolver

YDK_MAIN_MARKER = "#main"
YDK_EXTRA_MARKER = "#extra"
YDK_SIDE_MARKER = "!side"


def format_readable(entries: list[DeckEntry]) -> str:
    """Format entries as "<name> x<count>" lines."""
    return "\n".join(_format_readable_line(entry) for entry in entries)


def _format_readable_line(entry: DeckEntry) -> str:
    """Format a single card line in readable format."""
    return f"{entry.name} x{entry.count}"


def format_ydk(
    entries: list[DeckEntry],
    resolver: CardSerialResolver,
    creator: str = "replaydeck",
) -> str:
    """
    Format entries as a YDK deck list.

    Every copy is its own line. Cards without a known serial are written
    as UNKNOWN so the copy count stays visible.

    Args:
        entries: Deck entries in export order
        resolver: Resolves card names to serials
        creator: Name written in the header comment

    Returns:
        YDK text ending with an empty extra and side section
    """
    lines: list[str] = [f"#created by {creator}", YDK_MAIN_MARKER]

    for entry in entries:
        serial = resolver.resolve(entry.name)
        lines.extend([serial] * entry.count)

    lines.append(YDK_EXTRA_MARKER)
    lines.append(YDK_SIDE_MARKER)

    return "\n".join(lines) + "\n"
