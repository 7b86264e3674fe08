from replaydeck.parsers.event_extractor import EventExtractor
from replaydeck.parsers.log_patterns import LogPattern, build_patterns, find_card_names
from replaydeck.parsers.replay_file import load_replay_file, load_replay_payload, parse_plays

__all__ = [
    "EventExtractor",
    "LogPattern",
    "build_patterns",
    "find_card_names",
    "load_replay_file",
    "load_replay_payload",
    "parse_plays",
]
