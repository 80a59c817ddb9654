# src/parabehat/telemetry/logger/processors.py

"""
Custom structlog processors.
"""

from structlog.typing import EventDict, WrappedLogger

LOG_EMOJIS = {
    "debug": "🐛",
    "info": "ℹ️",
    "warning": "⚠️",
    "error": "❌",
    "critical": "💥",
    "run": "🚀",
    "fail": "🚫",
    "path": "📁",
    "time": "⏱️",
    "success": "🎉",
}


def add_emoji_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefixes the event with an emoji for its level, or for an explicit `emoji_key`."""
    emoji_key = event_dict.pop("emoji_key", None)
    level = str(event_dict.get("level", method_name)).lower()
    emoji = LOG_EMOJIS.get(emoji_key) if emoji_key else LOG_EMOJIS.get(level)
    if emoji and isinstance(event_dict.get("event"), str):
        event_dict["event"] = f"{emoji} {event_dict['event']}"
    return event_dict


def remove_extra_keys_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Drops keys whose value is None so they don't clutter console output."""
    return {key: value for key, value in event_dict.items() if value is not None}

# 🔼⚙️
