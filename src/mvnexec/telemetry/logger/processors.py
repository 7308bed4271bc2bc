# src/mvnexec/telemetry/logger/processors.py

"""
Custom structlog processors used by the mvnexec logging setup.
"""

from typing import Any

LOG_EMOJIS = {
    "debug": "🐛",
    "info": "ℹ️",
    "warning": "⚠️",
    "error": "❌",
    "critical": "💥",
    "workspace": "📁",
    "settings": "📄",
    "execute": "🚚",
    "reports": "📊",
    "success": "✅",
    "fail": "🚫",
}

# Keys that only steer processors and must not reach the renderer.
_INTERNAL_KEYS = ("emoji_key",)


def add_emoji_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Prefixes the event with an emoji chosen by `emoji_key` or the log level."""
    key = event_dict.get("emoji_key") or event_dict.get("level", method_name)
    emoji = LOG_EMOJIS.get(str(key).lower())
    event = event_dict.get("event")
    if emoji and isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    for key in _INTERNAL_KEYS:
        event_dict.pop(key, None)
    return event_dict


# 🔼⚙️
