"""Kinds of shareable resources."""

from enum import StrEnum


class ResourceKind(StrEnum):
    """Resource kinds protected by the sharing engine."""

    AI_ACCOUNT = "ai_account"
    AI_MODEL = "ai_model"
    AI_BOT = "ai_bot"
    PAPERLESS_INSTANCE = "paperless_instance"

    @property
    def not_found_code(self) -> str:
        """Error code returned when the resource is missing or not manageable."""
        return _NOT_FOUND_CODES[self]

    @property
    def label(self) -> str:
        """Human-readable name used in log events."""
        return _LABELS[self]

    @property
    def route_segment(self) -> str:
        """URL path segment, e.g. ``ai-bots``."""
        return self.value.replace("_", "-") + "s"


_NOT_FOUND_CODES = {
    ResourceKind.AI_ACCOUNT: "aiAccountNotFound",
    ResourceKind.AI_MODEL: "aiModelNotFound",
    ResourceKind.AI_BOT: "aiBotNotFound",
    ResourceKind.PAPERLESS_INSTANCE: "paperlessInstanceNotFound",
}

_LABELS = {
    ResourceKind.AI_ACCOUNT: "AI account",
    ResourceKind.AI_MODEL: "AI model",
    ResourceKind.AI_BOT: "AI bot",
    ResourceKind.PAPERLESS_INSTANCE: "Paperless instance",
}
