"""
Echo skill error types — the three conditions the protocol core can surface.
"""

from typing import Any, Optional


class EchoSkillError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class SlotNotFoundError(EchoSkillError):
    def __init__(self, slot_name: str):
        super().__init__("slot_not_found", f"Slot name not found: {slot_name!r}", {"slot_name": slot_name})
        self.slot_name = slot_name


class SerializationError(EchoSkillError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("serialization_error", message, details)


class RequestParseError(EchoSkillError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("request_parse_error", message, details)
