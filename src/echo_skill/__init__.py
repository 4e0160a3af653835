"""
echo-skill — request/response contract for voice-assistant skills.

Parses and validates inbound skill requests and builds outbound responses,
including AudioPlayer and VideoApp directives and can-fulfill answers.
Transport, signature verification and intent routing stay with the caller.
"""

from echo_skill.request import EchoRequest, parse_request
from echo_skill.response import EchoResponse
from echo_skill.errors import EchoSkillError, SlotNotFoundError, SerializationError, RequestParseError
from echo_skill.models.types import CanFulfillAnswer, ClearBehavior, PlayBehavior, RequestType

__version__ = "0.1.0"
__all__ = [
    "EchoRequest",
    "parse_request",
    "EchoResponse",
    "EchoSkillError",
    "SlotNotFoundError",
    "SerializationError",
    "RequestParseError",
    "CanFulfillAnswer",
    "ClearBehavior",
    "PlayBehavior",
    "RequestType",
]
