from echo_skill.models.directives import (
    AudioItem,
    AudioStream,
    ClearQueueDirective,
    Directive,
    LaunchDirective,
    PlayDirective,
    StopDirective,
    VideoItem,
    VideoMetadata,
)
from echo_skill.models.request import (
    Application,
    Context,
    Device,
    Intent,
    Permissions,
    RequestBody,
    Session,
    SessionUser,
    Slot,
    System,
    SystemUser,
)
from echo_skill.models.response import (
    PROTOCOL_VERSION,
    CanFulfillIntent,
    CanFulfillSlot,
    Card,
    Image,
    OutputSpeech,
    Reprompt,
    ResponseBody,
    ResponseEnvelope,
)
from echo_skill.models.types import (
    CanFulfillAnswer,
    CardType,
    ClearBehavior,
    PlayBehavior,
    RequestType,
    SpeechType,
)

__all__ = [
    "AudioItem",
    "AudioStream",
    "ClearQueueDirective",
    "Directive",
    "LaunchDirective",
    "PlayDirective",
    "StopDirective",
    "VideoItem",
    "VideoMetadata",
    "Application",
    "Context",
    "Device",
    "Intent",
    "Permissions",
    "RequestBody",
    "Session",
    "SessionUser",
    "Slot",
    "System",
    "SystemUser",
    "PROTOCOL_VERSION",
    "CanFulfillIntent",
    "CanFulfillSlot",
    "Card",
    "Image",
    "OutputSpeech",
    "Reprompt",
    "ResponseBody",
    "ResponseEnvelope",
    "CanFulfillAnswer",
    "CardType",
    "ClearBehavior",
    "PlayBehavior",
    "RequestType",
    "SpeechType",
]
