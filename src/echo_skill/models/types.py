"""
Closed vocabularies of the skill protocol.
"""

from enum import Enum


class RequestType(str, Enum):
    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"
    CAN_FULFILL_INTENT = "CanFulfillIntentRequest"
    PLAYBACK_STARTED = "AudioPlayer.PlaybackStarted"
    PLAYBACK_FINISHED = "AudioPlayer.PlaybackFinished"
    PLAYBACK_STOPPED = "AudioPlayer.PlaybackStopped"
    PLAYBACK_NEARLY_FINISHED = "AudioPlayer.PlaybackNearlyFinished"
    PLAYBACK_FAILED = "AudioPlayer.PlaybackFailed"
    SYSTEM_EXCEPTION = "System.ExceptionEncountered"


class SpeechType(str, Enum):
    PLAIN_TEXT = "PlainText"
    SSML = "SSML"


class CardType(str, Enum):
    SIMPLE = "Simple"
    STANDARD = "Standard"
    LINK_ACCOUNT = "LinkAccount"


class PlayBehavior(str, Enum):
    REPLACE_ALL = "REPLACE_ALL"
    ENQUEUE = "ENQUEUE"
    REPLACE_ENQUEUED = "REPLACE_ENQUEUED"


class ClearBehavior(str, Enum):
    CLEAR_ENQUEUED = "CLEAR_ENQUEUED"
    CLEAR_ALL = "CLEAR_ALL"


class CanFulfillAnswer(str, Enum):
    YES = "YES"
    NO = "NO"
    MAYBE = "MAYBE"
