"""
Response directives — AudioPlayer and VideoApp interfaces.

Each directive kind has its own schema; the `type` tag selects it, so a
serialized directive list decodes back into the matching classes.
"""

from typing import Annotated, Literal, Optional, Union
from pydantic import Field

from echo_skill.models.base import WireModel
from echo_skill.models.types import ClearBehavior, PlayBehavior


class AudioStream(WireModel):
    url: str
    token: str
    offset_in_milliseconds: int = Field(default=0, alias="offsetInMilliseconds")
    expected_previous_token: Optional[str] = Field(default=None, alias="expectedPreviousToken")


class AudioItem(WireModel):
    stream: AudioStream


class PlayDirective(WireModel):
    type: Literal["AudioPlayer.Play"] = "AudioPlayer.Play"
    play_behavior: PlayBehavior = Field(alias="playBehavior")
    audio_item: AudioItem = Field(alias="audioItem")


class StopDirective(WireModel):
    type: Literal["AudioPlayer.Stop"] = "AudioPlayer.Stop"


class ClearQueueDirective(WireModel):
    type: Literal["AudioPlayer.ClearQueue"] = "AudioPlayer.ClearQueue"
    clear_behavior: ClearBehavior = Field(alias="clearBehavior")


class VideoMetadata(WireModel):
    # Both keys are sent together, even when one of them is empty.
    title: str = ""
    subtitle: str = ""


class VideoItem(WireModel):
    source: str
    metadata: Optional[VideoMetadata] = None


class LaunchDirective(WireModel):
    type: Literal["VideoApp.Launch"] = "VideoApp.Launch"
    video_item: VideoItem = Field(alias="videoItem")


Directive = Annotated[
    Union[PlayDirective, StopDirective, ClearQueueDirective, LaunchDirective],
    Field(discriminator="type"),
]
