"""
Response builder — chained construction of the outbound envelope.

    resp = (
        EchoResponse()
        .output_speech("Hello")
        .simple_card("Greeting", "Hello")
        .end_session(False)
    )
    body = resp.to_json()

Every mutator returns the builder itself. Setters overwrite the previous
payload of their kind; directive appends preserve call order, which is the
order the platform executes them in.
"""

import logging
from typing import Any, Optional, Union

from pydantic_core import PydanticSerializationError

from echo_skill.errors import SerializationError
from echo_skill.models.directives import (
    AudioItem,
    AudioStream,
    ClearQueueDirective,
    LaunchDirective,
    PlayDirective,
    StopDirective,
    VideoItem,
    VideoMetadata,
)
from echo_skill.models.response import (
    CanFulfillIntent,
    CanFulfillSlot,
    Card,
    Image,
    OutputSpeech,
    Reprompt,
    ResponseBody,
    ResponseEnvelope,
)
from echo_skill.models.types import CanFulfillAnswer, CardType, ClearBehavior, PlayBehavior, SpeechType

logger = logging.getLogger("echo_skill.response")


class EchoResponse:
    """Single-owner builder for one response envelope."""

    def __init__(self) -> None:
        self.envelope = ResponseEnvelope()

    @property
    def body(self) -> ResponseBody:
        return self.envelope.response

    # -- speech ---------------------------------------------------------------

    def output_speech(self, text: str) -> "EchoResponse":
        self.body.output_speech = OutputSpeech(type=SpeechType.PLAIN_TEXT, text=text)
        return self

    def output_speech_ssml(self, ssml: str) -> "EchoResponse":
        self.body.output_speech = OutputSpeech(type=SpeechType.SSML, ssml=ssml)
        return self

    def reprompt(self, text: str) -> "EchoResponse":
        self.body.reprompt = Reprompt(output_speech=OutputSpeech(type=SpeechType.PLAIN_TEXT, text=text))
        return self

    def reprompt_ssml(self, ssml: str) -> "EchoResponse":
        self.body.reprompt = Reprompt(output_speech=OutputSpeech(type=SpeechType.SSML, ssml=ssml))
        return self

    # -- cards ----------------------------------------------------------------

    def card(self, title: str, content: str) -> "EchoResponse":
        return self.simple_card(title, content)

    def simple_card(self, title: str, content: str) -> "EchoResponse":
        self.body.card = Card(type=CardType.SIMPLE, title=title, content=content)
        return self

    def standard_card(
        self, title: str, content: str, small_image: str = "", large_image: str = "",
    ) -> "EchoResponse":
        card = Card(type=CardType.STANDARD, title=title, content=content)
        if small_image or large_image:
            card.image = Image(
                small_image_url=small_image or None,
                large_image_url=large_image or None,
            )
        self.body.card = card
        return self

    def link_account_card(self) -> "EchoResponse":
        self.body.card = Card(type=CardType.LINK_ACCOUNT)
        return self

    # -- session --------------------------------------------------------------

    def end_session(self, flag: bool) -> "EchoResponse":
        self.body.should_end_session = flag
        return self

    def clear_should_end_session(self) -> "EchoResponse":
        """Drop shouldEndSession from the output entirely."""
        self.body.should_end_session = None
        return self

    def session_attribute(self, key: str, value: Any) -> "EchoResponse":
        self.envelope.session_attributes[key] = value
        return self

    def session_attributes(self, attributes: dict[str, Any]) -> "EchoResponse":
        self.envelope.session_attributes = dict(attributes)
        return self

    # -- can fulfill ----------------------------------------------------------

    def can_fulfill_intent(
        self,
        answer: Union[CanFulfillAnswer, str],
        slots: Optional[dict[str, CanFulfillSlot]] = None,
    ) -> "EchoResponse":
        self.body.can_fulfill_intent = CanFulfillIntent(can_fulfill=answer, slots=slots)
        return self

    def can_fulfill_slot(
        self,
        slot_name: str,
        can_understand: Union[CanFulfillAnswer, str],
        can_fulfill: Union[CanFulfillAnswer, str],
    ) -> "EchoResponse":
        """Record a per-slot answer. Call can_fulfill_intent() first."""
        payload = self.body.can_fulfill_intent
        if payload is None:
            payload = self.body.can_fulfill_intent = CanFulfillIntent(can_fulfill=CanFulfillAnswer.NO)
        if payload.slots is None:
            payload.slots = {}
        payload.slots[slot_name] = CanFulfillSlot(can_understand=can_understand, can_fulfill=can_fulfill)
        return self

    # -- AudioPlayer interface ------------------------------------------------

    def audio_player_play(
        self,
        behavior: Union[PlayBehavior, str],
        stream_url: str,
        token: str,
        offset_ms: int = 0,
        expected_previous_token: Optional[str] = None,
    ) -> "EchoResponse":
        stream = AudioStream(
            url=stream_url,
            token=token,
            offset_in_milliseconds=offset_ms,
            expected_previous_token=expected_previous_token,
        )
        self.body.directives.append(
            PlayDirective(play_behavior=behavior, audio_item=AudioItem(stream=stream))
        )
        return self

    def audio_player_stop(self) -> "EchoResponse":
        self.body.directives.append(StopDirective())
        return self

    def audio_player_clear_queue(self, behavior: Union[ClearBehavior, str]) -> "EchoResponse":
        self.body.directives.append(ClearQueueDirective(clear_behavior=behavior))
        return self

    # -- VideoApp interface ---------------------------------------------------

    def video_app_launch(self, stream_url: str, title: str = "", subtitle: str = "") -> "EchoResponse":
        item = VideoItem(source=stream_url)
        if title or subtitle:
            item.metadata = VideoMetadata(title=title, subtitle=subtitle)
        self.body.directives.append(LaunchDirective(video_item=item))
        return self

    # -- output ---------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Render the envelope as a wire-shaped dict."""
        try:
            return self.envelope.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            logger.error(f"Response serialization failed: {e}")
            raise SerializationError(f"Failed to serialize response: {e}") from e

    def to_json(self) -> str:
        """Render the envelope as JSON text ready for the transport."""
        try:
            return self.envelope.model_dump_json(by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            logger.error(f"Response serialization failed: {e}")
            raise SerializationError(f"Failed to serialize response: {e}") from e

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"EchoResponse(should_end_session={self.body.should_end_session!r}, directives={len(self.body.directives)})"
