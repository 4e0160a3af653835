"""
Outbound response envelope shapes.

Optional parts are None when unset and dropped on serialization
(`exclude_none=True`); the directive list is always emitted.
"""

from typing import Any, Optional
from pydantic import Field, SerializerFunctionWrapHandler, model_serializer

from echo_skill.models.base import WireModel
from echo_skill.models.directives import Directive
from echo_skill.models.types import CanFulfillAnswer, CardType, SpeechType

PROTOCOL_VERSION = "1.0"


class Image(WireModel):
    small_image_url: Optional[str] = Field(default=None, alias="smallImageUrl")
    large_image_url: Optional[str] = Field(default=None, alias="largeImageUrl")


class OutputSpeech(WireModel):
    type: SpeechType
    text: Optional[str] = None
    ssml: Optional[str] = None


class Card(WireModel):
    type: CardType
    title: Optional[str] = None
    content: Optional[str] = None
    image: Optional[Image] = None


class Reprompt(WireModel):
    output_speech: OutputSpeech = Field(alias="outputSpeech")


class CanFulfillSlot(WireModel):
    can_understand: CanFulfillAnswer = Field(alias="canUnderstand")
    can_fulfill: CanFulfillAnswer = Field(alias="canFulfill")


class CanFulfillIntent(WireModel):
    can_fulfill: CanFulfillAnswer = Field(alias="canFulfill")
    slots: Optional[dict[str, CanFulfillSlot]] = None


class ResponseBody(WireModel):
    output_speech: Optional[OutputSpeech] = Field(default=None, alias="outputSpeech")
    card: Optional[Card] = None
    reprompt: Optional[Reprompt] = None
    should_end_session: Optional[bool] = Field(default=True, alias="shouldEndSession")
    directives: list[Directive] = Field(default_factory=list)
    can_fulfill_intent: Optional[CanFulfillIntent] = Field(default=None, alias="canFulfillIntent")


class ResponseEnvelope(WireModel):
    version: str = PROTOCOL_VERSION
    session_attributes: dict[str, Any] = Field(default_factory=dict, alias="sessionAttributes")
    response: ResponseBody = Field(default_factory=ResponseBody)

    @model_serializer(mode="wrap")
    def _omit_empty_attributes(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if not self.session_attributes:
            data.pop("sessionAttributes", None)
            data.pop("session_attributes", None)
        return data
