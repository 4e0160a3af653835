"""
Inbound request envelope with validation checks and field accessors.

The envelope is read-only once parsed; every method here is a pure read.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union

from pydantic import Field, ValidationError

from echo_skill.errors import RequestParseError, SlotNotFoundError
from echo_skill.models.base import InboundModel
from echo_skill.models.request import Context, RequestBody, Session, Slot
from echo_skill.models.types import RequestType

logger = logging.getLogger("echo_skill.request")

TIMESTAMP_FORMATS = ("%Y-%m-%dT%H:%M:%SZ", "%Y-%m-%dT%H:%M:%S.%fZ")
TIMESTAMP_TOLERANCE = timedelta(seconds=150)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse a platform timestamp as UTC. Returns None if malformed."""
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(value, fmt).replace(tzinfo=timezone.utc)
        except (TypeError, ValueError):
            continue
    return None


class EchoRequest(InboundModel):
    version: str = ""
    session: Session = Field(default_factory=Session)
    request: RequestBody = Field(default_factory=RequestBody)
    context: Context = Field(default_factory=Context)

    # -- validation ---------------------------------------------------------

    def verify_timestamp(self, now: Optional[datetime] = None) -> bool:
        """True iff the request was issued less than 150 seconds from `now`.

        Timestamps further than the same tolerance in the future are rejected
        too. A malformed timestamp fails the check instead of raising.
        """
        issued = parse_timestamp(self.request.timestamp)
        if issued is None:
            logger.debug("Malformed request timestamp: %r", self.request.timestamp)
            return False

        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        elapsed = now - issued
        if -TIMESTAMP_TOLERANCE < elapsed < TIMESTAMP_TOLERANCE:
            return True
        logger.debug("Request timestamp %s outside tolerance (elapsed %s)", self.request.timestamp, elapsed)
        return False

    def verify_app_id(self, app_id: str) -> bool:
        """True iff `app_id` matches the session's or the context's application id."""
        if not app_id:
            return False
        if app_id == self.session.application.application_id:
            return True
        if app_id == self.context.system.application.application_id:
            return True
        logger.debug("Application id %r does not match request", app_id)
        return False

    # -- accessors ----------------------------------------------------------

    @property
    def session_id(self) -> str:
        return self.session.session_id

    @property
    def user_id(self) -> str:
        # Context-only requests (e.g. AudioPlayer events) carry no session user.
        uid = self.session.user.user_id
        if uid == "":
            uid = self.context.system.user.user_id or ""
        return uid

    @property
    def request_type(self) -> str:
        return self.request.type

    @property
    def intent_name(self) -> str:
        """The intent name for intent requests, the request type for everything else."""
        if self.request_type == RequestType.INTENT.value:
            return self.request.intent.name
        return self.request_type

    def slot_value(self, slot_name: str) -> str:
        """Return the value of the slot keyed `slot_name`.

        Raises SlotNotFoundError if the intent carries no such slot.
        """
        slots = self.request.intent.slots
        if slot_name not in slots:
            logger.debug("Slot %r not found in intent %r", slot_name, self.request.intent.name)
            raise SlotNotFoundError(slot_name)
        return slots[slot_name].value

    def all_slots(self) -> dict[str, Slot]:
        return self.request.intent.slots

    # Supplementary fields the platform sends alongside the core ones.

    @property
    def request_id(self) -> str:
        return self.request.request_id

    @property
    def locale(self) -> str:
        return self.request.locale

    @property
    def is_new_session(self) -> bool:
        return self.session.new

    @property
    def session_attributes(self) -> dict[str, Any]:
        return self.session.attributes

    @property
    def access_token(self) -> str:
        token = self.session.user.access_token
        if not token:
            token = self.context.system.user.access_token
        return token or ""

    @property
    def device_id(self) -> str:
        return self.context.system.device.device_id or ""

    @property
    def consent_token(self) -> str:
        return self.context.system.user.permissions.consent_token or ""

    @property
    def api_endpoint(self) -> str:
        return self.context.system.api_endpoint or ""

    @property
    def api_access_token(self) -> str:
        return self.context.system.api_access_token or ""


def parse_request(raw: Union[dict[str, Any], str, bytes]) -> EchoRequest:
    """Parse an inbound request from a decoded dict or raw JSON text."""
    try:
        if isinstance(raw, (str, bytes, bytearray)):
            return EchoRequest.model_validate_json(raw)
        return EchoRequest.model_validate(raw)
    except ValidationError as e:
        raise RequestParseError(f"Invalid request envelope: {e.error_count()} error(s)",
                                {"errors": e.errors(include_url=False)}) from e
