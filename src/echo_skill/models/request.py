"""
Inbound request envelope shapes.

Every field defaults to an empty value: the platform omits whatever does not
apply to a given request shape, and absence must never fail validation.
"""

from typing import Any, Optional
from pydantic import Field

from echo_skill.models.base import InboundModel


class Application(InboundModel):
    application_id: str = Field(default="", alias="applicationId")


class SessionUser(InboundModel):
    user_id: str = Field(default="", alias="userId")
    access_token: Optional[str] = Field(default=None, alias="accessToken")


class Session(InboundModel):
    new: bool = False
    session_id: str = Field(default="", alias="sessionId")
    application: Application = Field(default_factory=Application)
    attributes: dict[str, Any] = Field(default_factory=dict)
    user: SessionUser = Field(default_factory=SessionUser)


class Device(InboundModel):
    device_id: Optional[str] = Field(default=None, alias="deviceId")


class Permissions(InboundModel):
    consent_token: Optional[str] = Field(default=None, alias="consentToken")


class SystemUser(InboundModel):
    user_id: Optional[str] = Field(default=None, alias="userId")
    access_token: Optional[str] = Field(default=None, alias="accessToken")
    permissions: Permissions = Field(default_factory=Permissions)


class System(InboundModel):
    api_endpoint: Optional[str] = Field(default=None, alias="apiEndpoint")
    api_access_token: Optional[str] = Field(default=None, alias="apiAccessToken")
    device: Device = Field(default_factory=Device)
    application: Application = Field(default_factory=Application)
    user: SystemUser = Field(default_factory=SystemUser)


class Context(InboundModel):
    system: System = Field(default_factory=System, alias="System")  # capitalised on the wire


class Slot(InboundModel):
    name: str = ""
    value: str = ""
    confirmation_status: Optional[str] = Field(default=None, alias="confirmationStatus")


class Intent(InboundModel):
    name: str = ""
    # Keyed by slot name; the embedded Slot.name is not guaranteed to agree.
    slots: dict[str, Slot] = Field(default_factory=dict)
    confirmation_status: Optional[str] = Field(default=None, alias="confirmationStatus")


class RequestBody(InboundModel):
    type: str = ""  # open set, see RequestType for the known tags
    request_id: str = Field(default="", alias="requestId")
    timestamp: str = ""
    intent: Intent = Field(default_factory=Intent)
    reason: Optional[str] = None           # SessionEndedRequest only
    dialog_state: Optional[str] = Field(default=None, alias="dialogState")
    message: dict[str, Any] = Field(default_factory=dict)
    locale: str = ""
