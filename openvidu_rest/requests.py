"""
OpenVidu REST API Request Models

Field names are the upstream wire names. Values are forwarded untouched:
OpenVidu validates them server-side.

Reference: https://docs.openvidu.io/en/stable/reference-docs/REST-API/
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class OpenViduRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class CreateSessionRequest(OpenViduRequest):
    """
    Request to initialize a session.

    Reference: POST /api/sessions
    """

    mediaMode: str | None = Field(None, description="ROUTED (default)")
    recordingMode: str | None = Field(None, description="ALWAYS or MANUAL (default)")
    customSessionId: str | None = Field(
        None, description="Session id to use instead of a generated one"
    )
    defaultOutputMode: str | None = Field(
        None, description="COMPOSED (default) or INDIVIDUAL"
    )
    defaultRecordingLayout: str | None = Field(
        None,
        description="BEST_FIT (default) or CUSTOM, only applies to COMPOSED output",
    )
    defaultCustomLayout: str | None = Field(
        None,
        description="Relative path of the custom layout, only applies to CUSTOM layout",
    )


class KurentoOptions(OpenViduRequest):
    """Per-participant Kurento media settings attached to a token."""

    videoMaxRecvBandwidth: int | None = None
    videoMinRecvBandwidth: int | None = None
    videoMaxSendBandwidth: int | None = None
    videoMinSendBandwidth: int | None = None
    allowedFilters: List[str] | None = None


class GenerateTokenRequest(OpenViduRequest):
    """
    Request to generate a token for a session.

    Reference: POST /api/tokens
    """

    session: str = Field(description="Session id the token is associated to")
    role: str | None = Field(
        None, description="SUBSCRIBER, PUBLISHER (default) or MODERATOR"
    )
    data: str | None = Field(
        None, description="Metadata attached to the token (participant info)"
    )
    kurentoOptions: KurentoOptions | None = None


class StartRecordingRequest(OpenViduRequest):
    """
    Request to start recording a session.

    Reference: POST /api/recordings/start
    """

    session: str = Field(description="Session id to record")
    name: str | None = Field(
        None, description="Name of the video file, defaults to the recording id"
    )
    outputMode: str | None = Field(
        None,
        description="COMPOSED (default) for a single grid file, INDIVIDUAL for one file per stream",
    )
    hasAudio: bool | None = Field(None, description="Record audio, default true")
    hasVideo: bool | None = Field(None, description="Record video, default true")
    recordingLayout: str | None = Field(
        None, description="Layout for COMPOSED recordings with video"
    )
    customLayout: str | None = Field(
        None, description="Relative path of the custom layout for CUSTOM layout"
    )
    resolution: str | None = Field(
        None, description='Video resolution such as "1920x1080" (100-1999 per side)'
    )
