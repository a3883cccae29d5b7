"""
OpenVidu REST API Client

Async client for the OpenVidu server REST API. Every operation performs a
single HTTP exchange and returns the parsed JSON body (GET/POST) or the
response status code (DELETE). Failures are raised as OpenViduApiError.

Reference: https://docs.openvidu.io/en/stable/reference-docs/REST-API/
"""

import base64
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Dict

import httpx
import structlog

from .errors import ErrorCode, ErrorData, OpenViduApiError, RequestInfo
from .requests import (
    CreateSessionRequest,
    GenerateTokenRequest,
    OpenViduRequest,
    StartRecordingRequest,
)
from .utils.string import parse_non_empty_string

if TYPE_CHECKING:
    from .settings import Settings

logger = structlog.get_logger(__name__)

RequestBody = Dict[str, Any] | OpenViduRequest | None

OPENVIDU_USERNAME = "OPENVIDUAPP"


def get_basic_auth(secret: str) -> str:
    token = base64.b64encode(f"{OPENVIDU_USERNAME}:{secret}".encode()).decode()
    return f"Basic {token}"


class OpenViduClient:
    """
    Async client for the OpenVidu REST API.

    Usage:
        client = OpenViduClient("https://openvidu.example.com", "MY_SECRET")
        session = await client.create_session({"customSessionId": "room-1"})
        token = await client.generate_token({"session": session["id"]})

    The handle holds no per-request state: calls may be issued concurrently.
    """

    def __init__(self, base_url: str, secret: str, timeout: float | None = None):
        """
        Initialize OpenVidu API client. No request is sent.

        Args:
            base_url: OpenVidu server URL, e.g. https://localhost:4443
            secret: OpenVidu secret, used as the Basic auth password
            timeout: Request timeout in seconds, None to wait indefinitely
        """
        self._base_url = base_url.rstrip("/")
        self._basic_auth = get_basic_auth(secret)
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: "Settings | None" = None) -> "OpenViduClient":
        if settings is None:
            from .settings import settings
        base_url = parse_non_empty_string(
            settings.OPENVIDU_URL, "OPENVIDU_URL value is required."
        )
        secret = parse_non_empty_string(
            settings.OPENVIDU_SECRET, "OPENVIDU_SECRET value is required."
        )
        return cls(base_url, secret, timeout=settings.OPENVIDU_TIMEOUT)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def basic_auth(self) -> str:
        return self._basic_auth

    def __repr__(self) -> str:
        return f"OpenViduClient(base_url={self._base_url!r})"

    def _get_url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout)

    @staticmethod
    def _serialize(data: RequestBody) -> Any:
        if isinstance(data, OpenViduRequest):
            return data.to_body()
        return data

    def _parse_json(
        self,
        response: httpx.Response,
        request: RequestInfo,
        code: ErrorCode,
        message: str,
    ) -> Any:
        """
        Return the JSON body of a 200 response.

        Raises:
            OpenViduApiError: If the status is not 200 or the body is not JSON
        """
        if response.status_code != HTTPStatus.OK:
            logger.error(
                f"OpenVidu API error: {message}",
                status_code=response.status_code,
                response_body=response.text,
                url=str(response.url),
            )
            raise OpenViduApiError(
                code, message, ErrorData(request=request, resp=response)
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error(
                f"OpenVidu API invalid response: {message}",
                response_body=response.text,
                url=str(response.url),
            )
            raise OpenViduApiError(
                code, message, ErrorData(request=request, resp=response, error=e)
            ) from e

    # ============================================================================
    # VERBS
    # ============================================================================

    async def _post(self, path: str, data: RequestBody = None) -> Any:
        body = self._serialize(data)
        request = RequestInfo(path=path, body=body)
        logger.debug("post data", path=path, body=body)

        try:
            async with self._http_client() as client:
                response = await client.post(
                    self._get_url(path),
                    headers={
                        "Authorization": self._basic_auth,
                        "Content-Type": "application/json",
                    },
                    json=body,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(
                "OpenVidu API unreachable: post data failed", path=path, error=str(e)
            )
            raise OpenViduApiError(
                ErrorCode.POST_DATA_FAILED,
                "post data failed",
                ErrorData(request=request, error=e),
            ) from e

        logger.debug("post data", path=path, status_code=response.status_code)
        return self._parse_json(
            response, request, ErrorCode.POST_DATA_FAILED, "post data failed"
        )

    async def _get(self, path: str) -> Any:
        request = RequestInfo(path=path)
        logger.debug("get data", path=path)

        try:
            async with self._http_client() as client:
                response = await client.get(
                    self._get_url(path),
                    headers={
                        "Authorization": self._basic_auth,
                        "Content-Type": "application/x-www-form-urlencoded",
                    },
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(
                "OpenVidu API unreachable: get data failed", path=path, error=str(e)
            )
            raise OpenViduApiError(
                ErrorCode.GET_DATA_FAILED,
                "get data failed",
                ErrorData(request=request, error=e),
            ) from e

        logger.debug("get data", path=path, status_code=response.status_code)
        return self._parse_json(
            response, request, ErrorCode.GET_DATA_FAILED, "get data failed"
        )

    async def _delete(self, path: str) -> int:
        """
        Send a DELETE and return the response status code, whatever it is.

        Raises:
            OpenViduApiError: Only when no response was received
        """
        request = RequestInfo(path=path)
        logger.debug("delete data", path=path)

        try:
            async with self._http_client() as client:
                response = await client.delete(
                    self._get_url(path),
                    headers={
                        "Authorization": self._basic_auth,
                        "Content-Type": "application/x-www-form-urlencoded",
                    },
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(
                "OpenVidu API unreachable: delete data failed", path=path, error=str(e)
            )
            raise OpenViduApiError(
                ErrorCode.DELETE_DATA_FAILED,
                "delete data failed",
                ErrorData(request=request, error=e),
            ) from e

        logger.debug("delete data", path=path, status_code=response.status_code)
        return response.status_code

    # ============================================================================
    # SESSIONS
    # ============================================================================

    async def create_session(
        self, data: CreateSessionRequest | Dict[str, Any] | None = None
    ) -> Dict[str, Any]:
        """
        Initialize a session.

        Args:
            data: mediaMode, recordingMode, customSessionId, defaultOutputMode,
                defaultRecordingLayout, defaultCustomLayout (all optional)

        Returns:
            {id, createdAt}

        Raises:
            OpenViduApiError: POST_DATA_FAILED, status 409 when customSessionId
                is already in use
        """
        return await self._post("/api/sessions", data)

    async def get_session_by_id(self, session_id: str) -> Dict[str, Any]:
        return await self._get(f"/api/sessions/{session_id}")

    async def get_active_sessions(self) -> Dict[str, Any]:
        """
        Returns:
            {numberOfElements, content}
        """
        return await self._get("/api/sessions")

    async def close_session(self, session_id: str) -> int:
        """
        Close a session, evicting every participant.

        Returns:
            204 when closed, 404 when no session exists for session_id
        """
        return await self._delete(f"/api/sessions/{session_id}")

    async def close_connection(self, session_id: str, connection_id: str) -> int:
        """
        Force the disconnection of a participant.

        Returns:
            204 when evicted, 400 when the session does not exist, 404 when the
            connection does not exist
        """
        return await self._delete(
            f"/api/sessions/{session_id}/connection/{connection_id}"
        )

    async def unpublish_stream(self, session_id: str, stream_id: str) -> int:
        """
        Force the unpublishing of a stream.

        Returns:
            204 when unpublished, 400 when the session does not exist, 404 when
            the stream does not exist
        """
        return await self._delete(f"/api/sessions/{session_id}/stream/{stream_id}")

    # ============================================================================
    # TOKENS
    # ============================================================================

    async def generate_token(
        self, data: GenerateTokenRequest | Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Generate a token for a session.

        Args:
            data: session (required), role, data, kurentoOptions

        Returns:
            {token, session, role, data, id, kurentoOptions}
        """
        return await self._post("/api/tokens", data)

    # ============================================================================
    # RECORDINGS
    # ============================================================================

    async def start_recording(
        self, data: StartRecordingRequest | Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Start recording a session.

        Args:
            data: session (required), name, outputMode, hasAudio, hasVideo,
                recordingLayout, customLayout, resolution

        Returns:
            Recording object
        """
        return await self._post("/api/recordings/start", data)

    async def stop_recording(self, recording_id: str) -> Dict[str, Any]:
        return await self._post(f"/api/recordings/stop/{recording_id}")

    async def get_recording(self, recording_id: str) -> Dict[str, Any]:
        """
        Get a recording. Sent as POST, like the upstream client does.

        Returns:
            Recording object

        Raises:
            OpenViduApiError: POST_DATA_FAILED, status 404 when no recording
                exists for recording_id
        """
        return await self._post(f"/api/recordings/{recording_id}")

    async def get_all_recordings(self) -> Dict[str, Any]:
        """
        Returns:
            {count, items}
        """
        return await self._post("/api/recordings")

    async def delete_recording(self, recording_id: str) -> int:
        """
        Delete a recording file and its metadata.

        Returns:
            204 when deleted, 404 when no recording exists for recording_id,
            409 when the recording is still started
        """
        return await self._delete(f"/api/recordings/{recording_id}")

    # ============================================================================
    # CONFIGURATION
    # ============================================================================

    async def get_config(self) -> Dict[str, Any]:
        return await self._get("/config")
