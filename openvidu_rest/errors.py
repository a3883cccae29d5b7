"""
OpenVidu REST API errors

Every failure of the client is reported as an OpenViduApiError. The kind of
failure is carried by its `code`, one per HTTP verb.
"""

import enum
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict


class ErrorCode(enum.StrEnum):
    POST_DATA_FAILED = "POST_DATA_FAILED"
    GET_DATA_FAILED = "GET_DATA_FAILED"
    DELETE_DATA_FAILED = "DELETE_DATA_FAILED"


class RequestInfo(BaseModel):
    """The request that failed, as sent by the client."""

    path: str
    body: Any = None


class ErrorData(BaseModel):
    """
    Context of a failed request.

    `resp` is the raw response when the server answered, None when nothing
    was received. `error` holds the underlying exception (transport failure
    or unparseable body), if any.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    request: RequestInfo
    resp: httpx.Response | None = None
    error: Exception | None = None


class OpenViduApiError(Exception):
    def __init__(self, code: ErrorCode, message: str, data: ErrorData):
        super().__init__(code, message, data)
        self.code = code
        self.message = message
        self.data = data

    @property
    def status(self) -> int | None:
        if self.data.resp is None:
            return None
        return self.data.resp.status_code

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": str(self.code),
            "message": self.message,
            "path": self.data.request.path,
            "body": self.data.request.body,
            "status": self.status,
            "response": self.data.resp.text if self.data.resp is not None else None,
            "error": str(self.data.error) if self.data.error is not None else None,
        }

    def __str__(self) -> str:
        status = self.status if self.status is not None else "no response"
        path = self.data.request.path
        return f"{self.code}: {self.message} ({path}, status {status})"

    def __repr__(self) -> str:
        return f"OpenViduApiError(code={self.code!r}, status={self.status!r})"
