"""
OpenVidu REST API Module
"""

# Client
from .client import OpenViduClient

# Errors
from .errors import ErrorCode, ErrorData, OpenViduApiError, RequestInfo

# Request models
from .requests import (
    CreateSessionRequest,
    GenerateTokenRequest,
    KurentoOptions,
    StartRecordingRequest,
)

__all__ = [
    # Client
    "OpenViduClient",
    # Errors
    "OpenViduApiError",
    "ErrorCode",
    "ErrorData",
    "RequestInfo",
    # Requests
    "CreateSessionRequest",
    "GenerateTokenRequest",
    "KurentoOptions",
    "StartRecordingRequest",
]
