#!/usr/bin/env python
"""
Command line access to an OpenVidu server.

The server is configured with OPENVIDU_URL and OPENVIDU_SECRET (environment
or .env file).

Usage:
    uv run python -m openvidu_rest.tools.cli sessions list
    uv run python -m openvidu_rest.tools.cli sessions create --custom-session-id room-1
    uv run python -m openvidu_rest.tools.cli tokens create room-1 --role MODERATOR
    uv run python -m openvidu_rest.tools.cli recordings start room-1 --resolution 1280x720
    uv run python -m openvidu_rest.tools.cli sessions close room-1
"""

import argparse
import asyncio
import json
import sys
from typing import Any

import structlog

from openvidu_rest.client import OpenViduClient
from openvidu_rest.errors import OpenViduApiError
from openvidu_rest.logger import configure_logging
from openvidu_rest.requests import (
    CreateSessionRequest,
    GenerateTokenRequest,
    StartRecordingRequest,
)
from openvidu_rest.settings import settings

logger = structlog.get_logger(__name__)


async def run_command(client: OpenViduClient, args: argparse.Namespace) -> Any:
    match (args.resource, getattr(args, "action", None)):
        case ("sessions", "list"):
            return await client.get_active_sessions()
        case ("sessions", "get"):
            return await client.get_session_by_id(args.session_id)
        case ("sessions", "create"):
            return await client.create_session(
                CreateSessionRequest(
                    customSessionId=args.custom_session_id,
                    mediaMode=args.media_mode,
                    recordingMode=args.recording_mode,
                    defaultOutputMode=args.default_output_mode,
                    defaultRecordingLayout=args.default_recording_layout,
                    defaultCustomLayout=args.default_custom_layout,
                )
            )
        case ("sessions", "close"):
            return await client.close_session(args.session_id)
        case ("connections", "close"):
            return await client.close_connection(args.session_id, args.connection_id)
        case ("streams", "unpublish"):
            return await client.unpublish_stream(args.session_id, args.stream_id)
        case ("tokens", "create"):
            return await client.generate_token(
                GenerateTokenRequest(
                    session=args.session_id, role=args.role, data=args.data
                )
            )
        case ("recordings", "list"):
            return await client.get_all_recordings()
        case ("recordings", "get"):
            return await client.get_recording(args.recording_id)
        case ("recordings", "start"):
            return await client.start_recording(
                StartRecordingRequest(
                    session=args.session_id,
                    name=args.name,
                    outputMode=args.output_mode,
                    recordingLayout=args.recording_layout,
                    customLayout=args.custom_layout,
                    resolution=args.resolution,
                    hasAudio=False if args.no_audio else None,
                    hasVideo=False if args.no_video else None,
                )
            )
        case ("recordings", "stop"):
            return await client.stop_recording(args.recording_id)
        case ("recordings", "delete"):
            return await client.delete_recording(args.recording_id)
        case ("config", _):
            return await client.get_config()
    raise ValueError(f"Unknown command: {args.resource} {getattr(args, 'action', '')}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="OpenVidu REST API client")
    parser.add_argument(
        "--log-level", default=settings.LOG_LEVEL, help="Log level (default: INFO)"
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=settings.LOG_JSON,
        help="Render logs as JSON",
    )
    resources = parser.add_subparsers(dest="resource", required=True)

    sessions = resources.add_parser("sessions", help="Manage sessions")
    sessions_actions = sessions.add_subparsers(dest="action", required=True)
    sessions_actions.add_parser("list", help="List active sessions")
    get_session = sessions_actions.add_parser("get", help="Retrieve a session")
    get_session.add_argument("session_id")
    create_session = sessions_actions.add_parser("create", help="Initialize a session")
    create_session.add_argument("--custom-session-id")
    create_session.add_argument("--media-mode")
    create_session.add_argument("--recording-mode", help="ALWAYS or MANUAL")
    create_session.add_argument("--default-output-mode", help="COMPOSED or INDIVIDUAL")
    create_session.add_argument("--default-recording-layout", help="BEST_FIT or CUSTOM")
    create_session.add_argument("--default-custom-layout")
    close_session = sessions_actions.add_parser("close", help="Close a session")
    close_session.add_argument("session_id")

    connections = resources.add_parser("connections", help="Manage connections")
    connections_actions = connections.add_subparsers(dest="action", required=True)
    close_connection = connections_actions.add_parser(
        "close", help="Force the disconnection of a participant"
    )
    close_connection.add_argument("session_id")
    close_connection.add_argument("connection_id")

    streams = resources.add_parser("streams", help="Manage streams")
    streams_actions = streams.add_subparsers(dest="action", required=True)
    unpublish = streams_actions.add_parser("unpublish", help="Force unpublish a stream")
    unpublish.add_argument("session_id")
    unpublish.add_argument("stream_id")

    tokens = resources.add_parser("tokens", help="Manage tokens")
    tokens_actions = tokens.add_subparsers(dest="action", required=True)
    create_token = tokens_actions.add_parser("create", help="Generate a token")
    create_token.add_argument("session_id")
    create_token.add_argument("--role", help="SUBSCRIBER, PUBLISHER or MODERATOR")
    create_token.add_argument("--data", help="Metadata attached to the token")

    recordings = resources.add_parser("recordings", help="Manage recordings")
    recordings_actions = recordings.add_subparsers(dest="action", required=True)
    recordings_actions.add_parser("list", help="List all recordings")
    get_recording = recordings_actions.add_parser("get", help="Retrieve a recording")
    get_recording.add_argument("recording_id")
    start = recordings_actions.add_parser("start", help="Start recording a session")
    start.add_argument("session_id")
    start.add_argument("--name")
    start.add_argument("--output-mode", help="COMPOSED or INDIVIDUAL")
    start.add_argument("--recording-layout")
    start.add_argument("--custom-layout")
    start.add_argument("--resolution", help='e.g. "1920x1080"')
    start.add_argument("--no-audio", action="store_true")
    start.add_argument("--no-video", action="store_true")
    stop = recordings_actions.add_parser("stop", help="Stop a recording")
    stop.add_argument("recording_id")
    delete = recordings_actions.add_parser("delete", help="Delete a recording")
    delete.add_argument("recording_id")

    resources.add_parser("config", help="Show the server configuration")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, json=args.log_json)

    try:
        client = OpenViduClient.from_settings(settings)
    except ValueError as e:
        logger.error("OpenVidu server not configured", error=str(e))
        return 2

    try:
        result = asyncio.run(run_command(client, args))
    except OpenViduApiError as e:
        logger.error(
            "OpenVidu request failed",
            code=str(e.code),
            status=e.status,
            path=e.data.request.path,
        )
        return 1

    if isinstance(result, int):
        print(result)
    else:
        print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
