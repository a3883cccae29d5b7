"""
Session scenario against a live OpenVidu server.

These tests are marked with the "openvidu_api" group and will not run by default.
Run them with: pytest -m openvidu_api tests/test_openvidu_api_session.py

Required environment variables:
- OPENVIDU_URL: URL of the OpenVidu server (required)
- OPENVIDU_SECRET: OpenVidu secret (required)

Example:
    OPENVIDU_URL=https://localhost:4443 OPENVIDU_SECRET=MY_SECRET \
    uv run -m pytest -m openvidu_api tests/test_openvidu_api_session.py
"""

import os
import time

import pytest

from openvidu_rest import OpenViduApiError, OpenViduClient


@pytest.fixture(scope="module")
def session_id():
    return str(int(time.time() * 1000))


@pytest.fixture
def live_client():
    url = os.environ.get("OPENVIDU_URL")
    secret = os.environ.get("OPENVIDU_SECRET")
    if not url or not secret:
        pytest.skip("OPENVIDU_URL and OPENVIDU_SECRET are required for live tests")
    return OpenViduClient(url, secret)


@pytest.mark.openvidu_api
@pytest.mark.asyncio
class TestOpenViduSession:
    async def test_create_session(self, live_client, session_id):
        result = await live_client.create_session({"customSessionId": session_id})
        assert result["id"] == session_id

        with pytest.raises(OpenViduApiError) as exc_info:
            await live_client.create_session({"customSessionId": session_id})
        assert exc_info.value.status == 409

    async def test_generate_token(self, live_client, session_id):
        result = await live_client.generate_token({"session": session_id})
        assert len(result["token"]) > 0

    async def test_get_active_sessions(self, live_client):
        sessions = await live_client.get_active_sessions()
        assert sessions["numberOfElements"] > 0

    async def test_get_session_by_id(self, live_client, session_id):
        session = await live_client.get_session_by_id(session_id)
        assert session["sessionId"] == session_id

    async def test_close_session(self, live_client, session_id):
        assert await live_client.close_session(session_id) == 204
        assert await live_client.close_session(session_id) == 404
