import pytest

OPENVIDU_URL = "https://openvidu.test"
OPENVIDU_SECRET = "MY_SECRET"


@pytest.fixture
def openvidu_url():
    return OPENVIDU_URL


@pytest.fixture
def client():
    from openvidu_rest import OpenViduClient

    return OpenViduClient(OPENVIDU_URL, OPENVIDU_SECRET)


@pytest.fixture
def test_settings():
    from openvidu_rest.settings import Settings

    return Settings(
        _env_file=None,
        OPENVIDU_URL=OPENVIDU_URL,
        OPENVIDU_SECRET=OPENVIDU_SECRET,
        LOG_LEVEL="WARNING",
    )
