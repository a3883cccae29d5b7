import pickle

import httpx

from openvidu_rest.errors import ErrorCode, ErrorData, OpenViduApiError, RequestInfo


def make_error(resp=None, error=None):
    return OpenViduApiError(
        ErrorCode.POST_DATA_FAILED,
        "post data failed",
        ErrorData(
            request=RequestInfo(path="/api/sessions", body={"customSessionId": "s1"}),
            resp=resp,
            error=error,
        ),
    )


def test_error_codes_are_strings():
    assert ErrorCode.GET_DATA_FAILED == "GET_DATA_FAILED"
    assert ErrorCode.POST_DATA_FAILED == "POST_DATA_FAILED"
    assert ErrorCode.DELETE_DATA_FAILED == "DELETE_DATA_FAILED"


def test_error_with_response():
    resp = httpx.Response(409, text="conflict")
    err = make_error(resp=resp)

    assert isinstance(err, Exception)
    assert err.code is ErrorCode.POST_DATA_FAILED
    assert err.message == "post data failed"
    assert err.status == 409
    assert err.data.resp is resp
    assert str(err) == "POST_DATA_FAILED: post data failed (/api/sessions, status 409)"


def test_error_without_response():
    cause = httpx.ConnectError("Connection refused")
    err = make_error(error=cause)

    assert err.status is None
    assert err.data.error is cause
    assert "no response" in str(err)


def test_to_dict():
    err = make_error(resp=httpx.Response(409, text="conflict"))

    assert err.to_dict() == {
        "code": "POST_DATA_FAILED",
        "message": "post data failed",
        "path": "/api/sessions",
        "body": {"customSessionId": "s1"},
        "status": 409,
        "response": "conflict",
        "error": None,
    }


def test_to_dict_transport_failure():
    err = make_error(error=httpx.ConnectError("Connection refused"))

    result = err.to_dict()
    assert result["status"] is None
    assert result["response"] is None
    assert result["error"] == "Connection refused"


def test_error_survives_pickling():
    err = make_error(resp=httpx.Response(409, text="conflict"))

    restored = pickle.loads(pickle.dumps(err))

    assert restored.code is ErrorCode.POST_DATA_FAILED
    assert restored.message == "post data failed"
    assert restored.status == 409
    assert restored.data.request.path == "/api/sessions"
    assert restored.data.request.body == {"customSessionId": "s1"}
    assert restored.data.resp.text == "conflict"
    assert str(restored) == str(err)
