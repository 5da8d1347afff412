"""
Unit tests for the requests-based API client.

The HTTP session is replaced with a mock returning real
``requests.Response`` objects, so status handling goes through
``raise_for_status`` exactly as it would against a live server.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from wonders_client import WondersAPI


def make_response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response.reason = "test"
    response.url = "http://wonders.test/api/wonders"
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return WondersAPI(base_url="http://wonders.test/", session=session)


class TestWondersAPI:
    """Tests for WondersAPI."""

    def test_list_wonders(self, api, session):
        session.request.return_value = make_response(200, [{"id": 1, "name": "Petra"}])

        wonders, error = api.list_wonders()

        assert error is None
        assert wonders == [{"id": 1, "name": "Petra"}]
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://wonders.test/api/wonders"

    def test_create_sends_json_body(self, api, session):
        session.request.return_value = make_response(201, {"id": 3, "name": "Petra"})

        wonder, error = api.create_wonder({"name": "Petra"})

        assert error is None
        assert wonder["id"] == 3
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["json"] == {"name": "Petra"}

    def test_update_and_delete_succeed_on_204(self, api, session):
        session.request.return_value = make_response(204)

        assert api.update_wonder(1, {"name": "Petra"}) == (True, None)
        assert session.request.call_args.kwargs["url"].endswith("/api/wonders/1")
        assert api.delete_wonder(1) == (True, None)
        assert session.request.call_args.kwargs["method"] == "DELETE"

    def test_not_found_is_reported(self, api, session):
        session.request.return_value = make_response(404, {"detail": "Wonder with ID 9 not found"})

        wonder, error = api.get_wonder(9)

        assert wonder is None
        assert error == {"status_code": 404, "message": "Wonder with ID 9 not found"}

    def test_failed_delete(self, api, session):
        session.request.return_value = make_response(400, {"detail": "Invalid wonder id 'x'"})

        ok, error = api.delete_wonder("x")

        assert ok is False
        assert error["status_code"] == 400

    def test_connection_error(self, api, session):
        session.request.side_effect = requests.ConnectionError("refused")

        wonders, error = api.list_wonders()

        assert wonders == []
        assert error == {"status_code": None, "message": "refused"}

    def test_random_and_info_paths(self, api, session):
        session.request.return_value = make_response(200, {"name": "Wonders API", "version": "1.0.0", "wonders": 8})

        info, error = api.get_info()
        assert info["wonders"] == 8
        assert session.request.call_args.kwargs["url"] == "http://wonders.test/api/info"

        api.random_wonder()
        assert session.request.call_args.kwargs["url"] == "http://wonders.test/api/wonders/random"

    @pytest.mark.parametrize("prefix, expected", [("", "http://h/wonders"), ("api/v1/", "http://h/api/v1/wonders")])
    def test_prefix_normalisation(self, session, prefix, expected):
        session.request.return_value = make_response(200, [])
        client = WondersAPI(base_url="http://h", api_prefix=prefix, session=session)

        client.list_wonders()

        assert session.request.call_args.kwargs["url"] == expected
