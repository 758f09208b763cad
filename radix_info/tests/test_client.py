"""
Tests for RadixNodeClient
"""

import pytest
import requests
from unittest.mock import Mock

from radix_info.client import RadixNodeClient
from radix_info.exceptions import MalformedInputError, TransportError


def make_response(status_code=200, content=b'{}'):
    response = Mock()
    response.status_code = status_code
    response.content = content
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


class TestRadixNodeClient:
    @pytest.fixture
    def session(self):
        return Mock()

    @pytest.fixture
    def client(self, session):
        return RadixNodeClient("http://node:3333/", timeout=10, session=session)

    def test_url_building(self, client):
        assert client.base_url == "http://node:3333"
        assert client.url("/system/info") == "http://node:3333/system/info"
        assert client.url("system/info") == "http://node:3333/system/info"

    def test_get(self, client, session):
        session.request.return_value = make_response(content=b'[1, 2]')

        assert client.fetch("GET", "/system/peers") == b'[1, 2]'
        session.request.assert_called_once_with(
            "GET", "http://node:3333/system/peers", headers=None, timeout=10
        )

    def test_post_sends_json_content_type(self, client, session):
        session.request.return_value = make_response(content=b'{"validator": {}}')

        assert client.post_json("/node/validator") == {"validator": {}}
        session.request.assert_called_once_with(
            "POST", "http://node:3333/node/validator",
            headers={'Content-Type': 'application/json'}, timeout=10
        )

    def test_http_error_status(self, client, session):
        session.request.return_value = make_response(status_code=503)

        with pytest.raises(TransportError) as exc_info:
            client.fetch("GET", "/system/info")
        assert "HTTP 503" in str(exc_info.value)
        assert exc_info.value.url == "http://node:3333/system/info"
        assert exc_info.value.operation == "GET"

    def test_timeout(self, client, session):
        session.request.side_effect = requests.exceptions.Timeout("read timed out")

        with pytest.raises(TransportError) as exc_info:
            client.fetch("GET", "/system/info")
        assert "timed out after 10s" in str(exc_info.value)

    def test_connection_error(self, client, session):
        session.request.side_effect = requests.exceptions.ConnectionError("Connection refused")

        with pytest.raises(TransportError) as exc_info:
            client.fetch("GET", "/system/info")
        assert "Connection refused" in str(exc_info.value)

    def test_malformed_json(self, client, session):
        session.request.return_value = make_response(content=b'not json')

        with pytest.raises(MalformedInputError) as exc_info:
            client.get_json("/system/info")
        assert exc_info.value.source == "http://node:3333/system/info"

    def test_context_manager_closes_session(self, session):
        with RadixNodeClient(session=session):
            pass
        session.close.assert_called_once()
