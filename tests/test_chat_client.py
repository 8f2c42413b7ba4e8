"""Unit tests for ChatClient."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

import asyncio
import json
import httpx
import pytest
from services.chat_client import (
    QUESTION_LABEL,
    USER_PREFIX,
    ChatClient,
    ChatClientError,
)

API_URL = "https://chat.example.test/api/chat"


def make_client(handler):
    """ChatClient whose requests are answered by ``handler``."""
    requests = []

    def recording_handler(request):
        requests.append(request)
        return handler(request)

    client = ChatClient(api_url=API_URL, transport=httpx.MockTransport(recording_handler))
    return client, requests


class TestChatClient:
    """Test suite for ChatClient class."""

    def test_initialization_with_url(self):
        client = ChatClient(api_url="http://localhost:9000/chat")
        assert client.api_url == "http://localhost:9000/chat"

    def test_build_messages(self):
        messages = ChatClient.build_messages("Be helpful.", "Jane Doe\n", "Where?")

        assert messages == [
            {"role": "system", "content": "Be helpful."},
            {"role": "user", "content": f"{USER_PREFIX}Jane Doe\n{QUESTION_LABEL}Where?"},
        ]

    def test_user_message_is_literal_concatenation(self):
        messages = ChatClient.build_messages("p", "TEXT", "Q")
        assert messages[1]["content"] == "这是一份履歷的內容：\n\nTEXT\n\n問題：Q"

    def test_ask_success(self):
        client, requests = make_client(
            lambda request: httpx.Response(200, json={"choices": [{"message": {"content": "5 years"}}]})
        )

        answer = asyncio.run(client.ask("system", "resume", "What is your experience?"))

        assert answer == "5 years"
        assert len(requests) == 1
        request = requests[0]
        assert request.method == "POST"
        assert str(request.url) == API_URL
        body = json.loads(request.content)
        assert [m["role"] for m in body["messages"]] == ["system", "user"]
        assert body["messages"][0]["content"] == "system"
        assert body["messages"][1]["content"].endswith("What is your experience?")

    def test_http_error_status(self):
        client, requests = make_client(lambda request: httpx.Response(500, json={"error": "boom"}))

        with pytest.raises(ChatClientError) as exc_info:
            asyncio.run(client.ask("system", "resume", "question"))

        error = exc_info.value.error
        assert error.code == "HTTP_ERROR"
        assert error.details["status_code"] == 500
        assert error.details["url"] == API_URL
        # No retry
        assert len(requests) == 1

    def test_non_2xx_with_valid_body_is_failure(self):
        client, _ = make_client(
            lambda request: httpx.Response(404, json={"choices": [{"message": {"content": "hi"}}]})
        )

        with pytest.raises(ChatClientError) as exc_info:
            asyncio.run(client.ask("system", "resume", "question"))
        assert exc_info.value.error.code == "HTTP_ERROR"

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client(handler)

        with pytest.raises(ChatClientError) as exc_info:
            asyncio.run(client.ask("system", "resume", "question"))

        error = exc_info.value.error
        assert error.code == "TRANSPORT_ERROR"
        assert "connection refused" in error.details["original_error"]
        assert isinstance(error.details["latency_ms"], int)

    @pytest.mark.parametrize("body", [
        {"choices": []},
        {"choices": [{"message": {}}]},
        {"answer": "5 years"},
        ["not", "an", "object"],
    ])
    def test_malformed_body(self, body):
        client, _ = make_client(lambda request: httpx.Response(200, json=body))

        with pytest.raises(ChatClientError) as exc_info:
            asyncio.run(client.ask("system", "resume", "question"))
        assert exc_info.value.error.code == "MALFORMED_RESPONSE"

    def test_invalid_json(self):
        client, _ = make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(ChatClientError) as exc_info:
            asyncio.run(client.ask("system", "resume", "question"))
        assert exc_info.value.error.code == "MALFORMED_RESPONSE"

    def test_empty_content(self):
        client, _ = make_client(
            lambda request: httpx.Response(200, json={"choices": [{"message": {"content": ""}}]})
        )

        with pytest.raises(ChatClientError) as exc_info:
            asyncio.run(client.ask("system", "resume", "question"))
        assert exc_info.value.error.code == "MALFORMED_RESPONSE"
