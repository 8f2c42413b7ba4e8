"""Chat client for the remote chat-completion endpoint."""
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import httpx
import logging

from config import CHAT_API_URL

logger = logging.getLogger(__name__)

# Labels framing the resume text and the question in the user message
USER_PREFIX = "这是一份履歷的內容：\n\n"
QUESTION_LABEL = "\n\n問題："


@dataclass
class ChatError:
    """Structured error from a chat request."""
    code: str
    message: str
    details: Dict[str, Any]


class ChatClientError(Exception):
    """Custom exception for chat client errors with structured error information."""

    def __init__(self, error: ChatError):
        self.error = error
        super().__init__(error.message)


class ChatClient:
    """Client for the chat endpoint. One POST per question, no retries."""

    def __init__(
        self,
        api_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize chat client.

        Args:
            api_url: Endpoint URL (defaults to CHAT_API_URL from environment)
            transport: Optional httpx transport, used to substitute the network
        """
        self.api_url = api_url or CHAT_API_URL
        if not self.api_url:
            raise ValueError("CHAT_API_URL must be provided or set in environment")

        self._transport = transport
        logger.info(f"ChatClient initialized for {self.api_url}")

    @staticmethod
    def build_messages(system_prompt: str, resume_text: str, question: str) -> List[Dict[str, str]]:
        """
        Build the system and user messages for one question.

        Args:
            system_prompt: Locale-specific instruction
            resume_text: Full extracted resume text
            question: User question

        Returns:
            Exactly two messages, system first
        """
        return [
            {
                "role": "system",
                "content": system_prompt
            },
            {
                "role": "user",
                "content": f"{USER_PREFIX}{resume_text}{QUESTION_LABEL}{question}"
            }
        ]

    async def ask(self, system_prompt: str, resume_text: str, question: str) -> str:
        """
        Send one question about the resume and return the answer text.

        Args:
            system_prompt: Locale-specific instruction
            resume_text: Full extracted resume text
            question: User question

        Returns:
            Content of the first choice's message

        Raises:
            ChatClientError: On transport failure, non-2xx status or a malformed body
        """
        payload = {"messages": self.build_messages(system_prompt, resume_text, question)}
        start_time = time.time()

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self.api_url, json=payload)
        except httpx.HTTPError as e:
            raise self._fail(
                "TRANSPORT_ERROR",
                "Chat request failed before a response was received.",
                start_time,
                original_error=str(e),
                error_type=type(e).__name__
            ) from e

        latency_ms = int((time.time() - start_time) * 1000)

        if not response.is_success:
            raise self._fail(
                "HTTP_ERROR",
                f"Chat endpoint returned HTTP {response.status_code}.",
                start_time,
                status_code=response.status_code
            )

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise self._fail(
                "MALFORMED_RESPONSE",
                "Chat endpoint returned an unexpected response body.",
                start_time,
                status_code=response.status_code,
                original_error=str(e)
            ) from e

        if not isinstance(content, str) or not content:
            raise self._fail(
                "MALFORMED_RESPONSE",
                "Chat endpoint returned an empty answer.",
                start_time,
                status_code=response.status_code
            )

        logger.info(
            f"Chat answer received: status={response.status_code}, "
            f"answer_length={len(content)}, latency={latency_ms}ms",
            extra={"status_code": response.status_code, "latency_ms": latency_ms}
        )
        return content

    def _fail(self, code: str, message: str, start_time: float, **details: Any) -> ChatClientError:
        latency_ms = int((time.time() - start_time) * 1000)
        error = ChatError(
            code=code,
            message=message,
            details={"url": self.api_url, "latency_ms": latency_ms, **details}
        )
        logger.error(
            f"Chat error: code={code}, latency={latency_ms}ms, details={details}",
            extra={"error_code": error.code, "error_details": error.details}
        )
        return ChatClientError(error)
