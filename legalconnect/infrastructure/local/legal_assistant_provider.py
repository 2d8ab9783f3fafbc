"""
HTTP client for the legal NLP backend.

The backend exposes /summarize (multipart), /ask and /kyr (JSON). Every call
is a single attempt with a timeout; failures surface as UpstreamUnavailableError
and retrying is left to the caller.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from legalconnect.core.exceptions import UpstreamUnavailableError
from legalconnect.core.logger import logger
from legalconnect.interfaces.legal_assistant_provider import ILegalAssistantProvider
from legalconnect.models.assistant import DocumentSummary, LegalAnswer

# Phrase the backend uses when it has no confident answer
UNCERTAIN_MARKER = "I am not sure about this"


class HttpLegalAssistantProvider(ILegalAssistantProvider):
    """httpx-based client for the NLP backend."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def _post(self, endpoint: str, **kwargs: Any) -> dict[str, Any]:
        url = f"{self._base_url}/{endpoint}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.post(url, **kwargs)
                resp.raise_for_status()
                data = resp.json()
        except httpx.TimeoutException as e:
            logger.error(f"NLP backend timed out: {url}")
            raise UpstreamUnavailableError(f"NLP backend timed out calling /{endpoint}") from e
        except httpx.HTTPStatusError as e:
            logger.error(f"NLP backend returned {e.response.status_code}: {url}")
            raise UpstreamUnavailableError(
                f"NLP backend responded with status {e.response.status_code}",
                details={"status_code": e.response.status_code},
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"NLP backend call failed: {url}: {e}")
            raise UpstreamUnavailableError(f"NLP backend unavailable: {e}") from e

        if not isinstance(data, dict):
            raise UpstreamUnavailableError(f"Unexpected NLP backend payload from /{endpoint}")
        if data.get("error"):
            raise UpstreamUnavailableError(str(data["error"]))
        return data

    def _to_answer(self, data: dict[str, Any]) -> LegalAnswer:
        answer = data.get("answer")
        if not isinstance(answer, str):
            raise UpstreamUnavailableError("NLP backend response is missing 'answer'")
        return LegalAnswer(answer=answer, uncertain=UNCERTAIN_MARKER in answer)

    async def summarize_document(
        self,
        filename: str,
        data: bytes,
        content_type: Optional[str] = None,
        lang: str = "english",
    ) -> DocumentSummary:
        payload = await self._post(
            "summarize",
            files={"file": (filename, data, content_type or "application/octet-stream")},
            data={"lang": lang},
        )
        summary = payload.get("summary")
        if not isinstance(summary, str):
            raise UpstreamUnavailableError("NLP backend response is missing 'summary'")
        return DocumentSummary(
            summary=summary,
            lang=lang,
            precision=payload.get("precision"),
            ratio=payload.get("ratio"),
        )

    async def ask(self, question: str, lang: str = "english") -> LegalAnswer:
        payload = await self._post("ask", json={"question": question, "lang": lang})
        return self._to_answer(payload)

    async def know_your_rights(self, question: str, category: Optional[str] = None) -> LegalAnswer:
        payload = await self._post("kyr", json={"question": question, "category": category})
        return self._to_answer(payload)
