"""
Legal assistant provider interface.

Defines the contract for the external NLP backend that summarizes documents
and answers legal questions.
Implementations: HTTP (httpx)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from legalconnect.models.assistant import DocumentSummary, LegalAnswer


class ILegalAssistantProvider(ABC):
    """Abstract interface for the legal NLP backend."""

    @abstractmethod
    async def summarize_document(
        self,
        filename: str,
        data: bytes,
        content_type: Optional[str] = None,
        lang: str = "english",
    ) -> DocumentSummary:
        """
        Summarize a legal document.

        Raises:
            UpstreamUnavailableError: On network failure, timeout or non-2xx response
        """
        pass

    @abstractmethod
    async def ask(self, question: str, lang: str = "english") -> LegalAnswer:
        """Answer a free-form legal question."""
        pass

    @abstractmethod
    async def know_your_rights(self, question: str, category: Optional[str] = None) -> LegalAnswer:
        """Answer a question scoped to a rights category."""
        pass
