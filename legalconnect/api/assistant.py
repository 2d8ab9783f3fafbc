"""
Legal assistant API endpoints.

Thin proxy to the NLP backend for document summaries and legal Q&A.
"""

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from legalconnect.api.deps import CurrentUser, LegalAssistant
from legalconnect.api.errors import to_http_exception
from legalconnect.core.config import get_settings
from legalconnect.core.exceptions import LegalConnectError
from legalconnect.models.assistant import (
    AskRequest,
    DocumentSummary,
    KnowYourRightsRequest,
    LegalAnswer,
)

router = APIRouter()


@router.post("/summarize", response_model=DocumentSummary)
async def summarize_document(
    user: CurrentUser,
    assistant: LegalAssistant,
    file: UploadFile = File(...),
    lang: str = Form("english"),
):
    """Summarize an uploaded legal document."""
    data = await file.read()
    if not data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Document is empty",
        )
    if len(data) > get_settings().MAX_ATTACHMENT_BYTES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Document is too large",
        )
    try:
        return await assistant.summarize_document(
            file.filename or "document",
            data,
            content_type=file.content_type,
            lang=lang,
        )
    except LegalConnectError as e:
        raise to_http_exception(e)


@router.post("/ask", response_model=LegalAnswer)
async def ask(
    request: AskRequest,
    user: CurrentUser,
    assistant: LegalAssistant,
):
    try:
        return await assistant.ask(request.question, lang=request.lang)
    except LegalConnectError as e:
        raise to_http_exception(e)


@router.post("/kyr", response_model=LegalAnswer)
async def know_your_rights(
    request: KnowYourRightsRequest,
    user: CurrentUser,
    assistant: LegalAssistant,
):
    """Know-your-rights question, optionally scoped to a category."""
    try:
        return await assistant.know_your_rights(request.question, category=request.category)
    except LegalConnectError as e:
        raise to_http_exception(e)
