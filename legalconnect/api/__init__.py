"""API routers."""

from legalconnect.api import (
    assistant,
    chat_rooms,
    connection_requests,
    lawyers,
)

__all__ = [
    "connection_requests",
    "chat_rooms",
    "lawyers",
    "assistant",
]
