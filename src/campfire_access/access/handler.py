"""
campfire_access.access.handler

Client request handler shared by the GET and POST entry points.

Responsibilities:
- Extract `campfireId` with a pluggable strategy (JSON body or query string).
- Validate locally and delegate to `LookupService`.
- Act as the single boundary translating internal failures to a generic envelope.
"""

from __future__ import annotations

from typing import Any, Protocol

from starlette.requests import Request

from campfire_access.access.envelope import (
    MSG_ID_NOT_SPECIFIED,
    MSG_MALFORMED_REQUEST,
    ResponseEnvelope,
    envelope_for,
    internal_error,
    validation_failure,
)
from campfire_access.access.service import LookupService
from campfire_access.observability.logging import get_logger

log = get_logger(__name__)

ID_FIELD = "campfireId"


class ValidationError(Exception):
    """
    Request-level input problem; `message` is shown to the user as is.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IdentifierExtractor(Protocol):
    async def extract(self, request: Request) -> Any: ...


class JsonBodyExtractor:
    async def extract(self, request: Request) -> Any:
        try:
            params = await request.json()
        except ValueError as e:
            log.warning("request.malformed_body", error=str(e))
            raise ValidationError(MSG_MALFORMED_REQUEST) from e
        if not isinstance(params, dict):
            log.warning("request.malformed_body", error="body is not an object")
            raise ValidationError(MSG_MALFORMED_REQUEST)
        return params.get(ID_FIELD)


class QueryParamExtractor:
    async def extract(self, request: Request) -> Any:
        return request.query_params.get(ID_FIELD)


def require_identifier(raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError(MSG_ID_NOT_SPECIFIED)
    return raw.strip()


class AccessCheckHandler:
    def __init__(self, *, service: LookupService, extractor: IdentifierExtractor) -> None:
        self._service = service
        self._extractor = extractor

    async def handle(self, request: Request) -> ResponseEnvelope:
        try:
            identifier = require_identifier(await self._extractor.extract(request))
        except ValidationError as e:
            return validation_failure(e.message)

        try:
            result = await self._service.lookup(identifier)
        except Exception:
            log.exception("check.unexpected_error")
            return internal_error()

        if not result.ok or result.decision is None:
            log.error("check.lookup_failed", error=result.error, detail=result.detail)
            return internal_error()
        return envelope_for(result.decision)


# --- Module Notes -----------------------------------------------------------
# Length rules (3-50 chars) belong to the client form; the server only rejects blanks.
