"""
campfire_access.api.routers.access

Public entry-check endpoints consumed by the static client form.

Responsibilities:
- `POST /check` with a JSON body and `GET /check` with a query parameter.
- Answer CORS preflight without running the lookup.
- Attach permissive CORS headers to every response.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from campfire_access.access.envelope import ResponseEnvelope
from campfire_access.access.handler import (
    AccessCheckHandler,
    IdentifierExtractor,
    JsonBodyExtractor,
    QueryParamExtractor,
)
from campfire_access.access.service import LookupService
from campfire_access.api.deps import lookup_service

router = APIRouter(tags=["access"])

# The form is served from another origin (static hosting).
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def _respond(
    request: Request, service: LookupService, extractor: IdentifierExtractor
) -> JSONResponse:
    handler = AccessCheckHandler(service=service, extractor=extractor)
    envelope: ResponseEnvelope = await handler.handle(request)
    return JSONResponse(content=envelope.to_body(), headers=CORS_HEADERS)


@router.get("/check")
async def check_by_query(
    request: Request, service: LookupService = Depends(lookup_service)
) -> JSONResponse:
    return await _respond(request, service, QueryParamExtractor())


@router.post("/check")
async def check_by_body(
    request: Request, service: LookupService = Depends(lookup_service)
) -> JSONResponse:
    return await _respond(request, service, JsonBodyExtractor())


@router.options("/check")
async def check_preflight() -> Response:
    return Response(content=b"", headers=CORS_HEADERS)


# --- Module Notes -----------------------------------------------------------
# Both verbs share `AccessCheckHandler`; only the extraction strategy differs.
