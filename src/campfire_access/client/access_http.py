"""
campfire_access.client.access_http

HTTP client for the entry check, with the form's screen-selection rules.

Responsibilities:
- Validate identifier length before any request is sent.
- Call `GET /check?campfireId=` or `POST /check` on a configured endpoint.
- Reduce transport and parse failures to one retry-later message.
- Map the response envelope to a `Screen`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Literal

import httpx

from campfire_access.observability.logging import get_logger

log = get_logger(__name__)

MIN_ID_LENGTH = 3
MAX_ID_LENGTH = 50

MSG_ENTER_ID = "IDを入力してください"
MSG_TOO_SHORT = f"IDは{MIN_ID_LENGTH}文字以上で入力してください"
MSG_TOO_LONG = f"IDは{MAX_ID_LENGTH}文字以内で入力してください"
MSG_NOT_FOUND = "該当するIDが見つかりません"
MSG_RETRY_LATER = "システムエラーが発生しました。しばらくしてから再度お試しください。"


class Screen(enum.StrEnum):
    input_form = "input_form"
    both = "both"
    entrance_only = "entrance_only"
    no_access = "no_access"


class NetworkError(Exception):
    pass


class ResponseParseError(Exception):
    pass


@dataclass(frozen=True, slots=True)
class ClientConfig:
    endpoint_url: str
    method: Literal["GET", "POST"] = "GET"

    def __post_init__(self) -> None:
        if not self.endpoint_url.strip():
            raise ValueError("endpoint_url is not configured")


@dataclass(frozen=True, slots=True)
class ScreenView:
    screen: Screen
    # Inline error under the input field (input form only).
    message: str | None = None
    profile_lines: tuple[str, ...] = ()


def validate_identifier(identifier: str) -> str | None:
    """
    Return the user-facing message for an invalid identifier, or None if it is acceptable.
    """

    if not identifier:
        return MSG_ENTER_ID
    if len(identifier) < MIN_ID_LENGTH:
        return MSG_TOO_SHORT
    if len(identifier) > MAX_ID_LENGTH:
        return MSG_TOO_LONG
    return None


def _profile_lines(data: Any, *, rehearsal: bool) -> tuple[str, ...]:
    if not isinstance(data, dict) or not (data.get("name") or data.get("returnItem")):
        return ()
    lines: list[str] = []
    if data.get("name"):
        lines.append(f"お名前: {data['name']}")
    if data.get("returnItem"):
        lines.append(f"リターン: {data['returnItem']}")
    if rehearsal:
        lines.append("リハ見学: 可能")
    return tuple(lines)


class AccessCheckClient:
    def __init__(self, *, config: ClientConfig, http: httpx.AsyncClient) -> None:
        self._config = config
        self._http = http

    async def fetch(self, identifier: str) -> dict[str, Any]:
        try:
            if self._config.method == "POST":
                r = await self._http.post(
                    self._config.endpoint_url, json={"campfireId": identifier}
                )
            else:
                r = await self._http.get(
                    self._config.endpoint_url, params={"campfireId": identifier}
                )
            r.raise_for_status()
        except httpx.HTTPError as e:
            raise NetworkError(str(e)) from e

        try:
            body = r.json()
        except ValueError as e:
            log.error("client.parse_error", body=r.text[:200])
            raise ResponseParseError("response is not JSON") from e
        if not isinstance(body, dict):
            raise ResponseParseError("response is not a JSON object")
        return body

    async def check(self, raw_identifier: str) -> ScreenView:
        identifier = raw_identifier.strip()
        problem = validate_identifier(identifier)
        if problem is not None:
            return ScreenView(screen=Screen.input_form, message=problem)

        try:
            result = await self.fetch(identifier)
        except (NetworkError, ResponseParseError) as e:
            log.error("client.check_failed", error_type=type(e).__name__, error=str(e))
            return ScreenView(screen=Screen.input_form, message=MSG_RETRY_LATER)

        success = bool(result.get("success"))
        has_access = bool(result.get("hasAccess"))
        if success and has_access:
            # Unknown patterns fall back to the entrance-only screen.
            if result.get("pattern") == "both":
                return ScreenView(
                    screen=Screen.both,
                    profile_lines=_profile_lines(result.get("data"), rehearsal=True),
                )
            return ScreenView(
                screen=Screen.entrance_only,
                profile_lines=_profile_lines(result.get("data"), rehearsal=False),
            )
        if success:
            return ScreenView(screen=Screen.no_access)
        return ScreenView(screen=Screen.input_form, message=result.get("message") or MSG_NOT_FOUND)


# --- Module Notes -----------------------------------------------------------
# The http client is owned by the caller, so base URLs, timeouts and transports
# (including `httpx.ASGITransport` in tests) are configured there.
