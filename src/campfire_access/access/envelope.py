"""
campfire_access.access.envelope

Response envelope returned to the client form.

Responsibilities:
- Hold the fixed set of user-facing messages.
- Map an `AccessDecision` to `success` / `hasAccess` / `pattern` / `data`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from campfire_access.access.records import AccessDecision, Pattern

MSG_BOTH = "入場権利とリハ見学権利があります"
MSG_ENTRANCE_ONLY = "入場権利があります"
MSG_NO_ACCESS = "入場権利がありません"
MSG_NOT_FOUND = "該当するIDが見つかりません"
MSG_ID_NOT_SPECIFIED = "IDが指定されていません"
MSG_MALFORMED_REQUEST = "リクエスト形式が正しくありません"
MSG_INTERNAL_ERROR = "システムエラーが発生しました"

_PATTERN_MESSAGES: dict[Pattern, str] = {
    Pattern.both: MSG_BOTH,
    Pattern.entrance_only: MSG_ENTRANCE_ONLY,
    Pattern.none: MSG_NO_ACCESS,
    Pattern.not_found: MSG_NOT_FOUND,
}


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfileData(_CamelModel):
    name: str | None = None
    return_item: str | None = None
    rehearsal_access: str | None = None
    note: str | None = None


class ResponseEnvelope(_CamelModel):
    success: bool
    has_access: bool
    message: str
    pattern: Pattern | None = None
    data: ProfileData | None = None

    def to_body(self) -> dict[str, Any]:
        # Optional keys are omitted rather than sent as null.
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def envelope_for(decision: AccessDecision) -> ResponseEnvelope:
    pattern = decision.pattern
    data: ProfileData | None = None
    if decision.found and decision.entry_access and decision.profile is not None:
        data = ProfileData(
            name=decision.profile.display_name,
            return_item=decision.profile.reward_description,
            rehearsal_access=decision.profile.rehearsal_access,
            note=decision.profile.note,
        )
    return ResponseEnvelope(
        success=decision.found,
        has_access=decision.found and decision.entry_access,
        message=_PATTERN_MESSAGES[pattern],
        pattern=pattern,
        data=data,
    )


def validation_failure(message: str) -> ResponseEnvelope:
    return ResponseEnvelope(success=False, has_access=False, message=message)


def internal_error() -> ResponseEnvelope:
    return ResponseEnvelope(success=False, has_access=False, message=MSG_INTERNAL_ERROR)


# --- Module Notes -----------------------------------------------------------
# Internal detail never goes into `message`; operators read it from the logs.
