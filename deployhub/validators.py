# deployhub/validators.py
from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, HttpUrl, conint, constr, field_validator
from pydantic import ValidationError as PydanticValidationError

from deployhub.database.database import MAX_INTEGER
from deployhub.services.exceptions import ValidationError

MAX_NAME_LENGTH = 255
MIN_BUILDS_TO_KEEP = 1
MAX_BUILDS_TO_KEEP = 20

Name = constr(strip_whitespace=True, min_length=1, max_length=MAX_NAME_LENGTH)
Repository = constr(strip_whitespace=True, min_length=1)
RecordId = conint(ge=1, le=MAX_INTEGER)
BuildsToKeep = conint(ge=MIN_BUILDS_TO_KEEP, le=MAX_BUILDS_TO_KEEP)

# 빈 문자열을 "값 없음"으로 취급하는 선택 필드
_BLANK_AS_NONE = ("key_id", "template_id", "url", "build_url")


class StoreProjectRequest(BaseModel):
    """프로젝트 생성(POST)과 전체 수정(PUT) 요청 본문."""
    model_config = ConfigDict(extra="ignore")

    name: Name
    repository: Repository
    branch: Name
    group_id: RecordId
    builds_to_keep: BuildsToKeep
    key_id: RecordId | None = None
    url: HttpUrl | None = None
    build_url: HttpUrl | None = None
    # 존재하지 않는 템플릿은 조용히 무시되므로 범위 검사를 하지 않습니다.
    template_id: int | None = None
    allow_other_branch: bool = True
    need_approve: bool = False

    @field_validator(*_BLANK_AS_NONE, mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PatchProjectRequest(StoreProjectRequest):
    """
    부분 수정(PATCH) 요청 본문. 모든 필드가 선택이지만,
    전달된 필드는 StoreProjectRequest와 같은 규칙으로 검사합니다 (필수 필드에 null 불가).
    """
    name: Name = None
    repository: Repository = None
    branch: Name = None
    group_id: RecordId = None
    builds_to_keep: BuildsToKeep = None
    allow_other_branch: bool = None
    need_approve: bool = None


class CloneProjectRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["project", "template"]
    name: constr(strip_whitespace=True, max_length=MAX_NAME_LENGTH) | None = None


def _validate(model, data: Any) -> Dict[str, Any]:
    try:
        request = model.model_validate(data)
    except PydanticValidationError as e:
        errors = {}
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "body"
            errors.setdefault(field, error["msg"])
        raise ValidationError("The given data was invalid.", errors) from None
    # mode="json"은 HttpUrl을 문자열로 바꿔 DB에 그대로 저장할 수 있게 합니다.
    return request.model_dump(mode="json", exclude_unset=True)


def validate_store_project(data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    """
    프로젝트 생성/수정 요청 본문을 검증하고, 요청에 포함된 허용 필드만 반환합니다.

    Args:
        data: JSON으로 파싱된 요청 본문.
        partial: True이면(PATCH) 요청에 포함된 필드만 검사합니다.

    Raises:
        ValidationError: 하나 이상의 필드가 규칙을 위반했을 때. errors에 필드별 메시지가 담깁니다.
    """
    return _validate(PatchProjectRequest if partial else StoreProjectRequest, data)


def validate_clone_project(data: Dict[str, Any]) -> Dict[str, Any]:
    """복제 요청 본문({name?, type})을 검증합니다."""
    fields = _validate(CloneProjectRequest, data)
    if not fields.get("name"):
        fields.pop("name", None)
    return fields
