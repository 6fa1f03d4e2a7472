"""
공통 데이터 모델 모듈입니다.
프로젝트 엔진과 크리에이티브 엔진이 공통으로 사용하는 기반 클래스를 정의합니다.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from blueprint_engine.utils.text import clean_items, clean_text


class EngineInput(BaseModel):
    """
    생성기 입력 레코드의 기반 클래스입니다.

    - 문자열 필드: None은 빈 문자열로, 앞뒤 공백 제거
    - 목록 필드: 각 항목 공백 제거, 빈 항목 제거, 순서 유지
    - JSON에서는 camelCase 이름도 허용합니다 (brandName 등)
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _clean_field(cls, value: Any, info) -> Any:
        annotation = cls.model_fields[info.field_name].annotation
        if annotation is str:
            return clean_text(value)
        if annotation == list[str] and (value is None or isinstance(value, (str, list, tuple))):
            return clean_items(value)
        return value


class BlueprintRecord(BaseModel):
    """
    생성 결과(블루프린트) 레코드의 기반 클래스입니다.
    생성 후에는 변경할 수 없습니다 (frozen).
    시퀀스 필드는 tuple로 선언하여 항목 추가/수정도 막습니다.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class DocumentSection(BlueprintRecord):
    """제목과 항목 목록으로 구성된 문서 섹션 (헌장, SOW 등)."""
    title: str = Field(..., description="섹션 제목")
    items: tuple[str, ...] = Field(default_factory=tuple, description="섹션 항목")
