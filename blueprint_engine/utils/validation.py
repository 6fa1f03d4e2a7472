"""폼 입력 유효성 검증 및 토큰화 유틸리티.

원시 폼 텍스트를 생성기 입력으로 변환하기 전에 크기 제한을 검사합니다.
"""

import re
from typing import Optional

from blueprint_engine.config import get_settings
from blueprint_engine.exceptions import InputValidationError

# 줄바꿈(\r\n 포함) 또는 쉼표로 분리
TOKEN_SEPARATOR = re.compile(r"\r?\n|,")


def tokenize(value: Optional[str]) -> list[str]:
    """
    여러 줄 / 쉼표 구분 텍스트를 항목 목록으로 나눕니다.

    - 줄바꿈 또는 쉼표로 분리
    - 각 항목 앞뒤 공백 제거
    - 빈 항목 제거
    - 순서 유지

    Args:
        value: 원시 텍스트

    Returns:
        정리된 항목 목록
    """
    if not value:
        return []
    pieces = (piece.strip() for piece in TOKEN_SEPARATOR.split(value))
    return [piece for piece in pieces if piece]


def validate_field_length(field_name: str, value: str) -> str:
    """
    필드 길이 검증.

    Raises:
        InputValidationError: 최대 글자 수 초과
    """
    settings = get_settings()
    if len(value) > settings.max_field_length:
        raise InputValidationError(
            f"'{field_name}' 필드가 너무 깁니다: {len(value)}자 (최대 {settings.max_field_length}자)",
            details={"field": field_name, "length": len(value)},
        )
    return value


def validate_item_count(field_name: str, items: list[str]) -> list[str]:
    """
    토큰화된 항목 수 검증.

    Raises:
        InputValidationError: 최대 항목 수 초과
    """
    settings = get_settings()
    if len(items) > settings.max_items_per_field:
        raise InputValidationError(
            f"'{field_name}' 항목이 너무 많습니다: {len(items)}개 (최대 {settings.max_items_per_field}개)",
            details={"field": field_name, "count": len(items)},
        )
    return items


def tokenize_field(field_name: str, value: str) -> list[str]:
    """길이 검증 후 토큰화하고 항목 수를 검증합니다."""
    validate_field_length(field_name, value)
    return validate_item_count(field_name, tokenize(value))
