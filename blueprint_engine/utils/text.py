"""텍스트 정리 및 조합 유틸리티.

생성기들이 공통으로 사용하는 순수 함수 모음입니다.
모든 함수는 입력만으로 결과가 결정되며 부수 효과가 없습니다.
"""

import re
from typing import Any, Iterable, Optional

_WORD_PATTERN = re.compile(r"[a-z0-9]+")
_CONTENT_PATTERN = re.compile(r"[^\W_]")
_SENTENCE_END = (".", "!", "?")


def clean_text(value: Optional[Any]) -> str:
    """None을 빈 문자열로 바꾸고 앞뒤 공백을 제거합니다."""
    if value is None:
        return ""
    return str(value).strip()


def clean_items(values: Optional[Iterable[Any]]) -> list[str]:
    """
    시퀀스의 각 항목을 정리합니다.

    - 앞뒤 공백 제거
    - 빈 항목 제거
    - 순서 유지 (중복은 제거하지 않음)
    """
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    cleaned = []
    for value in values:
        text = clean_text(value)
        if text:
            cleaned.append(text)
    return cleaned


def dedupe(items: Iterable[str]) -> list[str]:
    """대소문자 구분 없이 중복을 제거합니다. 먼저 나온 항목이 남습니다."""
    seen: set[str] = set()
    result = []
    for item in items:
        key = item.casefold()
        if key in seen:
            continue
        seen.add(key)
        result.append(item)
    return result


def has_content(text: str) -> bool:
    """글자나 숫자가 하나라도 있으면 True. 구두점만 있는 항목은 빈 값으로 봅니다."""
    return bool(_CONTENT_PATTERN.search(text))


def meaningful(items: Iterable[str]) -> list[str]:
    """구두점만 있는 항목(".", "!?" 등)을 제외합니다. 순서 유지."""
    return [item for item in items if has_content(item)]


def or_default(value: str, fallback: str) -> str:
    """값이 비어 있거나 구두점뿐이면 기본 문구를 반환합니다."""
    return value if has_content(value) else fallback


def sentence(text: str) -> str:
    """문장 끝에 마침표가 없으면 붙입니다."""
    text = text.strip()
    if not text:
        return text
    if text.endswith(_SENTENCE_END):
        return text
    return f"{text}."


def strip_sentence(text: str) -> str:
    """문장 끝의 마침표/느낌표/물음표를 제거합니다 (문장 중간 삽입용)."""
    return text.strip().rstrip(".!?").strip()


def lower_first(text: str) -> str:
    """
    첫 글자를 소문자로 바꿉니다.

    약어(KPI, ROI 등)처럼 두 번째 글자도 대문자인 경우는 그대로 둡니다.
    """
    if not text:
        return text
    if len(text) > 1 and text[1].isupper():
        return text
    return text[0].lower() + text[1:]


def human_join(items: Iterable[str], conjunction: str = "and") -> str:
    """
    목록을 자연스러운 영어 나열로 만듭니다.

    예시:
        ["a"] -> "a"
        ["a", "b"] -> "a and b"
        ["a", "b", "c"] -> "a, b, and c"
    """
    values = [item for item in items if item]
    if not values:
        return ""
    if len(values) == 1:
        return values[0]
    if len(values) == 2:
        return f"{values[0]} {conjunction} {values[1]}"
    return f"{', '.join(values[:-1])}, {conjunction} {values[-1]}"


def split_terms(text: str) -> list[str]:
    """쉼표 또는 슬래시로 구분된 문구를 항목 목록으로 나눕니다."""
    return clean_items(re.split(r"[,/]", text))


def words(text: str) -> list[str]:
    """소문자 영숫자 단어 목록."""
    return _WORD_PATTERN.findall(text.lower())


def matches_keyword(text: str, keywords: Iterable[str]) -> bool:
    """텍스트의 단어 중 하나라도 키워드로 시작하면 True."""
    tokens = words(text)
    return any(token.startswith(keyword) for keyword in keywords for token in tokens)


def contains_term(text: str, terms: Iterable[str]) -> bool:
    """텍스트(소문자)에 용어 중 하나라도 포함되면 True."""
    lowered = text.lower()
    return any(term in lowered for term in terms)


def pick(items: list[str], index: int, fallback: str) -> str:
    """인덱스를 순환하며 항목을 고릅니다. 목록이 비어 있으면 기본값."""
    if not items:
        return fallback
    return items[index % len(items)]


def upper_first(text: str) -> str:
    """첫 글자를 대문자로 바꿉니다 (문장 시작용)."""
    if not text:
        return text
    return text[0].upper() + text[1:]
