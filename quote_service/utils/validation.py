"""입력 유효성 검증 유틸리티.

URL 경로로 들어오는 레코드 ID 와 상태 값을 검증합니다.
레코드 ID 는 그대로 파일명이 되므로 경로 순회 등을 막아야 합니다.
"""

import re
from enum import Enum
from typing import Type, TypeVar

from quote_service.exceptions import InputValidationError


E = TypeVar("E", bound=Enum)

# 저장소가 발급하는 ID 형식 (예: ASMT-20261018-a1b2c3, Q-20261018-a1b2c3, INV-20261018-AB12C)
RECORD_ID_PATTERN = re.compile(r"^[A-Z]{1,5}-\d{8}-[0-9A-Za-z]{4,12}$")

# 다운로드 파일명에 쓸 수 없는 문자
UNSAFE_FILENAME_CHARS = re.compile(r"[<>:\"/\\|?*\x00-\x1f]")


def validate_record_id(record_id: str) -> str:
    """
    레코드 ID 형식 검증.

    Args:
        record_id: URL 로 전달된 ID

    Returns:
        앞뒤 공백을 제거한 ID

    Raises:
        InputValidationError: 형식이 맞지 않는 ID
    """
    cleaned = (record_id or "").strip()
    if not RECORD_ID_PATTERN.match(cleaned):
        raise InputValidationError(
            f"잘못된 ID 형식입니다: {record_id}",
            details={"id": record_id},
        )
    return cleaned


def parse_choice(value: str, enum_class: Type[E]) -> E:
    """
    문자열을 열거형 값으로 변환합니다.

    Raises:
        InputValidationError: 허용되지 않는 값
    """
    try:
        return enum_class(value)
    except ValueError:
        allowed = [member.value for member in enum_class]
        raise InputValidationError(
            f"허용되지 않는 값입니다: {value}",
            details={"value": value, "allowed": allowed},
        )


def safe_filename(title: str, fallback: str = "proposal") -> str:
    """다운로드용 파일명으로 쓸 수 있도록 위험 문자를 제거합니다."""
    cleaned = UNSAFE_FILENAME_CHARS.sub("", title or "").strip()
    return cleaned[:120] or fallback
