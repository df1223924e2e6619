"""
견적 서비스 커스텀 예외 계층입니다.
API 응답으로 변환될 구조화된 에러 코드와 메시지를 제공합니다.

가격 계산/예산 비교/제안서 작성 코어는 예외를 던지지 않으며,
아래 예외들은 저장소와 API 경계에서만 사용됩니다.
"""

from typing import Optional, Any


class QuoteServiceError(Exception):
    """견적 서비스 기본 예외 클래스."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class InputValidationError(QuoteServiceError):
    """입력 유효성 검증 에러 (400 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_001", details=details)


class StorageError(QuoteServiceError):
    """파일 저장소 관련 에러."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_STORE_001", details=details)


class QuoteConversionError(QuoteServiceError):
    """견적서를 청구서로 전환할 수 없는 상태일 때의 에러 (409 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_QUOTE_001", details=details)
