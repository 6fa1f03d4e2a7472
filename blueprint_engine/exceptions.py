"""
블루프린트 엔진 커스텀 예외 계층입니다.
생성 코어는 입력 전체에 대해 실패하지 않도록 설계되어 있으며,
이 예외들은 폼 검증, 내보내기, API 경계에서 사용됩니다.
"""

from typing import Optional, Any


class BlueprintEngineError(Exception):
    """블루프린트 엔진 기본 예외 클래스."""

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


class InputValidationError(BlueprintEngineError):
    """폼 입력 유효성 검증 에러 (400 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_001", details=details)


class GenerationError(BlueprintEngineError):
    """블루프린트 생성 단계 에러."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_GEN_001", details=details)


class ExportError(BlueprintEngineError):
    """블루프린트 내보내기(렌더링) 에러."""

    def __init__(
        self,
        message: str,
        details: Optional[Any] = None,
        error_code: str = "ERR_EXPORT_001",
    ):
        super().__init__(message, error_code=error_code, details=details)


class UnsupportedFormatError(ExportError):
    """지원하지 않는 내보내기 형식 (400 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, details=details, error_code="ERR_EXPORT_002")
