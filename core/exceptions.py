"""
core/exceptions.py - 시크릿 관리 예외 계층

CLI(core/cli/app.py)는 SecretsError 하위 예외를 잡아 메시지를 출력하고 종료 코드로 변환합니다.

    SecretsError
    ├── PreflightError          실행 전 점검 실패 (hint 포함)
    │   ├── MissingToolsError
    │   └── CredentialsError
    ├── ValidationError         입력값 오류
    │   └── KeyFileNotFoundError
    ├── StoreError              Secrets Manager 호출 실패 (재시도 없이 전파)
    └── UserCancelError         delete 확인 거절 (종료 코드 0)

Usage:
    from core.exceptions import StoreError, is_not_found

    try:
        client.describe_secret(SecretId=secret_id)
    except ClientError as e:
        if is_not_found(e):
            return None
        raise StoreError.from_client_error("describe_secret", e) from e
"""

from __future__ import annotations

from typing import Any


class SecretsError(Exception):
    """기본 예외

    Attributes:
        message: 사용자에게 보여줄 메시지
        cause: 원인 예외
        details: to_dict()에 포함되는 부가 정보
    """

    def __init__(self, message: str, cause: Exception | None = None, **details: Any):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details: dict[str, Any] = dict(details)

    def __str__(self) -> str:
        return f"{self.message}: {self.cause}" if self.cause else self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "cause": None if self.cause is None else str(self.cause),
            "details": self.details,
        }


# =============================================================================
# Preflight
# =============================================================================


class PreflightError(SecretsError):
    """스토어 호출 전에 발생하는 점검 실패"""

    def __init__(self, message: str, hint: str | None = None, cause: Exception | None = None):
        super().__init__(message, cause, hint=hint)
        self.hint = hint


class MissingToolsError(PreflightError):
    """PATH에 없는 필수 도구 (없는 도구 전체를 한 번에 보고)"""

    def __init__(self, tools: list[str]):
        names = " ".join(tools)
        super().__init__(f"Missing required tools: {names}", hint=f"Please install: {names}")
        self.tools = list(tools)
        self.details["tools"] = self.tools


class CredentialsError(PreflightError):
    """sts:GetCallerIdentity 실패"""

    def __init__(self, cause: Exception | None = None):
        super().__init__("AWS credentials not configured", hint="Run: aws configure", cause=cause)


# =============================================================================
# Validation
# =============================================================================


class ValidationError(SecretsError):
    """입력값 오류"""

    def __init__(self, field: str, value: Any, expected: str, cause: Exception | None = None):
        super().__init__(
            f"Invalid {field}: expected {expected}, got '{value}'",
            cause,
            field=field,
            value=str(value),
            expected=expected,
        )
        self.field = field
        self.value = value
        self.expected = expected


class KeyFileNotFoundError(ValidationError):
    """SSH 공개키 파일이 없거나 읽을 수 없음"""

    def __init__(self, path: str, cause: Exception | None = None):
        super().__init__("key file", path, "a readable file", cause)
        self.message = f"Key file not found: {path}"
        self.path = path

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Store
# =============================================================================


class StoreError(SecretsError):
    """Secrets Manager API 호출 실패

    메시지 형식: "secretsmanager.<operation> failed (<code>): <message>"
    """

    def __init__(
        self,
        operation: str,
        error_code: str | None = None,
        error_message: str | None = None,
        cause: Exception | None = None,
    ):
        message = f"secretsmanager.{operation}"
        if error_code:
            message += f" failed ({error_code})"
        if error_message:
            message += f": {error_message}"

        super().__init__(message, cause, operation=operation, error_code=error_code)
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_client_error(cls, operation: str, client_error: Exception) -> StoreError:
        """botocore ClientError에서 코드/메시지를 꺼내 생성

        response 속성이 없는 예외는 str(e)를 메시지로 사용합니다.
        """
        response = getattr(client_error, "response", None)
        if response is None:
            return cls(operation, error_message=str(client_error), cause=client_error)

        error = response.get("Error", {})
        return cls(operation, error.get("Code"), error.get("Message"), cause=client_error)


class UserCancelError(SecretsError):
    """사용자가 확인 프롬프트를 거절 (오류가 아님)"""

    def __init__(self, action: str = "unknown"):
        super().__init__("Cancelled", action=action)
        self.action = action


# =============================================================================
# 오류 분류
# =============================================================================

ACCESS_DENIED_CODES = frozenset({"AccessDenied", "AccessDeniedException", "UnauthorizedAccess"})

THROTTLING_CODES = frozenset(
    {"Throttling", "ThrottlingException", "RequestLimitExceeded", "TooManyRequestsException", "RateExceeded"}
)

NOT_FOUND_CODES = frozenset({"ResourceNotFoundException", "NotFoundException"})


def error_code(error: Exception) -> str | None:
    """StoreError 또는 ClientError의 AWS 오류 코드"""
    if isinstance(error, StoreError):
        return error.error_code
    response = getattr(error, "response", None)
    if isinstance(response, dict):
        return response.get("Error", {}).get("Code")
    return None


def is_access_denied(error: Exception) -> bool:
    return error_code(error) in ACCESS_DENIED_CODES


def is_throttling(error: Exception) -> bool:
    return error_code(error) in THROTTLING_CODES


def is_not_found(error: Exception) -> bool:
    """describe 프로브에서 "없음"과 실제 실패를 구분"""
    return error_code(error) in NOT_FOUND_CODES
