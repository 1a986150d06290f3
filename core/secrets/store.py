"""
core/secrets/store.py - Secrets Manager 스토어 어댑터

핸들러가 의존하는 원격 스토어 인터페이스(SecretStore)와
boto3 구현(BotoSecretStore)을 제공합니다.

모든 호출은 원격 호출이며 실패 시 StoreError로 변환되어 그대로 전파됩니다.
(BotoCoreError 포함, 예: 빈 SecretString 파라미터 검증 실패)
describe만 예외적으로 ResourceNotFoundException을 "없음"(None)으로 반환합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from botocore.exceptions import BotoCoreError, ClientError

from core.config import RECOVERY_WINDOW_DAYS
from core.exceptions import StoreError, is_not_found

from .client import create_session, get_client

if TYPE_CHECKING:
    import boto3

    from .types import ExecutionContext

logger = logging.getLogger(__name__)


class SecretStore(Protocol):
    """원격 시크릿 스토어 인터페이스"""

    def describe(self, secret_id: str) -> dict[str, Any] | None: ...

    def create(self, secret_id: str, description: str, value: str) -> dict[str, Any]: ...

    def update(self, secret_id: str, value: str) -> dict[str, Any]: ...

    def get(self, secret_id: str) -> str: ...

    def list(self) -> list[dict[str, Any]]: ...

    def delete(self, secret_id: str, recovery_window_days: int = RECOVERY_WINDOW_DAYS) -> dict[str, Any]: ...


class BotoSecretStore:
    """boto3 기반 SecretStore 구현

    session/client는 처음 사용할 때 생성합니다.
    dry-run 실행에서는 호출되지 않으므로 자격 증명 없이도 동작합니다.
    """

    def __init__(self, context: ExecutionContext, session: boto3.Session | None = None):
        self.context = context
        self._session = session
        self._client: Any = None

    @property
    def session(self) -> boto3.Session:
        if self._session is None:
            self._session = create_session(self.context)
        return self._session

    @property
    def client(self) -> Any:
        """Lazy-initialize client."""
        if self._client is None:
            self._client = get_client(self.session, "secretsmanager", region_name=self.context.region)
        return self._client

    def describe(self, secret_id: str) -> dict[str, Any] | None:
        """시크릿 메타데이터 조회. 없으면 None."""
        try:
            return self.client.describe_secret(SecretId=secret_id)
        except (ClientError, BotoCoreError) as e:
            if is_not_found(e):
                logger.debug("Secret not found: %s", secret_id)
                return None
            raise StoreError.from_client_error("describe_secret", e) from e

    def create(self, secret_id: str, description: str, value: str) -> dict[str, Any]:
        try:
            return self.client.create_secret(Name=secret_id, Description=description, SecretString=value)
        except (ClientError, BotoCoreError) as e:
            raise StoreError.from_client_error("create_secret", e) from e

    def update(self, secret_id: str, value: str) -> dict[str, Any]:
        try:
            return self.client.put_secret_value(SecretId=secret_id, SecretString=value)
        except (ClientError, BotoCoreError) as e:
            raise StoreError.from_client_error("put_secret_value", e) from e

    def get(self, secret_id: str) -> str:
        try:
            response = self.client.get_secret_value(SecretId=secret_id)
        except (ClientError, BotoCoreError) as e:
            raise StoreError.from_client_error("get_secret_value", e) from e
        return response.get("SecretString", "")

    def list(self) -> list[dict[str, Any]]:
        """계정의 전체 시크릿 목록 (페이지네이션 포함, 필터 없음)"""
        secrets: list[dict[str, Any]] = []
        try:
            paginator = self.client.get_paginator("list_secrets")
            for page in paginator.paginate():
                secrets.extend(page.get("SecretList", []))
        except (ClientError, BotoCoreError) as e:
            raise StoreError.from_client_error("list_secrets", e) from e
        return secrets

    def delete(self, secret_id: str, recovery_window_days: int = RECOVERY_WINDOW_DAYS) -> dict[str, Any]:
        try:
            return self.client.delete_secret(SecretId=secret_id, RecoveryWindowInDays=recovery_window_days)
        except (ClientError, BotoCoreError) as e:
            raise StoreError.from_client_error("delete_secret", e) from e
