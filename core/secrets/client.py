"""
core/secrets/client.py - boto3 session/client 생성 헬퍼

스토어와 preflight가 같은 설정으로 client를 만들도록 한곳에 모았습니다.
스토어 오류는 호출자에게 그대로 보여야 하므로 botocore 재시도는 끕니다.

Example:
    session = create_session(context)
    sm = get_client(session, "secretsmanager", region_name=context.region)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from botocore.config import Config

if TYPE_CHECKING:
    import boto3

    from core.secrets.types import ExecutionContext

CONNECT_TIMEOUT = 10  # 초
READ_TIMEOUT = 30  # 초

# 재시도 없음 (첫 시도만)
NO_RETRIES = {"max_attempts": 1, "mode": "standard"}


def client_config() -> Config:
    """타임아웃과 재시도 설정이 적용된 botocore Config"""
    return Config(
        retries=dict(NO_RETRIES),  # pyright: ignore[reportArgumentType]
        connect_timeout=CONNECT_TIMEOUT,
        read_timeout=READ_TIMEOUT,
    )


def create_session(context: ExecutionContext) -> boto3.Session:
    """컨텍스트의 프로파일/리전으로 boto3 Session 생성

    Raises:
        botocore.exceptions.ProfileNotFound: 프로파일이 없는 경우
    """
    import boto3

    return boto3.Session(profile_name=context.profile, region_name=context.region)


def get_client(session: boto3.Session, service_name: str, region_name: str | None = None) -> Any:
    """session에서 client 생성 (region_name이 None이면 세션 리전)"""
    return session.client(service_name, region_name=region_name, config=client_config())  # type: ignore[call-overload]
