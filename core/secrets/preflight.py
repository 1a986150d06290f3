"""
core/secrets/preflight.py - 실행 전 점검

핸들러 실행 전에 한 번 수행합니다. 실패 시 PreflightError로 즉시 종료하며 재시도하지 않습니다.

점검 순서:
    1. 필수 외부 도구 (aws, jq) 존재 여부 - 모든 모드
    2. AWS 자격 증명 (sts get-caller-identity) - dry-run이 아닐 때만
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError, ClientError

from core.config import REQUIRED_TOOLS
from core.exceptions import CredentialsError, MissingToolsError

from .client import create_session, get_client

if TYPE_CHECKING:
    import boto3

    from .types import ExecutionContext

logger = logging.getLogger(__name__)


def find_missing_tools(
    tools: Iterable[str] = REQUIRED_TOOLS,
    which: Callable[[str], str | None] | None = None,
) -> list[str]:
    """PATH에서 찾을 수 없는 도구 목록 (입력 순서 유지)"""
    which = which or shutil.which
    return [tool for tool in tools if which(tool) is None]


def check_dependencies(tools: Iterable[str] = REQUIRED_TOOLS) -> None:
    """필수 외부 도구 확인

    Raises:
        MissingToolsError: 하나 이상 없는 경우 (없는 도구 전체를 포함)
    """
    tools = list(tools)
    missing = find_missing_tools(tools)
    if missing:
        raise MissingToolsError(missing)
    logger.debug("Required tools present: %s", ", ".join(tools))


def check_credentials(session: boto3.Session) -> dict[str, Any]:
    """AWS 자격 증명 확인 (sts:GetCallerIdentity)

    Args:
        session: boto3 Session

    Returns:
        GetCallerIdentity 응답 (Account, Arn, UserId)

    Raises:
        CredentialsError: 자격 증명이 없거나 유효하지 않은 경우
    """
    try:
        sts = get_client(session, "sts")
        identity = sts.get_caller_identity()
    except (ClientError, BotoCoreError) as e:
        logger.debug("Credential check failed: %s", e)
        raise CredentialsError(cause=e) from e

    logger.debug("Authenticated as %s", identity.get("Arn"))
    return identity


def run_preflight(context: ExecutionContext) -> dict[str, Any] | None:
    """실행 전 점검 일괄 수행

    dry-run 모드에서는 자격 증명 확인을 건너뜁니다.

    Returns:
        GetCallerIdentity 응답 (dry-run이면 None)

    Raises:
        MissingToolsError: 필수 도구가 없는 경우
        CredentialsError: 자격 증명 확인 실패 (프로파일 없음 포함)
    """
    check_dependencies()
    if context.dry_run:
        logger.debug("Dry-run: skipping credential check")
        return None

    try:
        session = create_session(context)
    except BotoCoreError as e:
        raise CredentialsError(cause=e) from e
    return check_credentials(session)
