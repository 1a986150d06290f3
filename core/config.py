"""
core/config.py - 중앙 설정 관리

시크릿 관리 도구 전체에서 공유하는 기본값과 환경 변수 기반 설정을 제공합니다.

환경 변수:
    AWS_REGION    Secrets Manager 리전 (기본: us-east-1)
    AWS_PROFILE   AWS CLI 프로파일 (선택)
    DRY_RUN       "true"이면 dry-run 모드 (cli/app.py의 --dry-run 옵션과 동일)

Usage:
    from core.config import SecretsConfig

    config = SecretsConfig.from_env()
    context = config.to_context(dry_run=True)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.secrets.types import ExecutionContext

logger = logging.getLogger(__name__)

# 시크릿 이름 기본 네임스페이스
DEFAULT_PREFIX = "worxco/production"

DEFAULT_REGION = "us-east-1"

# delete-secret 복구 대기 기간 (일)
RECOVERY_WINDOW_DAYS = 7

# preflight에서 확인하는 외부 도구 (AWS CLI, jq)
REQUIRED_TOOLS: tuple[str, ...] = ("aws", "jq")


def get_version() -> str:
    """버전 문자열 반환

    프로젝트 루트의 version.txt에서 읽음. 읽을 수 없으면 "0.0.1".
    """
    version_file = Path(__file__).resolve().parent.parent / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip()
    except OSError as e:
        logger.debug("Failed to read version file: %s", e)
    return "0.0.1"


@dataclass
class SecretsConfig:
    """환경 변수 기반 실행 설정

    Attributes:
        region: Secrets Manager 리전
        profile: AWS 프로파일 이름 (None이면 기본 자격 증명 체인)
        default_prefix: prefix 미지정 시 사용할 네임스페이스
    """

    region: str = DEFAULT_REGION
    profile: str | None = None
    default_prefix: str = DEFAULT_PREFIX

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SecretsConfig:
        """환경 변수에서 설정 생성

        Args:
            environ: 환경 변수 매핑 (None이면 os.environ)

        Returns:
            SecretsConfig 인스턴스
        """
        env = os.environ if environ is None else environ
        return cls(
            region=env.get("AWS_REGION") or DEFAULT_REGION,
            profile=env.get("AWS_PROFILE") or None,
        )

    def to_context(self, dry_run: bool = False) -> ExecutionContext:
        """실행 컨텍스트로 변환 (이후 변경 불가)"""
        from core.secrets.types import ExecutionContext

        return ExecutionContext(
            dry_run=dry_run,
            region=self.region,
            profile=self.profile,
            default_prefix=self.default_prefix,
        )
