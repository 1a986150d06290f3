"""
core/secrets/types.py - 시크릿 관리 타입 정의

요청 단위로만 존재하는 값 객체들. 로컬 상태나 캐시는 없습니다.

주요 구성 요소:
- ExecutionContext: 실행 모드(dry-run)와 리전/프로파일 (생성 후 변경 불가)
- SecretReference: prefix + name 으로 구성된 시크릿 식별자
- SecretListing: list 결과 한 행
- resolve: (prefix, name) -> SecretReference 순수 함수
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from core.config import DEFAULT_PREFIX, DEFAULT_REGION
from core.exceptions import ValidationError


@dataclass(frozen=True)
class ExecutionContext:
    """프로세스 단위 실행 컨텍스트

    CLI 인자 파싱 시 한 번 생성되어 executor, store, 각 핸들러에 전달됩니다.

    Attributes:
        dry_run: True면 스토어를 호출하지 않고 명령만 출력
        region: Secrets Manager 리전
        profile: AWS 프로파일 이름
        default_prefix: prefix 미지정 시 사용할 네임스페이스
    """

    dry_run: bool = False
    region: str = DEFAULT_REGION
    profile: str | None = None
    default_prefix: str = DEFAULT_PREFIX


@dataclass(frozen=True)
class SecretReference:
    """시크릿 식별자

    Attributes:
        prefix: 네임스페이스 (예: worxco/production)
        name: 네임스페이스 내 상대 경로 (예: ssh-keys/alice)
    """

    prefix: str
    name: str

    @property
    def secret_id(self) -> str:
        """스토어 키로 사용되는 전체 이름 (prefix/name)"""
        return f"{self.prefix}/{self.name}"

    def __str__(self) -> str:
        return self.secret_id


def resolve(prefix: str | None, name: str, default_prefix: str = DEFAULT_PREFIX) -> SecretReference:
    """prefix와 name으로 SecretReference 생성

    prefix가 None 또는 빈 문자열이면 default_prefix를 사용합니다.
    이름은 정규화하지 않습니다 (스토어가 판단).

    Args:
        prefix: 네임스페이스 (선택)
        name: 시크릿 이름
        default_prefix: 기본 네임스페이스

    Returns:
        SecretReference

    Raises:
        ValidationError: name이 비어 있는 경우
    """
    if not name:
        raise ValidationError("secret name", name, "a non-empty name")
    return SecretReference(prefix=prefix or default_prefix, name=name)


@dataclass
class SecretListing:
    """list-secrets 결과 한 행

    Attributes:
        name: 시크릿 전체 이름
        description: 설명 (없을 수 있음)
        last_changed: 마지막 변경 시각
    """

    name: str
    description: str | None = None
    last_changed: datetime | None = None

    @property
    def last_changed_text(self) -> str:
        if isinstance(self.last_changed, datetime):
            return self.last_changed.isoformat()
        return str(self.last_changed) if self.last_changed else "-"

    @classmethod
    def from_api(cls, entry: dict[str, Any]) -> SecretListing:
        """ListSecrets 응답의 SecretList 항목에서 생성"""
        return cls(
            name=entry.get("Name", ""),
            description=entry.get("Description") or None,
            last_changed=entry.get("LastChangedDate"),
        )
