# core/__init__.py
"""
core - AWS Secrets Manager 시크릿 관리 CLI 인프라

아키텍처:
    core/
    ├── secrets/        # 시크릿 핸들러, dry-run 실행 래퍼, 스토어 어댑터, preflight
    ├── cli/            # Click CLI, Rich 콘솔, i18n
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.config import SecretsConfig
    from core.secrets import BotoSecretStore, SecretManager

    context = SecretsConfig.from_env().to_context(dry_run=True)
    manager = SecretManager(BotoSecretStore(context), context)
    manager.list_secrets()
"""

from core import config, exceptions

__all__: list[str] = [
    "config",
    "exceptions",
]
