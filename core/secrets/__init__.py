"""
core/secrets - 시크릿 라이프사이클 관리

Secrets Manager에 SSH 공개키와 배포 시크릿을 추가/조회/목록/삭제하고,
배포에 필요한 시크릿을 대화형으로 초기화합니다.

모든 스토어 호출은 DryRunExecutor를 거치며, dry-run 모드에서는
동등한 AWS CLI 명령만 출력합니다.
"""

from .execution import DryRunExecutor, StoreCommand
from .initialize import InitSummary, initialize_secrets
from .manager import SecretManager, read_key_file
from .preflight import check_credentials, check_dependencies, find_missing_tools, run_preflight
from .prompts import Prompter, TerminalPrompter
from .store import BotoSecretStore, SecretStore
from .types import ExecutionContext, SecretListing, SecretReference, resolve

__all__ = [
    # Types
    "ExecutionContext",
    "SecretReference",
    "SecretListing",
    "resolve",
    # Execution
    "StoreCommand",
    "DryRunExecutor",
    # Store
    "SecretStore",
    "BotoSecretStore",
    # Prompts
    "Prompter",
    "TerminalPrompter",
    # Handlers
    "SecretManager",
    "read_key_file",
    "initialize_secrets",
    "InitSummary",
    # Preflight
    "check_dependencies",
    "check_credentials",
    "find_missing_tools",
    "run_preflight",
]
