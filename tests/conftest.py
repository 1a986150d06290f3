"""
tests/conftest.py - pytest 공통 픽스처

스토어/입력/콘솔 대역과 AWS 모킹 헬퍼를 제공합니다.

Usage:
    def test_something(fake_store, manager, output):
        # fake_store: 호출을 기록하는 메모리 SecretStore
        # manager: fake_store를 사용하는 SecretManager (실제 모드)
        # output(): 지금까지 콘솔에 출력된 텍스트
        pass
"""

import io
from typing import Any, Dict, List, Optional, Tuple

import pytest
from rich.console import Console

from core.cli.i18n import set_lang
from core.secrets.manager import SecretManager
from core.secrets.types import ExecutionContext

TEST_REGION = "us-east-1"
TEST_ACCOUNT = "123456789012"


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("DRY_RUN", raising=False)
    set_lang("en")

    yield

    set_lang("en")


# =============================================================================
# 대역 (Fakes)
# =============================================================================


def make_arn(secret_id: str) -> str:
    return f"arn:aws:secretsmanager:{TEST_REGION}:{TEST_ACCOUNT}:secret:{secret_id}-AbCdEf"


class FakeSecretStore:
    """호출을 기록하는 메모리 SecretStore

    Attributes:
        secrets: secret_id -> {"value", "description"}
        calls: (작업 이름, 인자 튜플) 목록
    """

    def __init__(self, secrets: Optional[Dict[str, str]] = None):
        self.secrets: Dict[str, Dict[str, Any]] = {}
        self.calls: List[Tuple[str, tuple]] = []
        self.listing: Optional[List[Dict[str, Any]]] = None
        self._versions = 0
        for secret_id, value in (secrets or {}).items():
            self.secrets[secret_id] = {"value": value, "description": None}

    @property
    def operations(self) -> List[str]:
        return [name for name, _ in self.calls]

    def _next_version(self) -> str:
        self._versions += 1
        return f"v{self._versions}"

    def describe(self, secret_id: str) -> Optional[Dict[str, Any]]:
        self.calls.append(("describe", (secret_id,)))
        if secret_id not in self.secrets:
            return None
        return {"ARN": make_arn(secret_id), "Name": secret_id}

    def create(self, secret_id: str, description: str, value: str) -> Dict[str, Any]:
        self.calls.append(("create", (secret_id, description, value)))
        self.secrets[secret_id] = {"value": value, "description": description}
        return {"ARN": make_arn(secret_id), "Name": secret_id, "VersionId": self._next_version()}

    def update(self, secret_id: str, value: str) -> Dict[str, Any]:
        self.calls.append(("update", (secret_id, value)))
        self.secrets[secret_id]["value"] = value
        return {"ARN": make_arn(secret_id), "Name": secret_id, "VersionId": self._next_version()}

    def get(self, secret_id: str) -> str:
        self.calls.append(("get", (secret_id,)))
        return self.secrets[secret_id]["value"]

    def list(self) -> List[Dict[str, Any]]:
        self.calls.append(("list", ()))
        if self.listing is not None:
            return self.listing
        return [
            {"Name": secret_id, "Description": item["description"]}
            for secret_id, item in self.secrets.items()
        ]

    def delete(self, secret_id: str, recovery_window_days: int = 7) -> Dict[str, Any]:
        self.calls.append(("delete", (secret_id, recovery_window_days)))
        self.secrets.pop(secret_id, None)
        return {"ARN": make_arn(secret_id), "Name": secret_id}


class ScriptedPrompter:
    """미리 정한 응답을 순서대로 돌려주는 Prompter

    응답이 모두 소진되면 EOFError (표준 입력 종료와 동일)
    """

    def __init__(self, lines: Optional[List[str]] = None, secrets: Optional[List[str]] = None):
        self.lines = list(lines or [])
        self.secrets = list(secrets or [])
        self.prompts: List[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError(prompt)
        return self.lines.pop(0)

    def read_secret(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.secrets:
            raise EOFError(prompt)
        return self.secrets.pop(0)


def make_console() -> Console:
    """색상/터미널 제어 없이 버퍼에 기록하는 콘솔"""
    return Console(file=io.StringIO(), color_system=None, force_terminal=False, width=200)


def console_text(console: Console) -> str:
    return console.file.getvalue()


# =============================================================================
# 픽스처
# =============================================================================


@pytest.fixture
def fake_store():
    """빈 FakeSecretStore"""
    return FakeSecretStore()


@pytest.fixture
def prompter():
    """응답이 없는 ScriptedPrompter (테스트에서 lines/secrets 설정)"""
    return ScriptedPrompter()


@pytest.fixture
def console():
    """버퍼 콘솔"""
    return make_console()


@pytest.fixture
def output(console):
    """콘솔에 출력된 텍스트를 반환하는 함수"""
    return lambda: console_text(console)


@pytest.fixture
def real_context():
    return ExecutionContext(dry_run=False, region=TEST_REGION)


@pytest.fixture
def dry_context():
    return ExecutionContext(dry_run=True, region=TEST_REGION)


@pytest.fixture
def manager(fake_store, real_context, prompter, console):
    """실제 모드 SecretManager"""
    return SecretManager(fake_store, real_context, prompter=prompter, console=console)


@pytest.fixture
def dry_manager(fake_store, dry_context, prompter, console):
    """dry-run 모드 SecretManager"""
    return SecretManager(fake_store, dry_context, prompter=prompter, console=console)


@pytest.fixture
def key_file(tmp_path):
    """끝에 개행이 있는 SSH 공개키 파일"""
    path = tmp_path / "id_ed25519.pub"
    path.write_text("ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIBtest alice@laptop\n")
    return path


# =============================================================================
# 유틸리티 함수
# =============================================================================


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation_name: str = "TestOperation",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation_name,
    )


# =============================================================================
# moto 통합
# =============================================================================


@pytest.fixture
def aws_credentials(monkeypatch):
    """moto 사용 시 AWS 자격 증명 설정"""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)


@pytest.fixture
def moto_secretsmanager(aws_credentials):
    """moto를 사용한 Secrets Manager 모킹 (boto3 Session 반환)"""
    moto = pytest.importorskip("moto")

    with moto.mock_aws():
        import boto3

        yield boto3.Session(region_name=TEST_REGION)


@pytest.fixture
def client_error():
    """create_mock_client_error 픽스처 버전"""
    return create_mock_client_error
