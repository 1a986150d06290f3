"""
core/secrets/manager.py - 시크릿 라이프사이클 핸들러

add-ssh-key / add-secret / get / list / delete 동작을 구현합니다.
스토어 호출은 모두 DryRunExecutor를 거치므로 dry-run 모드에서는 스토어를 건드리지 않습니다.

add 계열은 describe 프로브 후 update 또는 create를 호출하는 2단계 방식입니다.
원자적 upsert가 아니므로 같은 시크릿에 동시 실행하면 create가 충돌할 수 있습니다
(단일 운영자 순차 사용 전제).

Usage:
    from core.secrets import BotoSecretStore, SecretManager

    manager = SecretManager(BotoSecretStore(context), context)
    manager.add_secret("root-password", "s3cret", "worxco/sandbox")
    manager.list_secrets("worxco/sandbox")
"""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.cli.i18n import t
from core.cli.ui.console import print_info, print_success, print_warning
from core.config import RECOVERY_WINDOW_DAYS
from core.exceptions import KeyFileNotFoundError, UserCancelError

from .execution import DryRunExecutor, StoreCommand
from .prompts import Prompter, TerminalPrompter
from .types import SecretListing, SecretReference, resolve

if TYPE_CHECKING:
    from .store import SecretStore
    from .types import ExecutionContext

logger = logging.getLogger(__name__)

SSH_KEYS_PATH = "ssh-keys"

# delete 확인 문자열 (정확히 일치해야 함, 번역하지 않음)
CONFIRM_LITERAL = "yes"

REDACTED = "[REDACTED]"


def read_key_file(key_file: str) -> str:
    """공개키 파일 내용 읽기 (끝의 개행 제거)

    Raises:
        KeyFileNotFoundError: 파일이 없거나 읽을 수 없는 경우
    """
    path = Path(key_file).expanduser()
    if not path.is_file():
        raise KeyFileNotFoundError(key_file)
    try:
        return path.read_text(encoding="utf-8").rstrip("\n")
    except (OSError, UnicodeDecodeError) as e:
        raise KeyFileNotFoundError(key_file, cause=e) from e


def _arn(response: Any) -> str:
    if isinstance(response, dict):
        return response.get("ARN", "")
    return ""


class SecretManager:
    """시크릿 라이프사이클 핸들러

    Args:
        store: 원격 시크릿 스토어
        context: 실행 컨텍스트 (dry-run 여부, 리전)
        prompter: 대화형 입력 (기본: 터미널)
        console: 출력 콘솔 (기본: stdout)
    """

    def __init__(
        self,
        store: SecretStore,
        context: ExecutionContext,
        prompter: Prompter | None = None,
        console: Console | None = None,
    ):
        self.store = store
        self.context = context
        self.console = console or Console()
        self.prompter = prompter or TerminalPrompter(self.console)
        self.executor = DryRunExecutor(context, self.console)

    @property
    def dry_run(self) -> bool:
        return self.context.dry_run

    def reference(self, name: str, prefix: str | None = None) -> SecretReference:
        """prefix 미지정 시 컨텍스트 기본 prefix로 식별자 생성"""
        return resolve(prefix, name, self.context.default_prefix)

    # =========================================================================
    # add-ssh-key / add-secret
    # =========================================================================

    def add_ssh_key(self, name: str, key_file: str, prefix: str | None = None) -> str:
        """SSH 공개키를 <prefix>/ssh-keys/<name> 에 저장

        Args:
            name: 키 소유자 이름
            key_file: 공개키 파일 경로
            prefix: 네임스페이스 (선택)

        Returns:
            시크릿 ARN (dry-run이면 빈 문자열)

        Raises:
            KeyFileNotFoundError: 키 파일을 읽을 수 없는 경우
            StoreError: 스토어 호출 실패
        """
        ref = self.reference(f"{SSH_KEYS_PATH}/{name}", prefix)
        key_content = read_key_file(key_file)
        description = f"SSH public key for {name}"

        print_info(t("secrets.adding_ssh_key", secret_id=ref.secret_id), self.console)

        if self.dry_run:
            display = f"[{len(key_content)} characters]"
            self.executor.execute(self._describe_command(ref))
            self.executor.note(t("secrets.dry_run_check_then_write"))
            self.executor.note(t("secrets.dry_run_if_exists"))
            self.executor.execute(self._update_command(ref, key_content, display))
            self.executor.note(t("secrets.dry_run_if_not_exists"))
            self.executor.execute(self._create_command(ref, description, key_content, display))
            return ""

        arn = self._create_or_update(ref, key_content, description)
        print_success(t("secrets.ssh_key_added"), self.console)
        return arn

    def add_secret(self, name: str, value: str, prefix: str | None = None) -> str:
        """일반 시크릿을 <prefix>/<name> 에 저장

        Returns:
            시크릿 ARN (dry-run이면 빈 문자열)
        """
        ref = self.reference(name, prefix)
        description = f"Secret: {name}"

        print_info(t("secrets.adding_secret", secret_id=ref.secret_id), self.console)

        if self.dry_run:
            self.executor.execute(self._describe_command(ref))
            self.executor.note(t("secrets.dry_run_check_then_write"))
            self.executor.note(t("secrets.dry_run_value_length", length=len(value)))
            self.executor.execute(self._update_command(ref, value, REDACTED))
            return ""

        arn = self._create_or_update(ref, value, description)
        print_success(t("secrets.secret_added"), self.console)
        return arn

    def _create_or_update(self, ref: SecretReference, value: str, description: str) -> str:
        existing = self.executor.execute(self._describe_command(ref))

        if existing is not None:
            print_warning(t("secrets.already_exists"), self.console)
            response = self.executor.execute(self._update_command(ref, value, REDACTED))
            version_id = response.get("VersionId") if isinstance(response, dict) else None
            if version_id:
                self.print_status(t("secrets.new_version", version_id=version_id), "dim")
            arn = _arn(response)
        else:
            arn = self.executor.execute_capturing(self._create_command(ref, description, value, REDACTED))

        logger.info("Stored %s", ref.secret_id)
        self.console.out(arn, highlight=False)
        return arn

    # =========================================================================
    # get / list / delete
    # =========================================================================

    def get_secret(self, name: str, prefix: str | None = None) -> str:
        """시크릿 현재 값을 그대로 출력 (마스킹 없음)

        Returns:
            시크릿 값 (dry-run이면 빈 문자열)
        """
        ref = self.reference(name, prefix)
        print_info(t("secrets.retrieving", secret_id=ref.secret_id), self.console)

        command = StoreCommand(
            operation="get-secret-value",
            arguments=(
                ("--secret-id", ref.secret_id),
                ("--query", "SecretString"),
                ("--output", "text"),
            ),
            call=partial(self.store.get, ref.secret_id),
            region=self.context.region,
        )
        value = self.executor.execute_capturing(command)

        if self.dry_run:
            self.executor.note(t("secrets.dry_run_get_note"))
            return ""

        self.console.out(value, highlight=False)
        return value

    def list_secrets(self, prefix: str | None = None) -> list[SecretListing]:
        """prefix로 시작하는 시크릿 목록 출력

        전체 목록을 조회한 뒤 클라이언트 측에서 필터링합니다 (스토어 순서 유지).

        Returns:
            필터링된 목록 (dry-run이면 빈 목록)
        """
        effective_prefix = prefix or self.context.default_prefix
        print_info(t("secrets.listing", prefix=effective_prefix), self.console)
        self.console.print()

        command = StoreCommand(
            operation="list-secrets",
            arguments=(),
            call=self.store.list,
            region=self.context.region,
        )
        entries = self.executor.execute(command)

        if self.dry_run:
            self.executor.note(t("secrets.dry_run_list_note", prefix=effective_prefix))
            return []

        listings = [
            SecretListing.from_api(entry) for entry in entries if entry.get("Name", "").startswith(effective_prefix)
        ]
        self._print_listings(listings, effective_prefix)
        return listings

    def delete_secret(self, name: str, prefix: str | None = None) -> bool:
        """시크릿 삭제 예약 (복구 기간 7일)

        dry-run이 아니면 "yes" 확인을 받은 뒤에만 삭제합니다.

        Returns:
            삭제 요청을 보냈으면 True (dry-run이면 False)

        Raises:
            UserCancelError: 확인 응답이 "yes"가 아닌 경우
        """
        ref = self.reference(name, prefix)
        print_warning(t("secrets.delete_warning", secret_id=ref.secret_id), self.console)

        command = StoreCommand(
            operation="delete-secret",
            arguments=(
                ("--secret-id", ref.secret_id),
                ("--recovery-window-in-days", str(RECOVERY_WINDOW_DAYS)),
            ),
            call=partial(self.store.delete, ref.secret_id, RECOVERY_WINDOW_DAYS),
            region=self.context.region,
        )

        if self.dry_run:
            self.executor.execute(command)
            self.executor.note(t("secrets.dry_run_delete_note"))
            return False

        answer = self.prompter.read_line(t("secrets.confirm_delete")).strip()
        if answer != CONFIRM_LITERAL:
            raise UserCancelError("delete")

        self.executor.execute(command)
        print_success(t("secrets.deleted", days=RECOVERY_WINDOW_DAYS), self.console)
        return True

    # =========================================================================
    # 명령 생성 / 출력 헬퍼
    # =========================================================================

    def _describe_command(self, ref: SecretReference) -> StoreCommand:
        return StoreCommand(
            operation="describe-secret",
            arguments=(("--secret-id", ref.secret_id),),
            call=partial(self.store.describe, ref.secret_id),
            region=self.context.region,
        )

    def _update_command(self, ref: SecretReference, value: str, display: str) -> StoreCommand:
        return StoreCommand(
            operation="put-secret-value",
            arguments=(
                ("--secret-id", ref.secret_id),
                ("--secret-string", display),
            ),
            call=partial(self.store.update, ref.secret_id, value),
            region=self.context.region,
            capture=_arn,
        )

    def _create_command(self, ref: SecretReference, description: str, value: str, display: str) -> StoreCommand:
        return StoreCommand(
            operation="create-secret",
            arguments=(
                ("--name", ref.secret_id),
                ("--description", description),
                ("--secret-string", display),
            ),
            call=partial(self.store.create, ref.secret_id, description, value),
            region=self.context.region,
            capture=_arn,
        )

    def print_status(self, message: str, style: str | None = None) -> None:
        """상태 메시지 출력 (사용자 값은 마크업으로 해석하지 않음)"""
        if style is None:
            self.console.print(message, markup=False, highlight=False, soft_wrap=True)
            return
        self.console.print(f"[{style}]{escape(message)}[/{style}]", highlight=False, soft_wrap=True)

    def _print_listings(self, listings: list[SecretListing], prefix: str) -> None:
        if not listings:
            self.print_status(t("secrets.no_secrets", prefix=prefix), "dim")
            return

        table = Table(show_header=True, box=None, pad_edge=False)
        table.add_column(t("secrets.col_name"), style="cyan", no_wrap=True)
        table.add_column(t("secrets.col_description"))
        table.add_column(t("secrets.col_last_changed"), style="dim", no_wrap=True)

        for item in listings:
            table.add_row(
                escape(item.name),
                escape(item.description or t("secrets.no_description")),
                item.last_changed_text,
            )

        self.console.print(table)
