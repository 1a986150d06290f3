"""
core/secrets/initialize.py - 배포용 시크릿 일괄 초기화 (init)

대화형으로 값을 입력받아 add_secret / add_ssh_key 호출로 나눠 저장합니다.

단계 (되돌아가지 않음):
    1. Root 비밀번호 (입력 숨김)  -> <prefix>/root-password
    2. 알림 이메일                -> <prefix>/notifications/email
    3. SSH 키 반복 입력 (빈 경로 입력 시 종료, 읽을 수 없는 파일은 오류 출력 후 재입력,
       빈 키 이름은 다시 입력)
    4. 요약 출력

dry-run 모드에서는 입력을 받지 않고 무엇을 수집/생성할지 설명만 출력합니다.
각 단계는 독립적이며, 중간 실패 시 이미 저장한 시크릿을 되돌리지 않습니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from core.cli.i18n import t
from core.cli.ui.console import print_error, print_info, print_success, print_warning
from core.exceptions import KeyFileNotFoundError

from .manager import read_key_file

if TYPE_CHECKING:
    from .manager import SecretManager
    from .prompts import Prompter

logger = logging.getLogger(__name__)

ROOT_PASSWORD_NAME = "root-password"
NOTIFICATION_EMAIL_NAME = "notifications/email"


@dataclass
class InitSession:
    """init 실행 중 수집한 값 (저장하지 않음)

    Attributes:
        prefix: 대상 네임스페이스
        root_password: 인스턴스 root 비밀번호
        notification_email: CloudWatch 알람 수신 이메일
        ssh_keys: (키 이름, 파일 경로) 목록
    """

    prefix: str
    root_password: str = field(default="", repr=False)
    notification_email: str = ""
    ssh_keys: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class InitSummary:
    """init 결과 요약"""

    prefix: str
    root_password_id: str
    notification_email_id: str
    ssh_key_count: int = 0
    dry_run: bool = False


def initialize_secrets(
    manager: SecretManager,
    prompter: Prompter | None = None,
    prefix: str | None = None,
) -> InitSummary:
    """배포에 필요한 시크릿을 대화형으로 초기화

    Args:
        manager: 시크릿 핸들러
        prompter: 대화형 입력 (기본: manager.prompter)
        prefix: 네임스페이스 (선택)

    Returns:
        InitSummary

    Raises:
        StoreError: 스토어 호출 실패 (이전 단계는 롤백하지 않음)
    """
    prompter = prompter or manager.prompter
    session = InitSession(prefix=prefix or manager.context.default_prefix)
    console = manager.console

    root_ref = manager.reference(ROOT_PASSWORD_NAME, session.prefix)
    email_ref = manager.reference(NOTIFICATION_EMAIL_NAME, session.prefix)

    print_info(t("secrets.init_start", prefix=session.prefix), manager.console)
    console.print()

    if manager.dry_run:
        _describe_dry_run(manager)
        return InitSummary(
            prefix=session.prefix,
            root_password_id=root_ref.secret_id,
            notification_email_id=email_ref.secret_id,
            dry_run=True,
        )

    # 1. Root 비밀번호
    print_warning(t("secrets.init_root_password_step"), manager.console)
    session.root_password = prompter.read_secret(t("secrets.init_root_password_prompt"))
    manager.add_secret(ROOT_PASSWORD_NAME, session.root_password, session.prefix)

    # 2. 알림 이메일
    console.print()
    print_warning(t("secrets.init_email_step"), manager.console)
    session.notification_email = prompter.read_line(t("secrets.init_email_prompt"))
    manager.add_secret(NOTIFICATION_EMAIL_NAME, session.notification_email, session.prefix)

    # 3. SSH 키
    console.print()
    print_warning(t("secrets.init_keys_step"), manager.console)
    console.print(t("secrets.init_keys_hint"), markup=False, highlight=False)

    while True:
        key_path = prompter.read_line(t("secrets.init_key_path_prompt")).strip()
        if not key_path:
            break

        try:
            read_key_file(key_path)
        except KeyFileNotFoundError:
            print_error(t("secrets.init_file_not_found", path=key_path), manager.console)
            continue

        key_name = ""
        while not key_name:
            key_name = prompter.read_line(t("secrets.init_key_name_prompt")).strip()
        manager.add_ssh_key(key_name, key_path, session.prefix)
        session.ssh_keys.append((key_name, key_path))

    logger.info("Initialized %d SSH key(s) under %s", len(session.ssh_keys), session.prefix)

    # 4. 요약
    summary = InitSummary(
        prefix=session.prefix,
        root_password_id=root_ref.secret_id,
        notification_email_id=email_ref.secret_id,
        ssh_key_count=len(session.ssh_keys),
    )
    _print_summary(manager, summary)
    return summary


def _describe_dry_run(manager: SecretManager) -> None:
    executor = manager.executor
    executor.note(t("secrets.init_dry_run_prompts"))
    executor.note(t("secrets.init_dry_run_root"))
    executor.note(t("secrets.init_dry_run_email"))
    executor.note(t("secrets.init_dry_run_keys"))
    executor.note(t("secrets.init_dry_run_create"))


def _print_summary(manager: SecretManager, summary: InitSummary) -> None:
    manager.console.print()
    print_success(t("secrets.init_complete"), manager.console)
    manager.print_status(t("secrets.init_summary_root", secret_id=summary.root_password_id))
    manager.print_status(t("secrets.init_summary_email", secret_id=summary.notification_email_id))
    manager.print_status(t("secrets.init_summary_keys", count=summary.ssh_key_count))
    manager.console.print()
    print_info(t("secrets.init_note_generated"), manager.console)
