"""
core/cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 시크릿 관리 CLI 진입점입니다.
각 명령은 preflight 점검 후 SecretManager 핸들러 하나를 호출합니다.

명령어 구조:
    manage-secrets [--dry-run] [--lang en|ko] [-v] <action> [args...]

    add-ssh-key <name> <key-file> [prefix]
    add-secret  <name> <value>    [prefix]
    get         <name>            [prefix]
    list        [prefix]
    delete      <name>            [prefix]
    init        [prefix]

종료 코드:
    0: 성공 또는 사용자 취소 (delete 확인 거절)
    1: 필수 도구/자격 증명 없음, 잘못된 명령/인자, 키 파일 없음, 스토어 오류, 중단

테스트 주입점 (ctx.obj):
    store_factory: ExecutionContext -> SecretStore (기본: BotoSecretStore)
    prompter: Prompter (기본: TerminalPrompter)
    console: rich Console (기본: core.cli.ui.console.console)

Usage:
    $ manage-secrets list
    $ manage-secrets --dry-run add-secret root-password s3cret
    $ python -m core.cli.app --help
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import click
from click import Context

from core.cli.i18n import DEFAULT_LANG, SUPPORTED_LANGS, set_lang, t
from core.cli.ui.console import console as default_console
from core.cli.ui.console import get_logger, print_error, print_header, print_warning
from core.config import SecretsConfig, get_version
from core.exceptions import (
    PreflightError,
    SecretsError,
    UserCancelError,
    is_access_denied,
    is_throttling,
)
from core.secrets.initialize import initialize_secrets
from core.secrets.manager import SecretManager
from core.secrets.preflight import run_preflight
from core.secrets.prompts import TerminalPrompter
from core.secrets.store import BotoSecretStore

# Keep lightweight, centralized logging config
# WARNING 레벨로 설정하여 INFO 로그가 도구 출력에 섞이지 않도록 함
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

VERSION = get_version()
PROG_NAME = "manage-secrets"

# 사용 오류(알 수 없는 명령, 인자 부족/초과) 종료 코드
USAGE_ERROR_EXIT_CODE = 1


class SecretsGroup(click.Group):
    """사용 오류를 종료 코드 1로 보고하는 Click 그룹

    Click 기본값(2) 대신 1을 사용합니다.
    """

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: Context | None = None,
        **extra: Any,
    ) -> Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = USAGE_ERROR_EXIT_CODE
            raise

    def invoke(self, ctx: Context) -> Any:
        # 서브명령 조회/인자 파싱 오류도 여기서 전파됨
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = USAGE_ERROR_EXIT_CODE
            raise


def _build_help_text() -> str:
    """help 텍스트 생성"""
    lines = [
        "manage-secrets - AWS Secrets Manager CLI",
        "",
        t("cli.help_intro"),
        "",
        "\b",  # Click keeps line breaks
        t("cli.help_examples"),
        "  manage-secrets add-ssh-key alice ~/.ssh/id_rsa.pub",
        "  manage-secrets add-secret root-password 's3cret' worxco/sandbox",
        "  manage-secrets get root-password",
        "  manage-secrets list worxco/sandbox",
        "  manage-secrets delete ssh-keys/alice",
        "  manage-secrets --dry-run init",
        "",
        "\b",
        t("cli.help_environment"),
        f"  AWS_REGION      {t('cli.help_env_region')}",
        f"  AWS_PROFILE     {t('cli.help_env_profile')}",
        f"  DRY_RUN         {t('cli.help_env_dry_run')}",
    ]
    return "\n".join(lines)


@click.group(cls=SecretsGroup, invoke_without_command=True)
@click.version_option(VERSION, prog_name=PROG_NAME)
@click.option(
    "--dry-run",
    "dry_run",
    is_flag=True,
    envvar="DRY_RUN",
    help="Print the equivalent AWS CLI commands without calling AWS",
)
@click.option(
    "--lang",
    type=click.Choice(list(SUPPORTED_LANGS)),
    default=DEFAULT_LANG,
    help="UI language / UI 언어 설정 (en: English, ko: 한국어)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: Context, dry_run: bool, lang: str, verbose: bool) -> None:
    """manage-secrets - AWS Secrets Manager CLI"""
    set_lang(lang)

    if verbose:
        get_logger("core", logging.DEBUG)

    config = SecretsConfig.from_env()

    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj["context"] = config.to_context(dry_run=dry_run)
    ctx.obj.setdefault("console", default_console)
    ctx.obj.setdefault("store_factory", BotoSecretStore)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        click.echo()
        click.echo(t("cli.help_no_action"))
        ctx.exit(USAGE_ERROR_EXIT_CODE)


# help 텍스트 동적 설정
cli.help = _build_help_text()


# =============================================================================
# 실행 헬퍼
# =============================================================================


def _build_manager(ctx: Context) -> SecretManager:
    """preflight 점검 후 SecretManager 생성"""
    obj = ctx.obj
    context = obj["context"]
    console = obj["console"]

    run_preflight(context)

    if context.dry_run:
        print_header(t("common.dry_run_banner"), console)
        print_warning(t("common.dry_run_no_changes"), console)
        console.print()

    store = obj["store_factory"](context)
    prompter = obj.get("prompter") or TerminalPrompter(console)
    return SecretManager(store, context, prompter=prompter, console=console)


def _error_hint(error: SecretsError) -> str | None:
    if isinstance(error, PreflightError):
        return error.hint
    if is_access_denied(error):
        return t("common.hint_access_denied")
    if is_throttling(error):
        return t("common.hint_throttling")
    return None


def _run(ctx: Context, action: Callable[[SecretManager], Any]) -> None:
    """핸들러 실행 및 예외 -> 종료 코드 변환"""
    console = ctx.obj["console"]

    try:
        action(_build_manager(ctx))
    except UserCancelError:
        console.print(t("secrets.cancelled"), markup=False, highlight=False)
    except SecretsError as e:
        logger.debug("Command failed", exc_info=True)
        print_error(t("common.error", message=e.message), console)
        hint = _error_hint(e)
        if hint:
            console.print(hint, markup=False, highlight=False)
        raise SystemExit(1) from e
    except (KeyboardInterrupt, EOFError):
        console.print()
        print_error(t("common.interrupted"), console)
        raise SystemExit(1) from None


# =============================================================================
# 명령어
# =============================================================================


@cli.command("add-ssh-key")
@click.argument("name")
@click.argument("key_file")
@click.argument("prefix", required=False)
@click.pass_context
def add_ssh_key_cmd(ctx: Context, name: str, key_file: str, prefix: str | None) -> None:
    """Add an SSH public key as <prefix>/ssh-keys/<name>"""
    _run(ctx, lambda manager: manager.add_ssh_key(name, key_file, prefix))


@cli.command("add-secret")
@click.argument("name")
@click.argument("value")
@click.argument("prefix", required=False)
@click.pass_context
def add_secret_cmd(ctx: Context, name: str, value: str, prefix: str | None) -> None:
    """Add or update a secret as <prefix>/<name>"""
    _run(ctx, lambda manager: manager.add_secret(name, value, prefix))


@cli.command("get")
@click.argument("name")
@click.argument("prefix", required=False)
@click.pass_context
def get_cmd(ctx: Context, name: str, prefix: str | None) -> None:
    """Print the current value of a secret"""
    _run(ctx, lambda manager: manager.get_secret(name, prefix))


@cli.command("list")
@click.argument("prefix", required=False)
@click.pass_context
def list_cmd(ctx: Context, prefix: str | None) -> None:
    """List secrets whose name starts with the prefix"""
    _run(ctx, lambda manager: manager.list_secrets(prefix))


@cli.command("delete")
@click.argument("name")
@click.argument("prefix", required=False)
@click.pass_context
def delete_cmd(ctx: Context, name: str, prefix: str | None) -> None:
    """Schedule a secret for deletion (7-day recovery window)"""
    _run(ctx, lambda manager: manager.delete_secret(name, prefix))


@cli.command("init")
@click.argument("prefix", required=False)
@click.pass_context
def init_cmd(ctx: Context, prefix: str | None) -> None:
    """Interactively initialize deployment secrets"""
    _run(ctx, lambda manager: initialize_secrets(manager, prefix=prefix))


if __name__ == "__main__":
    cli()
