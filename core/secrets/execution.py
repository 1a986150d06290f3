"""
core/secrets/execution.py - Dry-run 실행 래퍼

스토어에 대한 모든 호출이 지나가는 단일 관문입니다.
dry-run 모드에서는 실제 호출 대신 동일한 AWS CLI 명령을 출력하고 빈 결과를 반환합니다.

주요 구성 요소:
- StoreCommand: 스토어 호출 1건 (표시용 인자 + 실제 호출 함수)
- DryRunExecutor: execute / execute_capturing / note

Example:
    command = StoreCommand(
        operation="get-secret-value",
        arguments=(("--secret-id", secret_id),),
        call=partial(store.get, secret_id),
        region=context.region,
    )
    value = executor.execute_capturing(command)
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from .types import ExecutionContext

logger = logging.getLogger(__name__)

AWS_PROGRAM = "aws"
SERVICE = "secretsmanager"

# 번역하지 않는 고정 마커
DRY_RUN_MARKER = "\\[dry-run]"


@dataclass(frozen=True)
class StoreCommand:
    """스토어 호출 1건의 설명

    arguments는 화면 표시 전용입니다. 시크릿 값은 call에만 바인딩하고
    arguments에는 길이 표시나 [REDACTED] 같은 대체 문자열을 넣습니다.

    Attributes:
        operation: AWS CLI 작업 이름 (예: create-secret)
        arguments: (플래그, 값) 목록
        call: 실제 스토어 호출 (인자 없음)
        region: --region 값 (None이면 생략)
        capture: execute_capturing에서 결과를 문자열로 변환하는 함수
    """

    operation: str
    arguments: tuple[tuple[str, str], ...]
    call: Callable[[], Any]
    region: str | None = None
    capture: Callable[[Any], str] | None = None

    def argv(self) -> list[str]:
        """동등한 AWS CLI 명령 인자 목록"""
        argv = [AWS_PROGRAM, SERVICE, self.operation]
        for flag, value in self.arguments:
            argv.extend((flag, value))
        if self.region:
            argv.extend(("--region", self.region))
        return argv

    def render(self) -> str:
        """셸 이스케이프된 명령 문자열"""
        return shlex.join(self.argv())


class DryRunExecutor:
    """ExecutionContext.dry_run에 따라 실행하거나 출력만 하는 래퍼

    Args:
        context: 실행 컨텍스트
        console: 출력 콘솔 (기본: stdout)
    """

    def __init__(self, context: ExecutionContext, console: Console | None = None):
        self.context = context
        self.console = console or Console()

    @property
    def dry_run(self) -> bool:
        return self.context.dry_run

    def note(self, message: str) -> None:
        """[dry-run] 접두어와 함께 설명 출력"""
        self._print_marked(message)

    def execute(self, command: StoreCommand) -> Any:
        """명령 실행. dry-run이면 출력 후 빈 결과({}) 반환"""
        if self.dry_run:
            self._print_marked(command.render())
            return {}

        logger.debug("Executing: %s", command.render())
        return command.call()

    def execute_capturing(self, command: StoreCommand) -> str:
        """명령 실행 후 결과를 문자열로 반환. dry-run이면 출력 후 빈 문자열"""
        if self.dry_run:
            self._print_marked(command.render())
            return ""

        logger.debug("Executing: %s", command.render())
        result = command.call()
        if command.capture is not None:
            return command.capture(result)
        return "" if result is None else str(result)

    def _print_marked(self, text: str) -> None:
        line = Text.from_markup(f"[yellow]{DRY_RUN_MARKER}[/yellow] ")
        line.append(text)
        self.console.print(line, highlight=False, soft_wrap=True)
