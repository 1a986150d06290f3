"""
core/cli/ui/console.py - Rich 콘솔 유틸리티

일관된 콘솔 출력을 위한 함수들.
파이프로 출력을 받을 수 있도록 터미널을 강제하지 않습니다 (ARN, 시크릿 값 출력).
"""

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# botocore 노이즈 로그 제한
logging.getLogger("botocore.httpchecksum").setLevel(logging.WARNING)
logging.getLogger("botocore.credentials").setLevel(logging.WARNING)
logging.getLogger("botocore.loaders").setLevel(logging.WARNING)
logging.getLogger("botocore.session").setLevel(logging.WARNING)


def get_console() -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        color_system="auto",
        highlight=False,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()


def get_logger(name: str = "rich", level: int = logging.INFO) -> logging.Logger:
    """Rich 핸들러가 설정된 logger를 반환합니다.

    Args:
        name: logger 이름 (기본값: "rich")
        level: 로그 레벨

    Returns:
        logging.Logger: 설정된 logger 인스턴스
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 이미 핸들러가 설정되어 있으면 반환
    if logger.handlers:
        return logger

    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


# =============================================================================
# 표준 출력 스타일 (이모지 없이 Rich 스타일만 사용)
# =============================================================================

# 상태 심볼
SYMBOL_SUCCESS = "✓"
SYMBOL_ERROR = "✗"
SYMBOL_WARNING = "!"
SYMBOL_INFO = "•"


def print_success(message: str, target: Console | None = None) -> None:
    """성공 메시지 출력 (초록색 체크마크)

    Args:
        message: 출력할 메시지 (마크업으로 해석하지 않음)
        target: 출력 콘솔 (기본: 전역 콘솔)
    """
    (target or console).print(f"[green]{SYMBOL_SUCCESS} {escape(message)}[/green]")


def print_error(message: str, target: Console | None = None) -> None:
    """에러 메시지 출력 (빨간색)

    Args:
        message: 출력할 메시지
        target: 출력 콘솔
    """
    (target or console).print(f"[red]{escape(message)}[/red]")


def print_warning(message: str, target: Console | None = None) -> None:
    """경고 메시지 출력 (노란색)"""
    (target or console).print(f"[yellow]{escape(message)}[/yellow]")


def print_info(message: str, target: Console | None = None) -> None:
    """정보 메시지 출력 (파란색)"""
    (target or console).print(f"[blue]{escape(message)}[/blue]")


def print_header(title: str, target: Console | None = None) -> None:
    """섹션 헤더 출력

    Args:
        title: 헤더 제목
        target: 출력 콘솔
    """
    (target or console).print(f"[bold yellow]{escape(title)}[/bold yellow]")
