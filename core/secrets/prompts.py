"""
core/secrets/prompts.py - 대화형 입력 추상화

delete 확인과 init 데이터 수집에서 사용하는 입력 인터페이스입니다.
테스트에서는 스크립트된 입력을 주입합니다 (tests/conftest.py의 ScriptedPrompter).
"""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.prompt import Prompt


class Prompter(Protocol):
    """표준 입력 읽기 인터페이스"""

    def read_line(self, prompt: str) -> str:
        """입력 내용을 화면에 표시하며 한 줄 읽기"""
        ...

    def read_secret(self, prompt: str) -> str:
        """입력 내용을 표시하지 않고 한 줄 읽기"""
        ...


class TerminalPrompter:
    """rich Prompt 기반 터미널 입력"""

    def __init__(self, console: Console | None = None):
        self.console = console

    def read_line(self, prompt: str) -> str:
        return Prompt.ask(prompt, console=self.console, default="", show_default=False)

    def read_secret(self, prompt: str) -> str:
        return Prompt.ask(prompt, console=self.console, password=True, default="", show_default=False)
