"""
core/cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI help text.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # CLI Help Text
    # =========================================================================
    "help_intro": {
        "ko": "AWS Secrets Manager 시크릿을 추가/조회/삭제하는 CLI 도구입니다.",
        "en": "A CLI tool to add, read, list and delete AWS Secrets Manager secrets.",
    },
    "help_actions": {
        "ko": "[명령어]",
        "en": "[Actions]",
    },
    "help_examples": {
        "ko": "[예시]",
        "en": "[Examples]",
    },
    "help_environment": {
        "ko": "[환경 변수]",
        "en": "[Environment Variables]",
    },
    "help_env_region": {
        "ko": "AWS 리전 (기본: us-east-1)",
        "en": "AWS region (default: us-east-1)",
    },
    "help_env_profile": {
        "ko": "AWS CLI 프로파일 (선택)",
        "en": "AWS CLI profile to use (optional)",
    },
    "help_env_dry_run": {
        "ko": "\"true\"이면 dry-run 모드 (선택)",
        "en": "Set to \"true\" to enable dry-run mode (optional)",
    },
    "help_no_action": {
        "ko": "명령어를 지정하세요.",
        "en": "An action is required.",
    },
}
