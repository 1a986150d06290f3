"""
core/cli/i18n/messages/common.py - Common Messages

Contains translations for preflight checks, errors, and general UI.
"""

from __future__ import annotations

COMMON_MESSAGES = {
    # =========================================================================
    # Errors
    # =========================================================================
    "error": {
        "ko": "오류: {message}",
        "en": "Error: {message}",
    },
    "interrupted": {
        "ko": "중단됨",
        "en": "Interrupted",
    },
    "hint_access_denied": {
        "ko": "Secrets Manager에 대한 IAM 권한을 확인하세요.",
        "en": "Check the IAM permissions for Secrets Manager.",
    },
    "hint_throttling": {
        "ko": "요청이 너무 많습니다. 잠시 후 다시 실행하세요.",
        "en": "Request was throttled. Re-run the command later.",
    },
    # =========================================================================
    # Preflight
    # =========================================================================
    "dry_run_banner": {
        "ko": "=== DRY-RUN 모드 ===",
        "en": "=== DRY-RUN MODE ===",
    },
    "dry_run_no_changes": {
        "ko": "AWS에 어떤 변경도 하지 않습니다",
        "en": "No changes will be made to AWS",
    },
}
