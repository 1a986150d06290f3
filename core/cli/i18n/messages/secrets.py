"""
core/cli/i18n/messages/secrets.py - Secret Lifecycle Messages

Contains translations for add/get/list/delete/init output.
The "yes" confirmation literal and the [dry-run] marker are not translated.
"""

from __future__ import annotations

SECRETS_MESSAGES = {
    # =========================================================================
    # add-ssh-key / add-secret
    # =========================================================================
    "adding_ssh_key": {
        "ko": "SSH 키 추가: {secret_id}",
        "en": "Adding SSH key: {secret_id}",
    },
    "adding_secret": {
        "ko": "시크릿 추가: {secret_id}",
        "en": "Adding secret: {secret_id}",
    },
    "already_exists": {
        "ko": "시크릿이 이미 존재합니다. 업데이트 중...",
        "en": "Secret already exists. Updating...",
    },
    "new_version": {
        "ko": "새 버전: {version_id}",
        "en": "New version: {version_id}",
    },
    "ssh_key_added": {
        "ko": "SSH 키 추가 완료",
        "en": "SSH key added successfully",
    },
    "secret_added": {
        "ko": "시크릿 추가 완료",
        "en": "Secret added successfully",
    },
    # =========================================================================
    # get / list
    # =========================================================================
    "retrieving": {
        "ko": "시크릿 조회: {secret_id}",
        "en": "Retrieving secret: {secret_id}",
    },
    "listing": {
        "ko": "prefix '{prefix}' 시크릿 목록",
        "en": "Secrets with prefix: {prefix}",
    },
    "no_secrets": {
        "ko": "prefix '{prefix}'에 해당하는 시크릿이 없습니다",
        "en": "No secrets found with prefix: {prefix}",
    },
    "no_description": {
        "ko": "설명 없음",
        "en": "No description",
    },
    "col_name": {
        "ko": "이름",
        "en": "Name",
    },
    "col_description": {
        "ko": "설명",
        "en": "Description",
    },
    "col_last_changed": {
        "ko": "마지막 변경",
        "en": "Last Changed",
    },
    # =========================================================================
    # delete
    # =========================================================================
    "delete_warning": {
        "ko": "경고: 다음 시크릿을 삭제합니다: {secret_id}",
        "en": "WARNING: This will delete secret: {secret_id}",
    },
    "confirm_delete": {
        "ko": "계속하시겠습니까? (yes/no)",
        "en": "Are you sure? (yes/no)",
    },
    "deleted": {
        "ko": "시크릿 삭제 예약 완료 (복구 기간 {days}일)",
        "en": "Secret scheduled for deletion ({days}-day recovery window)",
    },
    "cancelled": {
        "ko": "취소됨",
        "en": "Cancelled",
    },
    # =========================================================================
    # dry-run notes
    # =========================================================================
    "dry_run_check_then_write": {
        "ko": "시크릿 존재 여부 확인 후 업데이트 또는 생성:",
        "en": "Would check if secret exists, then either update or create:",
    },
    "dry_run_if_exists": {
        "ko": "  존재하는 경우:",
        "en": "  If exists:",
    },
    "dry_run_if_not_exists": {
        "ko": "  존재하지 않는 경우:",
        "en": "  If not exists:",
    },
    "dry_run_value_length": {
        "ko": "  값 길이: {length}자",
        "en": "  Value length: {length} characters",
    },
    "dry_run_get_note": {
        "ko": "(실제 실행 시 여기에 시크릿 값이 출력됩니다)",
        "en": "(In a real run, the secret value would be displayed here)",
    },
    "dry_run_list_note": {
        "ko": "(prefix '{prefix}'로 필터링하여 표 형식으로 출력)",
        "en": "(Would filter by prefix '{prefix}' and display in table format)",
    },
    "dry_run_delete_note": {
        "ko": "(실제 실행 시 삭제 전에 'yes' 확인을 요청합니다)",
        "en": "(In a real run, would prompt for 'yes' confirmation before deletion)",
    },
    # =========================================================================
    # init
    # =========================================================================
    "init_start": {
        "ko": "prefix '{prefix}' 시크릿 초기화",
        "en": "Initializing secrets for prefix: {prefix}",
    },
    "init_dry_run_prompts": {
        "ko": "다음 항목을 대화형으로 입력받습니다:",
        "en": "Would interactively prompt for:",
    },
    "init_dry_run_root": {
        "ko": "  - Root 비밀번호",
        "en": "  - Root password",
    },
    "init_dry_run_email": {
        "ko": "  - 알림 이메일",
        "en": "  - Notification email",
    },
    "init_dry_run_keys": {
        "ko": "  - SSH 키 (여러 개)",
        "en": "  - SSH keys (multiple)",
    },
    "init_dry_run_create": {
        "ko": "이후 add-secret / add-ssh-key로 시크릿을 생성합니다",
        "en": "Then would create secrets using add-secret and add-ssh-key",
    },
    "init_root_password_step": {
        "ko": "Root 비밀번호 설정 중...",
        "en": "Setting root password...",
    },
    "init_root_password_prompt": {
        "ko": "인스턴스 root 비밀번호 입력",
        "en": "Enter root password for instances",
    },
    "init_email_step": {
        "ko": "알림 이메일 설정 중...",
        "en": "Setting notification email...",
    },
    "init_email_prompt": {
        "ko": "CloudWatch 알람 수신 이메일 입력",
        "en": "Enter email for CloudWatch alarms",
    },
    "init_keys_step": {
        "ko": "SSH 키 추가 중...",
        "en": "Adding SSH keys...",
    },
    "init_keys_hint": {
        "ko": "SSH 공개키 경로를 입력하세요 (빈 값 입력 시 종료):",
        "en": "Enter paths to SSH public keys (press Enter with empty path to finish):",
    },
    "init_key_path_prompt": {
        "ko": "SSH 키 경로 (Enter로 건너뛰기)",
        "en": "SSH key path (or Enter to skip)",
    },
    "init_key_name_prompt": {
        "ko": "키 이름 (예: kurt)",
        "en": "Name for this key (e.g., kurt)",
    },
    "init_file_not_found": {
        "ko": "파일을 찾을 수 없습니다: {path}",
        "en": "File not found: {path}",
    },
    "init_complete": {
        "ko": "초기화 완료",
        "en": "Initialization complete",
    },
    "init_summary_root": {
        "ko": "  - Root 비밀번호: {secret_id}",
        "en": "  - Root password: {secret_id}",
    },
    "init_summary_email": {
        "ko": "  - 알림 이메일: {secret_id}",
        "en": "  - Notification email: {secret_id}",
    },
    "init_summary_keys": {
        "ko": "  - 추가된 SSH 키: {count}",
        "en": "  - SSH keys added: {count}",
    },
    "init_note_generated": {
        "ko": "참고: RDS 및 Redis 시크릿은 CloudFormation이 자동 생성합니다",
        "en": "Note: RDS and Redis secrets will be auto-generated by CloudFormation",
    },
}
