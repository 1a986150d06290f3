# tests/core/secrets/test_secrets_preflight.py
"""
Tests for core/secrets/preflight.py

Tests cover:
- Required tool detection
- Credential check via sts:GetCallerIdentity
- Dry-run skipping the credential check
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import NoCredentialsError, ProfileNotFound

from core.exceptions import CredentialsError, MissingToolsError
from core.secrets.preflight import check_credentials, check_dependencies, find_missing_tools, run_preflight
from core.secrets.types import ExecutionContext

# =============================================================================
# Tool Check Tests
# =============================================================================


class TestDependencies:
    """Test required tool detection"""

    def test_all_present(self):
        assert find_missing_tools(("aws", "jq"), which=lambda tool: f"/usr/bin/{tool}") == []

    def test_reports_every_missing_tool(self):
        assert find_missing_tools(("aws", "jq", "git"), which=lambda tool: None) == ["aws", "jq", "git"]

    def test_check_dependencies_raises(self):
        with patch("core.secrets.preflight.shutil.which", side_effect=lambda tool: None if tool == "jq" else "/x"):
            with pytest.raises(MissingToolsError) as exc_info:
                check_dependencies()

        assert exc_info.value.tools == ["jq"]
        assert exc_info.value.message == "Missing required tools: jq"
        assert exc_info.value.hint == "Please install: jq"

    def test_check_dependencies_ok(self):
        with patch("core.secrets.preflight.shutil.which", return_value="/usr/bin/tool"):
            check_dependencies()


# =============================================================================
# Credential Check Tests
# =============================================================================


class TestCredentials:
    """Test AWS credential verification"""

    def test_returns_identity(self):
        session = MagicMock()
        session.client.return_value.get_caller_identity.return_value = {
            "Account": "123456789012",
            "Arn": "arn:aws:iam::123456789012:user/test-user",
        }

        identity = check_credentials(session)

        assert identity["Account"] == "123456789012"

    def test_client_error(self, client_error):
        session = MagicMock()
        session.client.return_value.get_caller_identity.side_effect = client_error("InvalidClientTokenId")

        with pytest.raises(CredentialsError) as exc_info:
            check_credentials(session)
        assert exc_info.value.message == "AWS credentials not configured"
        assert exc_info.value.hint == "Run: aws configure"

    def test_no_credentials(self):
        session = MagicMock()
        session.client.return_value.get_caller_identity.side_effect = NoCredentialsError()

        with pytest.raises(CredentialsError):
            check_credentials(session)

    def test_moto_identity(self, aws_credentials):
        moto = pytest.importorskip("moto")
        import boto3

        with moto.mock_aws():
            identity = check_credentials(boto3.Session(region_name="us-east-1"))
        assert identity["Account"] == "123456789012"


# =============================================================================
# run_preflight Tests
# =============================================================================


class TestRunPreflight:
    """Test the combined preflight sequence"""

    def test_dry_run_skips_credentials(self):
        with (
            patch("core.secrets.preflight.check_dependencies") as mock_deps,
            patch("core.secrets.preflight.create_session") as mock_session,
        ):
            assert run_preflight(ExecutionContext(dry_run=True)) is None

        mock_deps.assert_called_once_with()
        mock_session.assert_not_called()

    def test_dry_run_still_checks_tools(self):
        with patch("core.secrets.preflight.shutil.which", return_value=None):
            with pytest.raises(MissingToolsError):
                run_preflight(ExecutionContext(dry_run=True))

    def test_real_run_checks_credentials(self):
        identity = {"Account": "123456789012"}
        with (
            patch("core.secrets.preflight.check_dependencies"),
            patch("core.secrets.preflight.create_session") as mock_session,
            patch("core.secrets.preflight.check_credentials", return_value=identity) as mock_creds,
        ):
            assert run_preflight(ExecutionContext()) == identity

        mock_creds.assert_called_once_with(mock_session.return_value)

    def test_unknown_profile(self):
        with (
            patch("core.secrets.preflight.check_dependencies"),
            patch("core.secrets.preflight.create_session", side_effect=ProfileNotFound(profile="nope")),
        ):
            with pytest.raises(CredentialsError):
                run_preflight(ExecutionContext(profile="nope"))
