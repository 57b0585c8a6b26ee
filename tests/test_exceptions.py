from __future__ import annotations

import pytest

from reqlint.exceptions import ConfigError, FileOperationError, ReqLintError


@pytest.mark.unit
class TestReqLintError:
    def test_message_only(self) -> None:
        error = ReqLintError("something failed")

        assert str(error) == "something failed"
        assert error.details == {}

    def test_details_in_str(self) -> None:
        error = ReqLintError("bad", {"path": "requirements.txt"})

        assert str(error) == "bad (path=requirements.txt)"

    def test_details_copied(self) -> None:
        source = {"key": "value"}
        error = ReqLintError("bad", source)
        error.details["other"] = 1

        assert source == {"key": "value"}

    def test_repr(self) -> None:
        assert repr(ReqLintError("bad")) == "ReqLintError(message='bad', details={})"


@pytest.mark.unit
class TestConfigError:
    def test_fields(self) -> None:
        error = ConfigError(
            "Unknown severity",
            config_path="reqlint.toml",
            option="severity.duplicate",
        )

        assert isinstance(error, ReqLintError)
        assert error.config_path == "reqlint.toml"
        assert error.option == "severity.duplicate"
        assert error.details == {"path": "reqlint.toml", "option": "severity.duplicate"}

    def test_unset_fields_omitted(self) -> None:
        assert ConfigError("bad").details == {}


@pytest.mark.unit
class TestFileOperationError:
    def test_original_error_stringified(self) -> None:
        cause = PermissionError("denied")

        error = FileOperationError(
            "Failed to read file",
            file_path="requirements.txt",
            operation="read",
            original_error=cause,
        )

        assert error.original_error is cause
        assert error.details["original_error"] == "denied"
        assert error.details["operation"] == "read"
