"""
core/exceptions.py 單元測試

驗證自訂例外體系的繼承關係、訊息格式、context 欄位。
"""

import pytest

from core.exceptions import (
    ConfigError,
    ConfigFileError,
    FileReadError,
    FileWriteError,
    InvalidConfigError,
    MigratorError,
    RepositoryNotFoundError,
    SourceError,
    TransformError,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    """測試例外繼承關係"""

    @pytest.mark.unit
    def test_all_inherit_from_base(self):
        """所有例外都繼承 MigratorError"""
        classes = [
            SourceError, RepositoryNotFoundError, FileReadError, FileWriteError,
            TransformError, ConfigError, ConfigFileError, InvalidConfigError,
        ]
        for cls in classes:
            assert issubclass(cls, MigratorError), f"{cls.__name__} 未繼承 MigratorError"

    @pytest.mark.unit
    def test_source_errors_inherit_source_error(self):
        """檔案類例外繼承 SourceError"""
        assert issubclass(RepositoryNotFoundError, SourceError)
        assert issubclass(FileReadError, SourceError)
        assert issubclass(FileWriteError, SourceError)

    @pytest.mark.unit
    def test_config_errors_inherit_config_error(self):
        assert issubclass(ConfigFileError, ConfigError)
        assert issubclass(InvalidConfigError, ConfigError)

    @pytest.mark.unit
    def test_catch_base_catches_all(self):
        """catch MigratorError 可以攔截子類別"""
        with pytest.raises(MigratorError):
            raise TransformError("a.js", "bad")


@pytest.mark.unit
class TestExceptionMessages:
    """訊息格式與 context"""

    @pytest.mark.unit
    def test_repository_not_found(self):
        e = RepositoryNotFoundError("/nope")
        assert str(e) == "Not found: /nope"
        assert e.context == {"path": "/nope"}

    @pytest.mark.unit
    def test_file_read_error_keeps_original(self):
        original = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        e = FileReadError("test/a.test.js", original)
        assert e.original is original
        assert "test/a.test.js" in str(e)
        assert "UnicodeDecodeError" in str(e)

    @pytest.mark.unit
    def test_file_write_error_without_original(self):
        e = FileWriteError("tests/a.spec.ts")
        assert e.original is None
        assert str(e) == "無法寫入檔案: tests/a.spec.ts"

    @pytest.mark.unit
    def test_transform_error_reason(self):
        e = TransformError("a.js", "步驟不完整")
        assert "a.js" in str(e)
        assert "步驟不完整" in str(e)
        assert e.context["path"] == "a.js"

    @pytest.mark.unit
    def test_invalid_config_context(self):
        e = InvalidConfigError("output", "/abs", "必須是相對路徑")
        assert e.context == {"key": "output", "value": "/abs"}
        assert "output=/abs" in str(e)

    @pytest.mark.unit
    def test_default_context_is_empty_dict(self):
        assert MigratorError("x").context == {}
