"""
自訂 Exception 體系

統一的錯誤處理階層，讓每種失敗都有明確的分類與訊息。
上層可以 catch 大類別 (如 MigratorError)，
也可以精準 catch 子類別 (如 FileReadError)。

Exception 樹：
    MigratorError
    ├── SourceError
    │   ├── RepositoryNotFoundError
    │   ├── FileReadError
    │   └── FileWriteError
    ├── TransformError
    └── ConfigError
        ├── ConfigFileError
        └── InvalidConfigError

除了 RepositoryNotFoundError（執行前的前置檢查）之外，
其餘錯誤都只影響單一檔案，批次會繼續處理下一個檔案。
"""


class MigratorError(Exception):
    """遷移工具所有例外的基底，catch 這個就能攔截一切工具錯誤"""

    def __init__(self, message: str = "", context: dict | None = None):
        self.context = context or {}
        super().__init__(message)


# ── 來源檔案相關 ──

class SourceError(MigratorError):
    """讀寫來源 / 輸出檔案相關錯誤"""


class RepositoryNotFoundError(SourceError):
    """找不到要遷移的專案根目錄"""

    def __init__(self, path: str = ""):
        super().__init__(f"Not found: {path}", context={"path": path})


class FileReadError(SourceError):
    """單一檔案讀取失敗"""

    def __init__(self, path: str = "", original: Exception | None = None):
        self.original = original
        msg = f"無法讀取檔案: {path}"
        if original:
            msg += f" ({type(original).__name__}: {original})"
        super().__init__(msg, context={"path": path})


class FileWriteError(SourceError):
    """單一檔案寫入失敗"""

    def __init__(self, path: str = "", original: Exception | None = None):
        self.original = original
        msg = f"無法寫入檔案: {path}"
        if original:
            msg += f" ({type(original).__name__}: {original})"
        super().__init__(msg, context={"path": path})


# ── 轉換相關 ──

class TransformError(MigratorError):
    """改寫或步驟合成失敗"""

    def __init__(self, path: str = "", reason: str = ""):
        msg = f"轉換失敗: {path}" if path else "轉換失敗"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, context={"path": path})


# ── Config 相關 ──

class ConfigError(MigratorError):
    """設定相關錯誤"""


class ConfigFileError(ConfigError):
    """設定檔存在但無法解析"""

    def __init__(self, path: str = "", reason: str = ""):
        msg = f"設定檔無法解析: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, context={"path": path})


class InvalidConfigError(ConfigError):
    """設定值無效"""

    def __init__(self, key: str = "", value: str = "", reason: str = ""):
        msg = f"設定值無效: {key}={value}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, context={"key": key, "value": value})
