"""
core: 共用核心

統一匯出例外類別，方便外部 import。

用法：
    from core import MigratorError, FileReadError
"""

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

__all__ = [
    "MigratorError",
    "SourceError",
    "RepositoryNotFoundError",
    "FileReadError",
    "FileWriteError",
    "TransformError",
    "ConfigError",
    "ConfigFileError",
    "InvalidConfigError",
]
