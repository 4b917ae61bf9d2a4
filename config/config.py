"""
設定管理模組
統一管理輸出目錄、掃描範圍、Playwright / Cucumber 版本等設定。
支援透過環境變數覆蓋預設值，方便 CI/CD 整合。
支援專案根目錄的 migrate.config.json 覆寫，並做結構驗證。
"""

import json
import os
from pathlib import Path

from core.exceptions import ConfigFileError

BASE_DIR = Path(__file__).resolve().parent.parent

OVERRIDES_FILE = "migrate.config.json"

# migrate.config.json 允許的欄位與型別
_OVERRIDE_TYPES = {
    "output": str,
    "include": list,
    "exclude": list,
    "bdd": bool,
    "baseUrl": str,
}

# 建議欄位（缺少時發出警告）
_RECOMMENDED_KEYS = ["output", "include"]


def _split_env(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name, "")
    if not raw.strip():
        return list(default)
    return [p.strip() for p in raw.split(",") if p.strip()]


class ConfigValidationError(Exception):
    """migrate.config.json 驗證失敗"""

    def __init__(self, errors: list[str]):
        self.errors = errors
        msg = "migrate.config.json 驗證失敗:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(msg)


class Config:
    """工具全域設定"""

    # 輸出
    OUTPUT_DIR = os.getenv("MIGRATE_OUTPUT", "tests")
    ANALYSIS_FILE = "migration-analysis.json"

    # 掃描範圍
    INCLUDE = _split_env("MIGRATE_INCLUDE", [
        "**/*.test.js",
        "**/*.spec.js",
        "**/*.cy.js",
        "**/test/**/*.js",
        "**/tests/**/*.js",
    ])
    EXCLUDE = _split_env("MIGRATE_EXCLUDE", [
        "**/node_modules/**",
        "**/dist/**",
        "**/build/**",
    ])

    # 產出的 Playwright 專案
    BASE_URL = os.getenv("BASE_URL", "http://localhost:3000")
    PLAYWRIGHT_VERSION = os.getenv("PLAYWRIGHT_VERSION", "^1.41.0")
    CUCUMBER_VERSION = os.getenv("CUCUMBER_VERSION", "^10.3.1")
    TS_NODE_VERSION = os.getenv("TS_NODE_VERSION", "^10.9.2")

    # 複雜度門檻
    LARGE_FILE_LINES = int(os.getenv("MIGRATE_LARGE_FILE_LINES", "200"))

    @classmethod
    def load_overrides(cls, repo_path: str | Path, validate: bool = True) -> dict:
        """
        從專案根目錄載入 migrate.config.json。

        Args:
            repo_path: 專案根目錄
            validate: 是否驗證欄位（預設 True）

        Returns:
            設定 dict；檔案不存在時回傳空 dict

        Raises:
            ConfigFileError: 檔案不是合法 JSON
            ConfigValidationError: 欄位型別錯誤或未知欄位
        """
        path = Path(repo_path) / OVERRIDES_FILE
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigFileError(str(path), str(e)) from e

        if validate:
            cls.validate_overrides(data)

        return data

    @classmethod
    def validate_overrides(cls, data) -> list[str]:
        """
        驗證 migrate.config.json 結構。

        Args:
            data: 已解析的 JSON

        Returns:
            警告訊息列表

        Raises:
            ConfigValidationError: 結構錯誤時拋出
        """
        errors: list[str] = []
        warnings: list[str] = []

        if not isinstance(data, dict):
            raise ConfigValidationError(["最外層必須是 JSON object"])

        for key, value in data.items():
            expected = _OVERRIDE_TYPES.get(key)
            if expected is None:
                errors.append(f"未知欄位: {key}")
            elif not isinstance(value, expected):
                errors.append(f"欄位型別錯誤: {key} 應為 {expected.__name__}")
            elif expected is list and not all(isinstance(v, str) for v in value):
                errors.append(f"欄位型別錯誤: {key} 只能包含字串")

        if isinstance(data.get("output"), str) and Path(data["output"]).is_absolute():
            errors.append("output 必須是相對於專案根目錄的路徑")

        for key in _RECOMMENDED_KEYS:
            if key not in data:
                warnings.append(f"建議填寫欄位: {key}")

        if errors:
            raise ConfigValidationError(errors)

        return warnings

    @classmethod
    def defaults(cls) -> dict:
        """預設選項（CLI 參數與設定檔之前的底層）"""
        return {
            "output": cls.OUTPUT_DIR,
            "include": list(cls.INCLUDE),
            "exclude": list(cls.EXCLUDE),
        }
