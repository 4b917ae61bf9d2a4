"""
Rewrite Engine
依固定順序的 stage pipeline，把舊版瀏覽器測試原始碼直接改寫成 Playwright。

Pipeline：
    selectors → properties → actions → navigation → waits →
    storage → dialogs → assertions → structure → cleanup → imports

後面的 stage 依賴前面 stage 的結果（例如 actions 的補 await 規則
假設 selector 已經轉成 page.locator），所以順序不可調換。
同一 stage 內的規則依宣告順序做全域替換；沒有命中的規則不做任何事。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import Callable

from migrator.patterns import CATALOG
from migrator.schema import Category

PLAYWRIGHT_MODULE = "@playwright/test"
PLAYWRIGHT_IMPORT = f"import {{ test, expect }} from '{PLAYWRIGHT_MODULE}';"

_HAS_PLAYWRIGHT_IMPORT = re.compile(
    r"""(?:from\s+|require\(\s*)['"]@playwright/test['"]"""
)

# ── structure ──

_HAS_TEST_STRUCTURE = re.compile(
    r"(?<![\w.$])(?:describe|context|it|test)(?:\.(?:only|skip))?\s*\("
)
_CALLBACK = r"(?:async\s*)?(?:function\s*)?\([^)]*\)(?:\s*=>)?"

_STRUCTURE_RULES = (
    (re.compile(
        r"(?<![\w.$])(?:describe|context)(?P<mod>\.(?:only|skip))?\s*\(\s*(?P<title>['\"][^'\"]+['\"])"
    ), r"test.describe\g<mod>(\g<title>"),
    (re.compile(
        rf"(?<![\w.$])it(?P<mod>\.(?:only|skip))?\s*\(\s*(?P<title>['\"][^'\"]+['\"])\s*,\s*{_CALLBACK}"
    ), r"test\g<mod>(\g<title>, async ({ page }) =>"),
    (re.compile(
        r"(?<![\w.$])test(?P<mod>\.(?:only|skip))?\s*\(\s*(?P<title>['\"][^'\"]+['\"])\s*,\s*"
        r"(?:async\s*)?(?:function\s*)?\(\s*\)(?:\s*=>)?"
    ), r"test\g<mod>(\g<title>, async ({ page }) =>"),
    (re.compile(
        rf"(?<![\w.$])(?P<hook>beforeEach|afterEach)\s*\(\s*{_CALLBACK}"
    ), r"test.\g<hook>(async ({ page }) =>"),
    (re.compile(rf"(?<![\w.$])(?:before|beforeAll)\s*\(\s*{_CALLBACK}"),
     "test.beforeAll(async () =>"),
    (re.compile(rf"(?<![\w.$])(?:after|afterAll)\s*\(\s*{_CALLBACK}"),
     "test.afterAll(async () =>"),
)

# ── imports ──

_LEGACY_MODULES = r"chai|assert|node:assert|selenium-webdriver|puppeteer|jquery|cypress"
_LEGACY_IMPORTS = (
    re.compile(
        rf"^[ \t]*(?:const|let|var)\s+[^=\n]+=\s*require\(\s*['\"](?:{_LEGACY_MODULES})['\"]\s*\)"
        r"(?:\.\w+)?\s*;?[ \t]*\n?",
        re.MULTILINE,
    ),
    re.compile(
        rf"^[ \t]*import\s+[^;\n]+?\s+from\s+['\"](?:{_LEGACY_MODULES})['\"]\s*;?[ \t]*\n?",
        re.MULTILINE,
    ),
    re.compile(r"^[ \t]*///\s*<reference\s+types=['\"]cypress['\"]\s*/>[ \t]*\n?", re.MULTILINE),
)

_DOUBLE_AWAIT = re.compile(r"\bawait(?:\s+await\b)+")
_BLANK_RUNS = re.compile(r"\n{3,}")


@dataclass(frozen=True)
class Stage:
    """pipeline 的一個階段"""
    name: str
    apply: Callable[[str, str], str]


def _apply_category(category: Category) -> Callable[[str, str], str]:
    def apply(text: str, name: str) -> str:
        for rule in CATALOG[category]:
            if rule.template is None:
                continue
            text = rule.pattern.sub(rule.template, text)
        return text
    return apply


def file_title(file_name: str) -> str:
    """login.test.js → 'login test'"""
    base = PurePath(file_name).name
    if base.endswith(".js"):
        base = base[:-3]
    return re.sub(r"[.\-]", " ", base)


def wrap_structure(text: str, name: str = "migrated") -> str:
    """
    轉換測試宣告（describe / it / test / hooks）為 Playwright 形式。

    只替換宣告的 header，body 原封不動。
    沒有任何測試結構時，整段包進 test.describe + test('main')。
    已經 import Playwright 的檔案不處理。
    """
    if _HAS_PLAYWRIGHT_IMPORT.search(text):
        return text

    if _HAS_TEST_STRUCTURE.search(text):
        for pattern, template in _STRUCTURE_RULES:
            text = pattern.sub(template, text)
        return text

    title = file_title(name).replace("'", "\\'")
    body = "\n".join(("    " + line) if line.strip() else "" for line in text.split("\n"))
    return (
        f"test.describe('{title}', () => {{\n"
        f"  test('main', async ({{ page }}) => {{\n"
        f"{body}\n"
        f"  }});\n"
        f"}});\n"
    )


def cleanup(text: str, name: str = "") -> str:
    """合併重複的 await、壓縮連續空行"""
    text = _DOUBLE_AWAIT.sub("await", text)
    return _BLANK_RUNS.sub("\n\n", text)


def normalize_imports(text: str, name: str = "") -> str:
    """移除舊框架的 import，沒有 Playwright import 時補上一行"""
    if _HAS_PLAYWRIGHT_IMPORT.search(text):
        return text
    for pattern in _LEGACY_IMPORTS:
        text = pattern.sub("", text)
    body = text.lstrip("\n")
    return f"{PLAYWRIGHT_IMPORT}\n\n{body}"


PIPELINE: tuple[Stage, ...] = tuple(
    Stage(category.value, _apply_category(category)) for category in Category
) + (
    Stage("structure", wrap_structure),
    Stage("cleanup", cleanup),
    Stage("imports", normalize_imports),
)


def stage(name: str) -> Stage:
    """依名稱取得單一 stage（測試 / 除錯用）"""
    for s in PIPELINE:
        if s.name == name:
            return s
    raise KeyError(name)


def rewrite(text: str, name: str = "migrated.js") -> str:
    """
    直接改寫整個檔案。

    Args:
        text: 原始內容
        name: 檔名（沒有測試結構時用來命名 test.describe）

    Returns:
        Playwright 版本的內容
    """
    for s in PIPELINE:
        text = s.apply(text, name)
    return text
