"""
Pattern Catalog
舊版 DOM / jQuery / Cypress / Selenium / Puppeteer 寫法 → Playwright 的對照表。

純資料，不含行為：
- CATALOG：依分類排列的改寫 / 偵測規則（分類順序即改寫順序）
- STEP_RULES：合成 When 步驟用的複合 pattern（順序即優先序）
- THEN_CHECKS：合成 Then 步驟用的斷言偵測
- 固定步驟文字（Given 預設、When / Then fallback）

template 為 None 的規則只用於偵測（named detector），不參與改寫。
idiom_id 為 None 的規則是 pipeline 輔助規則（補 await），不計入偵測。
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from migrator.schema import Category, ExtractKind, PatternRule

# 字串字面值：單引號或雙引號，不含引號本身
_Q = r"""['"]"""
_STR = r"""[^'"]"""


def _rule(category, idiom_id, pattern, template=None, kind=None, flags=0,
          selector_format="{}", method=None):
    return PatternRule(
        category=category,
        idiom_id=idiom_id,
        pattern=re.compile(pattern, flags),
        template=template,
        kind=kind,
        selector_format=selector_format,
        method=method,
    )


# ── selectors ──

_SELECTORS = (
    _rule(Category.SELECTORS, "getElementById",
          rf"document\.getElementById\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)",
          r"page.locator('#\g<selector>')", ExtractKind.SELECT, selector_format="#{}"),
    _rule(Category.SELECTORS, "querySelectorAll",
          rf"document\.querySelectorAll\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)",
          r"page.locator('\g<selector>')", ExtractKind.SELECT),
    _rule(Category.SELECTORS, "querySelector",
          rf"document\.querySelector\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)",
          r"page.locator('\g<selector>')", ExtractKind.SELECT),
    _rule(Category.SELECTORS, "getElementsByClassName",
          rf"document\.getElementsByClassName\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)",
          r"page.locator('.\g<selector>')", ExtractKind.SELECT, selector_format=".{}"),
    _rule(Category.SELECTORS, "getElementsByTagName",
          rf"document\.getElementsByTagName\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)",
          r"page.locator('\g<selector>')", ExtractKind.SELECT),
    _rule(Category.SELECTORS, "getElementsByName",
          rf"document\.getElementsByName\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)",
          r"""page.locator('[name="\g<selector>"]')""", ExtractKind.SELECT,
          selector_format='[name="{}"]'),
    # Puppeteer 的 page.$ / page.$$ 必須在 jQuery 之前；jQuery 規則也排除前面是 "." 的情況
    _rule(Category.SELECTORS, "puppeteer",
          rf"\bpage\.\$\$?\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)",
          r"page.locator('\g<selector>')", ExtractKind.SELECT),
    _rule(Category.SELECTORS, "jQuery",
          rf"(?<![\w.$])(?:\$|jQuery)\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)",
          r"page.locator('\g<selector>')", ExtractKind.SELECT),
    _rule(Category.SELECTORS, "cypress",
          rf"\bcy\.get\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)",
          r"page.locator('\g<selector>')", ExtractKind.SELECT),
    _rule(Category.SELECTORS, "cypress",
          rf"\bcy\.contains\(\s*{_Q}(?P<value>{_STR}+){_Q}\s*\)",
          r"page.getByText('\g<value>')"),
    _rule(Category.SELECTORS, "selenium",
          rf"\b(?:driver|browser)\.findElements?\(\s*By\.id\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)\s*\)",
          r"page.locator('#\g<selector>')", ExtractKind.SELECT, selector_format="#{}"),
    _rule(Category.SELECTORS, "selenium",
          rf"\b(?:driver|browser)\.findElements?\(\s*By\.(?:css|cssSelector|tagName)\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)\s*\)",
          r"page.locator('\g<selector>')", ExtractKind.SELECT),
    _rule(Category.SELECTORS, "selenium",
          rf"\b(?:driver|browser)\.findElements?\(\s*By\.name\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)\s*\)",
          r"""page.locator('[name="\g<selector>"]')""", ExtractKind.SELECT,
          selector_format='[name="{}"]'),
    _rule(Category.SELECTORS, "selenium",
          rf"\b(?:driver|browser)\.findElements?\(\s*By\.className\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)\s*\)",
          r"page.locator('.\g<selector>')", ExtractKind.SELECT, selector_format=".{}"),
    _rule(Category.SELECTORS, "selenium",
          rf"\b(?:driver|browser)\.findElements?\(\s*By\.xpath\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)\s*\)",
          r"page.locator('xpath=\g<selector>')", ExtractKind.SELECT,
          selector_format="xpath={}"),
    _rule(Category.SELECTORS, "shadow-dom", r"\.shadowRoot\b|\bcontentDocument\b"),
    _rule(Category.SELECTORS, "cypress", r"\bcy\.\w+\("),
    _rule(Category.SELECTORS, "selenium", r"\bnew\s+Builder\(\)|\bBy\.\w+\("),
)

# ── properties（讀取 → async accessor；寫入 → fill）──

# 讀取：後面不是賦值（允許 == / ===），也不是已經呼叫過的 accessor
_NOT_ASSIGNED = r"\b(?!\s*(?:=(?!=)|\())"

_PROPERTIES = (
    _rule(Category.PROPERTIES, "DOM-properties", rf"\.innerText{_NOT_ASSIGNED}", ".textContent()"),
    _rule(Category.PROPERTIES, "DOM-properties", rf"\.textContent{_NOT_ASSIGNED}", ".textContent()"),
    _rule(Category.PROPERTIES, "DOM-properties", rf"\.innerHTML{_NOT_ASSIGNED}", ".innerHTML()"),
    _rule(Category.PROPERTIES, "DOM-properties", rf"\.value{_NOT_ASSIGNED}", ".inputValue()"),
    _rule(Category.PROPERTIES, "DOM-properties", r"\.val\(\s*\)", ".inputValue()"),
    _rule(Category.PROPERTIES, "DOM-properties", r"\.text\(\s*\)", ".textContent()"),
    _rule(Category.PROPERTIES, "DOM-properties", r"\.html\(\s*\)", ".innerHTML()"),
    _rule(Category.PROPERTIES, "DOM-properties", r"\.(?:innerText|innerHTML|textContent)\b"),
    _rule(Category.PROPERTIES, "DOM-mutations",
          rf"\.value\s*=\s*{_Q}(?P<value>{_STR}*){_Q}",
          r".fill('\g<value>')", ExtractKind.ACTION, method="fill"),
    _rule(Category.PROPERTIES, "jQuery",
          rf"\.val\(\s*{_Q}(?P<value>{_STR}*){_Q}\s*\)",
          r".fill('\g<value>')", ExtractKind.ACTION, method="fill"),
    _rule(Category.PROPERTIES, "cypress",
          rf"\.type\(\s*{_Q}(?P<value>{_STR}*){_Q}\s*\)",
          r".fill('\g<value>')", ExtractKind.ACTION, method="fill"),
    _rule(Category.PROPERTIES, "selenium",
          rf"\.sendKeys\(\s*{_Q}(?P<value>{_STR}*){_Q}\s*\)",
          r".fill('\g<value>')", ExtractKind.ACTION, method="fill"),
)

# ── actions ──

_ACTIONS = (
    _rule(Category.ACTIONS, "DOM-actions", r"\.(?P<method>click|focus|blur)\(\)",
          kind=ExtractKind.ACTION),
    _rule(Category.ACTIONS, "DOM-actions", r"\.submit\(\)", ".press('Enter')",
          ExtractKind.ACTION, method="submit"),
    _rule(Category.ACTIONS, "DOM-actions", r"\.scrollIntoView\([^)]*\)",
          ".scrollIntoViewIfNeeded()", ExtractKind.ACTION, method="scrollIntoView"),
    _rule(Category.ACTIONS, "puppeteer",
          rf"\bpage\.click\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)",
          r"page.locator('\g<selector>').click()", ExtractKind.ACTION, method="click"),
    _rule(Category.ACTIONS, "puppeteer",
          rf"\bpage\.type\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*,\s*{_Q}(?P<value>{_STR}*){_Q}\s*\)",
          r"page.locator('\g<selector>').fill('\g<value>')", ExtractKind.ACTION, method="fill"),
    _rule(Category.ACTIONS, "events", r"\.addEventListener\("),
    # 行首的 locator 呼叫補上 await
    _rule(Category.ACTIONS, None,
          r"^(?P<indent>[ \t]*)(?P<chain>page\.(?:locator|getByText)\()",
          r"\g<indent>await \g<chain>", flags=re.MULTILINE),
    # 賦值右側的 accessor 讀取補上 await
    _rule(Category.ACTIONS, None,
          r"(?<![=!<>])(?P<lhs>=(?!=|>)\s*)"
          r"(?P<chain>page\.locator\((?:[^()]|\([^()]*\))*\)"
          r"\.(?:textContent|innerHTML|inputValue|getAttribute|isVisible|count)\()",
          r"\g<lhs>await \g<chain>"),
)

# ── navigation ──

_NAVIGATION = (
    _rule(Category.NAVIGATION, "navigation",
          rf"\bwindow\.location\.href\s*=\s*{_Q}(?P<value>{_STR}+){_Q}",
          r"await page.goto('\g<value>')", ExtractKind.NAVIGATION, method="goto"),
    _rule(Category.NAVIGATION, "navigation",
          rf"\bwindow\.location\s*=\s*{_Q}(?P<value>{_STR}+){_Q}",
          r"await page.goto('\g<value>')", ExtractKind.NAVIGATION, method="goto"),
    _rule(Category.NAVIGATION, "navigation",
          rf"\bwindow\.location\.assign\(\s*{_Q}(?P<value>{_STR}+){_Q}\s*\)",
          r"await page.goto('\g<value>')", ExtractKind.NAVIGATION, method="goto"),
    _rule(Category.NAVIGATION, "navigation", r"\bwindow\.location\.reload\(\)",
          "await page.reload()", ExtractKind.NAVIGATION, method="reload"),
    _rule(Category.NAVIGATION, "navigation", r"(?<![\w.])(?:window\.)?history\.back\(\)",
          "await page.goBack()", ExtractKind.NAVIGATION, method="goBack"),
    _rule(Category.NAVIGATION, "navigation", r"(?<![\w.])(?:window\.)?history\.forward\(\)",
          "await page.goForward()", ExtractKind.NAVIGATION, method="goForward"),
    _rule(Category.NAVIGATION, "navigation",
          rf"\bcy\.visit\(\s*{_Q}(?P<value>{_STR}+){_Q}\s*\)",
          r"await page.goto('\g<value>')", ExtractKind.NAVIGATION, method="goto"),
    _rule(Category.NAVIGATION, "navigation",
          rf"\b(?:driver|browser)\.(?:get|navigate\(\)\.to)\(\s*{_Q}(?P<value>{_STR}+){_Q}\s*\)",
          r"await page.goto('\g<value>')", ExtractKind.NAVIGATION, method="goto"),
    _rule(Category.NAVIGATION, "navigation", r"\b(?:driver|browser)\.navigate\(\)\.refresh\(\)",
          "await page.reload()", ExtractKind.NAVIGATION, method="reload"),
    _rule(Category.NAVIGATION, "navigation", r"\bwindow\.location\b"),
)

# ── waits ──

_WAIT_NOTE = "// TODO: Replace with proper waiting"

_WAITS = (
    _rule(Category.WAITS, "timers",
          r"await\s+new\s+Promise\(\s*\(?\s*(?P<resolve>\w+)\s*\)?\s*=>\s*"
          r"setTimeout\(\s*(?P=resolve)\s*,\s*(?P<value>\d+)\s*\)\s*\)",
          r"await page.waitForTimeout(\g<value>)"),
    _rule(Category.WAITS, "timers",
          r"^(?P<indent>[ \t]*)setTimeout\s*\([^,]+,\s*(?P<value>\d+)\s*\)",
          rf"\g<indent>{_WAIT_NOTE}\n\g<indent>await page.waitForTimeout(\g<value>)",
          flags=re.MULTILINE),
    _rule(Category.WAITS, "timers",
          r"^(?P<indent>[ \t]*)await\s+sleep\s*\(\s*(?P<value>\d+)\s*\)",
          rf"\g<indent>{_WAIT_NOTE}\n\g<indent>await page.waitForTimeout(\g<value>)",
          flags=re.MULTILINE),
    _rule(Category.WAITS, "timers", r"\bcy\.wait\(\s*(?P<value>\d+)\s*\)",
          r"await page.waitForTimeout(\g<value>)"),
    _rule(Category.WAITS, "timers", r"\b(?:driver|browser)\.sleep\(\s*(?P<value>\d+)\s*\)",
          r"page.waitForTimeout(\g<value>)"),
    _rule(Category.WAITS, "timers", r"\bset(?:Timeout|Interval)\b"),
)

# ── storage ──

# 已經包在 page.evaluate(() => ...) 裡的不再處理
_NOT_EVALUATED = r"(?<!\(\) => )"

_STORAGE = (
    _rule(Category.STORAGE, "storage",
          rf"{_NOT_EVALUATED}\b(?P<store>localStorage|sessionStorage)\.setItem\(\s*"
          rf"{_Q}(?P<key>{_STR}+){_Q}\s*,\s*(?P<value>(?:[^()]|\([^()]*\))+)\)",
          r"await page.evaluate(() => \g<store>.setItem('\g<key>', \g<value>))"),
    _rule(Category.STORAGE, "storage",
          rf"{_NOT_EVALUATED}\b(?P<store>localStorage|sessionStorage)\.getItem\(\s*"
          rf"{_Q}(?P<key>{_STR}+){_Q}\s*\)",
          r"await page.evaluate(() => \g<store>.getItem('\g<key>'))"),
    _rule(Category.STORAGE, "storage",
          rf"{_NOT_EVALUATED}\b(?P<store>localStorage|sessionStorage)\.removeItem\(\s*"
          rf"{_Q}(?P<key>{_STR}+){_Q}\s*\)",
          r"await page.evaluate(() => \g<store>.removeItem('\g<key>'))"),
    _rule(Category.STORAGE, "storage",
          rf"{_NOT_EVALUATED}\b(?P<store>localStorage|sessionStorage)\.clear\(\)",
          r"await page.evaluate(() => \g<store>.clear())"),
    _rule(Category.STORAGE, "storage", r"\b(?:localStorage|sessionStorage)\."),
)

# ── dialogs ──

_DIALOGS = (
    _rule(Category.DIALOGS, "dialogs",
          rf"^(?P<indent>[ \t]*)(?:window\.)?alert\(\s*{_Q}(?P<value>{_STR}+){_Q}\s*\)",
          r"\g<indent>// Dialog: '\g<value>'"
          "\n"
          r"\g<indent>page.once('dialog', d => d.accept())",
          flags=re.MULTILINE),
    _rule(Category.DIALOGS, "dialogs",
          rf"^(?P<indent>[ \t]*)(?:window\.)?confirm\(\s*{_Q}(?P<value>{_STR}+){_Q}\s*\)",
          r"\g<indent>// Confirm: '\g<value>'"
          "\n"
          r"\g<indent>page.once('dialog', d => d.accept())",
          flags=re.MULTILINE),
    _rule(Category.DIALOGS, "dialogs", r"(?<![\w.])(?:window\.)?(?:alert|confirm|prompt)\("),
)

# ── assertions ──

# 單層括號內的參數（如 a.b(c)）
_ARG = r"[^,()]+(?:\([^()]*\))?"
_LOCATOR = r"page\.(?:locator|getByText)\((?:[^()]|\([^()]*\))*\)"

_ASSERTIONS = (
    _rule(Category.ASSERTIONS, "assertions",
          rf"\bassert\.deep(?:Strict)?Equal\(\s*(?P<actual>{_ARG})\s*,\s*(?P<expected>{_ARG})\s*\)",
          r"expect(\g<actual>).toEqual(\g<expected>)"),
    _rule(Category.ASSERTIONS, "assertions",
          rf"\bassert\.(?:strictEqual|equal)\(\s*(?P<actual>{_ARG})\s*,\s*(?P<expected>{_ARG})\s*\)",
          r"expect(\g<actual>).toBe(\g<expected>)"),
    _rule(Category.ASSERTIONS, "assertions",
          rf"\bassert(?:\.ok)?\(\s*(?P<actual>{_ARG})\s*\)",
          r"expect(\g<actual>).toBeTruthy()"),
    _rule(Category.ASSERTIONS, "assertions", r"\.to\.deep\.equal\(", ".toEqual("),
    _rule(Category.ASSERTIONS, "assertions", r"\.to\.(?:equal|eq)\(", ".toBe("),
    _rule(Category.ASSERTIONS, "assertions", r"\.to\.(?:contain|include)\(", ".toContain("),
    _rule(Category.ASSERTIONS, "assertions", r"\.to\.have\.length\(", ".toHaveLength("),
    _rule(Category.ASSERTIONS, "assertions", r"\.to\.be\.true\b", ".toBe(true)"),
    _rule(Category.ASSERTIONS, "assertions", r"\.to\.be\.false\b", ".toBe(false)"),
    _rule(Category.ASSERTIONS, "assertions", r"\.to\.be\.ok\b|\.to\.exist\b", ".toBeTruthy()"),
    # Cypress .should(...)：需要 selectors / actions 階段已把鏈轉成 locator
    _rule(Category.ASSERTIONS, "assertions",
          rf"^(?P<indent>[ \t]*)(?:await )?(?P<locator>{_LOCATOR})"
          rf"\.should\(\s*{_Q}be\.visible{_Q}\s*\)",
          r"\g<indent>await expect(\g<locator>).toBeVisible()", flags=re.MULTILINE),
    _rule(Category.ASSERTIONS, "assertions",
          rf"^(?P<indent>[ \t]*)(?:await )?(?P<locator>{_LOCATOR})"
          rf"\.should\(\s*{_Q}not\.(?:be\.visible|exist){_Q}\s*\)",
          r"\g<indent>await expect(\g<locator>).toBeHidden()", flags=re.MULTILINE),
    _rule(Category.ASSERTIONS, "assertions",
          rf"^(?P<indent>[ \t]*)(?:await )?(?P<locator>{_LOCATOR})"
          rf"\.should\(\s*{_Q}(?:contain|include)\.text{_Q}\s*,\s*(?P<value>{_Q}{_STR}*{_Q})\s*\)",
          r"\g<indent>await expect(\g<locator>).toContainText(\g<value>)", flags=re.MULTILINE),
    _rule(Category.ASSERTIONS, "assertions",
          rf"^(?P<indent>[ \t]*)(?:await )?(?P<locator>{_LOCATOR})"
          rf"\.should\(\s*{_Q}have\.text{_Q}\s*,\s*(?P<value>{_Q}{_STR}*{_Q})\s*\)",
          r"\g<indent>await expect(\g<locator>).toHaveText(\g<value>)", flags=re.MULTILINE),
    _rule(Category.ASSERTIONS, "assertions",
          rf"^(?P<indent>[ \t]*)(?:await )?(?P<locator>{_LOCATOR})"
          rf"\.should\(\s*{_Q}have\.value{_Q}\s*,\s*(?P<value>{_Q}{_STR}*{_Q})\s*\)",
          r"\g<indent>await expect(\g<locator>).toHaveValue(\g<value>)", flags=re.MULTILINE),
)

CATALOG: dict[Category, tuple[PatternRule, ...]] = {
    Category.SELECTORS: _SELECTORS,
    Category.PROPERTIES: _PROPERTIES,
    Category.ACTIONS: _ACTIONS,
    Category.NAVIGATION: _NAVIGATION,
    Category.WAITS: _WAITS,
    Category.STORAGE: _STORAGE,
    Category.DIALOGS: _DIALOGS,
    Category.ASSERTIONS: _ASSERTIONS,
}


def rules_for(category: Category) -> tuple[PatternRule, ...]:
    return CATALOG[category]


def all_rules() -> list[PatternRule]:
    """依分類順序列出所有規則"""
    return [rule for category in Category for rule in CATALOG[category]]


def idiom_ids() -> list[str]:
    """所有可偵測的 idiom（去重，保留宣告順序）"""
    seen: dict[str, None] = {}
    for rule in all_rules():
        if rule.idiom_id:
            seen.setdefault(rule.idiom_id, None)
    return list(seen)


# ── 步驟合成用 pattern ──

GIVEN_DEFAULT = "I am on the application page"
GIVEN_NAVIGATE = 'I navigate to "{url}"'
WHEN_ENTER = 'I enter "{value}" in the "{selector}" field'
WHEN_CLICK = 'I click on "{selector}"'
WHEN_FALLBACK = "I perform the test actions"
THEN_FALLBACK = "I should see the expected result"


@dataclass(frozen=True)
class StepRule:
    """複合 pattern（選取 + 操作）→ When 步驟"""
    step_id: str
    pattern: re.Pattern
    template: str
    selector_format: str = "{}"

    def render(self, match: re.Match) -> str:
        groups = match.groupdict()
        return self.template.format(
            selector=self.selector_format.format(groups.get("selector", "")),
            value=groups.get("value", ""),
        )


def _step(step_id, pattern, template, selector_format="{}"):
    return StepRule(step_id, re.compile(pattern), template, selector_format)


_ASSIGN = rf"\.value\s*=\s*{_Q}(?P<value>{_STR}*){_Q}"
_CLICK = r"\.click\(\)"
_BY_ID = rf"document\.getElementById\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)"
_BY_SELECTOR = rf"document\.querySelector(?:All)?\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)"
_JQUERY = rf"(?<![\w.$])(?:\$|jQuery)\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)"
_CY_GET = rf"\bcy\.get\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)"

# 順序即優先序（a → f）
STEP_RULES: tuple[StepRule, ...] = (
    _step("id-fill", _BY_ID + _ASSIGN, WHEN_ENTER, "#{}"),
    _step("selector-fill", _BY_SELECTOR + _ASSIGN, WHEN_ENTER),
    _step("library-fill", _JQUERY + rf"\.val\(\s*{_Q}(?P<value>{_STR}*){_Q}\s*\)", WHEN_ENTER),
    _step("library-fill", _CY_GET + rf"\.type\(\s*{_Q}(?P<value>{_STR}*){_Q}\s*\)", WHEN_ENTER),
    _step("library-fill",
          rf"\bpage\.type\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*,\s*{_Q}(?P<value>{_STR}*){_Q}\s*\)",
          WHEN_ENTER),
    _step("id-click", _BY_ID + _CLICK, WHEN_CLICK, "#{}"),
    _step("selector-click", _BY_SELECTOR + _CLICK, WHEN_CLICK),
    _step("library-click", _JQUERY + _CLICK, WHEN_CLICK),
    _step("library-click", _CY_GET + _CLICK, WHEN_CLICK),
    _step("library-click", rf"\bpage\.click\(\s*{_Q}(?P<selector>{_STR}+){_Q}\s*\)", WHEN_CLICK),
)

# Then 步驟：彼此獨立判斷，順序即輸出順序
THEN_CHECKS: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"\.(?:innerText|innerHTML|textContent)\b|\.(?:text|html)\(\s*\)"),
     "I should see the expected content"),
    (re.compile(r"\bthrow\s+new\s+Error\b|\bassert(?:\.\w+)?\(|\bexpect\(|\.should\("),
     "the assertion should pass"),
    (re.compile(r"\.includes\(|\.indexOf\(|\.contains\(|\bcy\.contains\(|\.to\.(?:contain|include)\b"),
     "the element should contain the expected text"),
)

