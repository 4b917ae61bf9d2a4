"""
Scenario / Feature Builder
從 describe / it 標記切出測試案例，組成 Feature，並輸出 .feature 文字。

- Scenario 依原始碼順序排列，describe 只影響 tag，不做巢狀
- 檔案沒有任何測試案例時，以 "Main test" 代替，確保至少一個 Scenario
"""

from __future__ import annotations

import re
from pathlib import PurePath

from core.exceptions import TransformError
from migrator.schema import Feature, Phase, Scenario, SynthesizedStep, TestCase

MAIN_TEST_NAME = "Main test"
FEATURE_TAG = "@migrated"

_HEADER = re.compile(
    r"(?<![\w.$])(?P<kw>(?:test\.)?describe|context|it|test)"
    r"(?:\.(?:only|skip|serial|parallel))?\s*\(\s*"
    r"(?P<q>['\"`])(?P<title>.*?)(?P=q)"
)

# 字串與註解（遮成等長空白後計算大括號深度，或只遮註解後找標記）
_MASKABLE = re.compile(
    r"//[^\n]*|/\*.*?\*/|'(?:\\.|[^'\\\n])*'|\"(?:\\.|[^\"\\\n])*\"|`(?:\\.|[^`\\])*`",
    re.DOTALL,
)


def _mask(text: str) -> str:
    return _MASKABLE.sub(lambda m: " " * len(m.group(0)), text)


def _mask_comments(text: str) -> str:
    """只遮掉註解，字串保留（標題要從字串取）"""
    def repl(m):
        token = m.group(0)
        return " " * len(token) if token.startswith(("//", "/*")) else token
    return _MASKABLE.sub(repl, text)


def _headers(text: str) -> list[re.Match]:
    """註解以外的 describe / it / test 標記"""
    return list(_HEADER.finditer(_mask_comments(text)))


def _depths(text: str) -> list[int]:
    """每個位置的大括號深度"""
    depth = 0
    out = []
    for ch in _mask(text):
        out.append(depth)
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth = max(0, depth - 1)
    out.append(depth)
    return out


def extract_test_cases(text: str) -> list[TestCase]:
    """
    依出現順序切出測試案例。

    每個 it / test 的 body 是從它的 header 到下一個 header（或檔尾）的文字；
    describe_label 是外層最近的 describe 標題（巢狀時以 " > " 串接）；
    setups 是外層各 describe 從 header 到第一個子標記之間的文字
    （beforeEach 等 hook 所在），由內而外排列。
    """
    headers = _headers(text)
    if not headers:
        return []

    depths = _depths(text)
    stack: list[tuple[str, int, str]] = []
    cases: list[TestCase] = []

    for i, header in enumerate(headers):
        depth = depths[header.start()]
        while stack and stack[-1][1] >= depth:
            stack.pop()

        end = headers[i + 1].start() if i + 1 < len(headers) else len(text)
        if header.group("kw") in ("describe", "test.describe", "context"):
            stack.append((header.group("title"), depth, text[header.start():end]))
            continue

        cases.append(TestCase(
            describe_label=" > ".join(label for label, _, _ in stack),
            name=header.group("title"),
            body=text[header.start():end],
            setups=tuple(setup for _, _, setup in reversed(stack)),
        ))

    return cases


def preamble(text: str) -> str:
    """第一個測試案例之前的文字（hooks、共用設定）"""
    for header in _headers(text):
        if header.group("kw") in ("it", "test"):
            return text[:header.start()]
    return text


def ensure_test_cases(text: str, cases: list[TestCase]) -> list[TestCase]:
    """沒有測試案例時以整個檔案作為 "Main test" """
    if cases:
        return cases
    return [TestCase(describe_label="", name=MAIN_TEST_NAME, body=text)]


def feature_title(file_name: str) -> str:
    """login_page.test.js → 'Login Page Test'"""
    base = PurePath(file_name).name
    if base.endswith(".js"):
        base = base[:-3]
    words = re.sub(r"[._\-]", " ", base).split()
    return " ".join(w[:1].upper() + w[1:].lower() for w in words)


def tag_for(label: str) -> str:
    """describe 標題 → Gherkin tag"""
    slug = re.sub(r"[^\w]+", "-", label.lower()).strip("-")
    return f"@{slug}" if slug else ""


def build_feature(
    file_name: str,
    test_cases: list[TestCase],
    steps_by_test_case: list[list[SynthesizedStep]],
) -> Feature:
    """
    組成 Feature。

    Args:
        file_name: 來源檔名（用來產生標題）
        test_cases: extract_test_cases() 的結果
        steps_by_test_case: 與 test_cases 一一對應的步驟

    Raises:
        TransformError: 測試案例與步驟數量不一致，或步驟不完整
    """
    if not test_cases:
        test_cases = [TestCase(describe_label="", name=MAIN_TEST_NAME)]
    if len(test_cases) != len(steps_by_test_case):
        raise TransformError(
            file_name,
            f"{len(test_cases)} 個測試案例但有 {len(steps_by_test_case)} 組步驟",
        )

    feature = Feature(title=feature_title(file_name), tags={FEATURE_TAG})
    for case, steps in zip(test_cases, steps_by_test_case):
        scenario = Scenario(name=case.name, steps=list(steps))
        tag = tag_for(case.describe_label.split(" > ")[-1]) if case.describe_label else ""
        if tag:
            scenario.tags.add(tag)
        _check_complete(file_name, scenario)
        feature.scenarios.append(scenario)
    return feature


def _check_complete(file_name: str, scenario: Scenario) -> None:
    givens = scenario.steps_in(Phase.GIVEN)
    thens = scenario.steps_in(Phase.THEN)
    if len(givens) != 1 or not thens:
        raise TransformError(
            file_name,
            f"Scenario '{scenario.name}' 需要恰好一個 Given 與至少一個 Then",
        )


def render_feature(feature: Feature, use_and: bool = False) -> str:
    """
    輸出 Gherkin 文字。

    Args:
        feature: build_feature() 的結果
        use_and: 連續同 phase 的步驟改用 And（預設每行都寫 phase 關鍵字）
    """
    lines: list[str] = []
    if feature.tags:
        lines.append(" ".join(sorted(feature.tags)))
    lines.append(f"Feature: {feature.title}")

    for scenario in feature.scenarios:
        lines.append("")
        if scenario.tags:
            lines.append("  " + " ".join(sorted(scenario.tags)))
        lines.append(f"  Scenario: {scenario.name}")
        previous = None
        for step in scenario.steps:
            keyword = step.phase.value
            if use_and and step.phase == previous:
                keyword = "And"
            lines.append(f"    {keyword} {step.phrase}")
            previous = step.phase

    return "\n".join(lines) + "\n"
