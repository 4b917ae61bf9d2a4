"""
Step Definition Renderer
把整次執行的 StepVocabulary + 固定的基本步驟，輸出成 cucumber-js 的 step definitions。

phrase 裡的 "字面參數" 會還原成 {string}，同一個 cucumber expression 只輸出一次，
避免具體步驟與參數化步驟同時存在造成 ambiguous match。
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from migrator.patterns import (
    GIVEN_DEFAULT,
    THEN_FALLBACK,
    WHEN_FALLBACK,
)
from migrator.schema import PHASE_ORDER, Phase, StepVocabulary, SynthesizedStep

_LITERAL = re.compile(r'"[^"]*"')

PENDING = ["return 'pending';"]


@dataclass(frozen=True)
class Binding:
    """單一 step definition"""
    phase: Phase
    expression: str
    params: tuple[str, ...] = ()
    body: tuple[str, ...] = tuple(PENDING)


def _b(phase, expression, params=(), body=PENDING):
    return Binding(phase, expression, tuple(params), tuple(body))


# 固定輸出的基本步驟（同時也是已知 expression 的實作表）
BASELINE: tuple[Binding, ...] = (
    _b(Phase.GIVEN, GIVEN_DEFAULT, body=["await this.page!.goto('/');"]),
    _b(Phase.GIVEN, "I navigate to {string}", ["url"], ["await this.page!.goto(url);"]),
    _b(Phase.GIVEN, "I am on the {string} page", ["pageName"], [
        "const urls: Record<string, string> = {",
        "  'home': '/',",
        "  'login': '/login',",
        "  'register': '/register',",
        "  'dashboard': '/dashboard',",
        "};",
        "await this.page!.goto(urls[pageName.toLowerCase()] || '/' + pageName);",
    ]),
    _b(Phase.WHEN, "I click on {string}", ["selector"],
       ["await this.page!.locator(selector).click();"]),
    _b(Phase.WHEN, "I enter {string} in the {string} field", ["value", "selector"],
       ["await this.page!.locator(selector).fill(value);"]),
    _b(Phase.WHEN, "I clear the {string} field", ["selector"],
       ["await this.page!.locator(selector).clear();"]),
    _b(Phase.WHEN, "I check the {string} checkbox", ["selector"],
       ["await this.page!.locator(selector).check();"]),
    _b(Phase.WHEN, "I select {string} from {string}", ["option", "selector"],
       ["await this.page!.locator(selector).selectOption(option);"]),
    _b(Phase.WHEN, "I hover over {string}", ["selector"],
       ["await this.page!.locator(selector).hover();"]),
    _b(Phase.WHEN, "I press {string}", ["key"],
       ["await this.page!.keyboard.press(key);"]),
    _b(Phase.WHEN, WHEN_FALLBACK, body=[
        "// Generated placeholder: replace with the actions of the original test.",
        *PENDING,
    ]),
    _b(Phase.THEN, "I should see {string}", ["text"],
       ["await expect(this.page!.getByText(text)).toBeVisible();"]),
    _b(Phase.THEN, "I should not see {string}", ["text"],
       ["await expect(this.page!.getByText(text)).not.toBeVisible();"]),
    _b(Phase.THEN, "the element {string} should be visible", ["selector"],
       ["await expect(this.page!.locator(selector)).toBeVisible();"]),
    _b(Phase.THEN, "the element {string} should contain {string}", ["selector", "text"],
       ["await expect(this.page!.locator(selector)).toContainText(text);"]),
    _b(Phase.THEN, "the input {string} should have value {string}", ["selector", "value"],
       ["await expect(this.page!.locator(selector)).toHaveValue(value);"]),
    _b(Phase.THEN, "the URL should be {string}", ["url"],
       ["await expect(this.page!).toHaveURL(url);"]),
    _b(Phase.THEN, "the URL should contain {string}", ["urlPart"],
       ["await expect(this.page!).toHaveURL(new RegExp(urlPart));"]),
    _b(Phase.THEN, "the page title should be {string}", ["title"],
       ["await expect(this.page!).toHaveTitle(title);"]),
    _b(Phase.THEN, "I should see the expected content", body=[
        "await expect(this.page!.locator('body')).not.toBeEmpty();",
    ]),
    _b(Phase.THEN, "the assertion should pass", body=[
        "// Generated placeholder: port the assertion of the original test.",
        *PENDING,
    ]),
    _b(Phase.THEN, "the element should contain the expected text", body=[
        "// Generated placeholder: name the element and the expected text.",
        *PENDING,
    ]),
    _b(Phase.THEN, THEN_FALLBACK, body=[
        "await expect(this.page!.locator('body')).toBeVisible();",
    ]),
)

_KNOWN = {b.expression: b for b in BASELINE}

_HEADER = """\
import { Given, When, Then } from '@cucumber/cucumber';
import { expect } from '@playwright/test';
import { ICustomWorld } from '../support/world';
"""

_SECTION = """\
// =============================================================================
// {title} STEPS
// =============================================================================
"""


def to_expression(phrase: str) -> str:
    """'I click on ".btn"' → 'I click on {string}'"""
    return _LITERAL.sub("{string}", phrase)


def binding_for(step: SynthesizedStep) -> Binding:
    """依 phrase 對應到實作；未知的 expression 產生 pending binding"""
    expression = to_expression(step.phrase)
    known = _KNOWN.get(expression)
    if known is not None:
        return known
    count = expression.count("{string}")
    params = tuple(f"arg{i + 1}" for i in range(count))
    return Binding(step.phase, expression, params)


def collect_bindings(vocabulary: StepVocabulary) -> list[Binding]:
    """詞彙 + 基本步驟，依 expression 去重，phase → 字母排序"""
    bindings: dict[str, Binding] = {b.expression: b for b in BASELINE}
    for step in vocabulary.freeze():
        binding = binding_for(step)
        bindings.setdefault(binding.expression, binding)
    return sorted(bindings.values(), key=lambda b: (PHASE_ORDER[b.phase], b.expression))


def _escape(expression: str) -> str:
    return expression.replace("\\", "\\\\").replace("'", "\\'")


def _render_binding(binding: Binding) -> str:
    params = ["this: ICustomWorld", *(f"{p}: string" for p in binding.params)]
    body = "\n".join(f"  {line}" if line else "" for line in binding.body)
    return (
        f"{binding.phase.value}('{_escape(binding.expression)}', "
        f"async function ({', '.join(params)}) {{\n"
        f"{body}\n"
        f"}});\n"
    )


def render_step_definitions(vocabulary: StepVocabulary) -> str:
    """
    輸出 common.steps.ts。

    Args:
        vocabulary: 整次執行凍結後的詞彙

    Returns:
        TypeScript 原始碼，每個 expression 恰好一個 binding
    """
    parts = [_HEADER]
    current = None
    for binding in collect_bindings(vocabulary):
        if binding.phase != current:
            parts.append(_SECTION.format(title=binding.phase.value.upper()))
            current = binding.phase
        parts.append(_render_binding(binding))
    return "\n".join(parts)
