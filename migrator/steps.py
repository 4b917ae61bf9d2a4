"""
Step Synthesizer
根據偵測結果，把一段測試程式碼轉成 Given / When / Then 步驟。

評估順序固定：
    1. Given：有導航且擷取到 URL → I navigate to "<url>"，否則預設頁面
    2. When：依 STEP_RULES 優先序（填值 → 點擊），每個不同的命中一個步驟；
       完全沒有時補 fallback
    3. Then：THEN_CHECKS 各自獨立判斷，全部沒命中時補 fallback

合成的步驟可以併入 StepVocabulary（整次執行共用、去重）。
"""

from __future__ import annotations

from migrator.patterns import (
    GIVEN_DEFAULT,
    GIVEN_NAVIGATE,
    STEP_RULES,
    THEN_CHECKS,
    THEN_FALLBACK,
    WHEN_FALLBACK,
)
from migrator.schema import DetectionResult, Phase, StepVocabulary, SynthesizedStep
from utils.logger import logger


def given_step(detection: DetectionResult, fallback_url: str | None = None) -> SynthesizedStep:
    """每個測試案例恰好一個 Given"""
    url = detection.navigation_url if "navigation" in detection.idiom_ids else None
    url = url or fallback_url
    if url:
        return SynthesizedStep(Phase.GIVEN, GIVEN_NAVIGATE.format(url=url))
    return SynthesizedStep(Phase.GIVEN, GIVEN_DEFAULT)


def when_steps(text: str) -> list[SynthesizedStep]:
    """依優先序收集操作步驟；同一個 phrase 只出現一次"""
    phrases: list[str] = []
    for rule in STEP_RULES:
        for match in rule.pattern.finditer(text):
            phrase = rule.render(match)
            if phrase not in phrases:
                phrases.append(phrase)
    if not phrases:
        phrases.append(WHEN_FALLBACK)
    return [SynthesizedStep(Phase.WHEN, p) for p in phrases]


def then_steps(text: str) -> list[SynthesizedStep]:
    """斷言步驟：各項獨立判斷，順序同 THEN_CHECKS"""
    phrases = [phrase for pattern, phrase in THEN_CHECKS if pattern.search(text)]
    if not phrases:
        phrases.append(THEN_FALLBACK)
    return [SynthesizedStep(Phase.THEN, p) for p in phrases]


def synthesize(
    text: str,
    detection: DetectionResult,
    fallback_url: str | None = None,
    then_text: str | None = None,
) -> list[SynthesizedStep]:
    """
    合成單一測試案例的步驟。

    Args:
        text: 測試案例的原始碼（整個檔案或單一 it() 的 body）
        detection: 同一段文字的偵測結果
        fallback_url: 這段文字沒有導航時使用的 URL（例如 beforeEach 裡的導航）
        then_text: 斷言判斷用的文字（整個檔案），預設同 text

    Returns:
        Given → When → Then 排序的步驟（至少各一個）
    """
    steps = [given_step(detection, fallback_url)]
    steps.extend(when_steps(text))
    steps.extend(then_steps(text if then_text is None else then_text))
    logger.debug(f"合成 {len(steps)} 個步驟")
    return steps


class StepSynthesizer:
    """
    步驟合成器，順便累積整次執行的詞彙。

    用法：
        synth = StepSynthesizer()
        steps = synth.synthesize(body, detect(body))
        ...
        render_step_definitions(synth.vocabulary)
    """

    def __init__(self, vocabulary: StepVocabulary | None = None):
        self.vocabulary = vocabulary if vocabulary is not None else StepVocabulary()
        self.emitted = 0

    def synthesize(
        self,
        text: str,
        detection: DetectionResult,
        fallback_url: str | None = None,
        then_text: str | None = None,
    ) -> list[SynthesizedStep]:
        steps = synthesize(text, detection, fallback_url, then_text)
        self.emitted += len(steps)
        self.vocabulary.update(steps)
        return steps
