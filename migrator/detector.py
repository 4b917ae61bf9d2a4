"""
Idiom Detector
掃描檔案內容，比對 Pattern Catalog，回傳命中的 idiom 與擷取到的參數。

偵測是「包含式」的：同一段文字可同時命中多條規則，全部記錄。
有 kind 的規則（選取 / 操作 / 導航）會列出所有不重疊的命中，
同一類內依「出現位置 → 規則宣告順序」排列。
"""

from __future__ import annotations

from migrator.patterns import all_rules
from migrator.schema import DetectionResult, ExtractedAction, ExtractKind, PatternRule

# 擷取結果的輸出順序
EXTRACT_ORDER = (ExtractKind.SELECT, ExtractKind.ACTION, ExtractKind.NAVIGATION)


def _to_action(rule: PatternRule, match) -> ExtractedAction:
    groups = match.groupdict()
    selector = groups.get("selector")
    return ExtractedAction(
        kind=rule.kind,
        selector=rule.selector_format.format(selector) if selector else None,
        method_name=rule.method or groups.get("method"),
        value=groups.get("value"),
        position=match.start(),
    )


def detect(text: str) -> DetectionResult:
    """
    偵測單一檔案內容。

    Args:
        text: 檔案原始內容

    Returns:
        DetectionResult（純函式，相同輸入必得相同結果）
    """
    idioms: set[str] = set()
    found: dict[ExtractKind, list[tuple[int, int, ExtractedAction]]] = {
        kind: [] for kind in EXTRACT_ORDER
    }

    for order, rule in enumerate(all_rules()):
        if rule.idiom_id is None or not rule.pattern.search(text):
            continue
        idioms.add(rule.idiom_id)
        if rule.kind is None:
            continue
        for match in rule.pattern.finditer(text):
            found[rule.kind].append((match.start(), order, _to_action(rule, match)))

    extracted: list[ExtractedAction] = []
    for kind in EXTRACT_ORDER:
        extracted.extend(action for _, _, action in sorted(found[kind], key=lambda f: f[:2]))

    return DetectionResult(idiom_ids=frozenset(idioms), extracted_actions=tuple(extracted))


def is_candidate(text: str) -> bool:
    """是否為遷移候選（至少命中一個 idiom）"""
    return detect(text).is_candidate
