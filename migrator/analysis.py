"""
Analysis Reporter
彙整每個檔案的偵測結果：使用到的 idiom、複雜度、以及整批的統計。
"""

from __future__ import annotations

from config.config import Config
from migrator.schema import AnalysisReport, DetectionResult, FileAnalysis
from migrator.patterns import idiom_ids

# 複雜度加權
_WEIGHTS = {
    "timers": 2,
    "events": 2,
    "shadow-dom": 3,
}
_LARGE_FILE_SCORE = 2


def complexity_score(text: str, patterns) -> int:
    score = _LARGE_FILE_SCORE if len(text.split("\n")) > Config.LARGE_FILE_LINES else 0
    for idiom, weight in _WEIGHTS.items():
        if idiom in patterns:
            score += weight
    return score


def complexity_label(score: int) -> str:
    if score >= 4:
        return "high"
    if score >= 2:
        return "medium"
    return "low"


def assess_complexity(text: str, patterns) -> str:
    """low / medium / high"""
    return complexity_label(complexity_score(text, patterns))


def ordered_patterns(detection: DetectionResult) -> list[str]:
    """依目錄宣告順序排列命中的 idiom，報告輸出穩定"""
    return [i for i in idiom_ids() if i in detection.idiom_ids]


class AnalysisReporter:
    """
    逐檔累積分析結果。

    用法：
        reporter = AnalysisReporter()
        for path, text in files:
            reporter.add(path, text, detect(text))
        report = reporter.report
    """

    def __init__(self):
        self.report = AnalysisReport()

    def add(self, path: str, text: str, detection: DetectionResult) -> FileAnalysis | None:
        """
        記錄一個檔案；非候選檔只計入 total。

        Returns:
            候選檔的 FileAnalysis，非候選檔回傳 None
        """
        self.report.total += 1
        if not detection.is_candidate:
            return None

        patterns = ordered_patterns(detection)
        score = complexity_score(text, patterns)
        entry = FileAnalysis(
            path=path,
            patterns=patterns,
            complexity=complexity_label(score),
            score=score,
        )
        self.report.files.append(entry)
        self.report.candidates += 1
        for idiom in patterns:
            self.report.pattern_counts[idiom] = self.report.pattern_counts.get(idiom, 0) + 1
        return entry

    def top_patterns(self) -> list[tuple[str, int]]:
        """依出現次數遞減（同次數依名稱）"""
        return sorted(self.report.pattern_counts.items(), key=lambda kv: (-kv[1], kv[0]))

    def print_summary(self) -> None:
        report = self.report
        print(f"\n{'='*60}")
        print(f"  分析結果")
        print(f"  掃描檔案:     {report.total}")
        print(f"  Browser JS:   {report.candidates}")
        print(f"  略過:         {report.skipped}")
        if not report.candidates:
            print(f"\n  No Browser JS patterns found.")
            print(f"{'='*60}\n")
            return

        print(f"\n  Patterns:")
        for idiom, count in self.top_patterns():
            print(f"    {idiom:<20} {count}")

        levels = {"low": 0, "medium": 0, "high": 0}
        for entry in report.files:
            levels[entry.complexity] += 1
        print(f"\n  複雜度: low {levels['low']} / medium {levels['medium']} / high {levels['high']}")
        print(f"{'='*60}\n")
