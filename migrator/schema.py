"""
資料結構定義
偵測結果、測試案例、Gherkin 步驟與報告的統一格式。
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from config.config import Config


class Category(Enum):
    """改寫規則分類（順序即改寫 pipeline 的順序）"""
    SELECTORS = "selectors"
    PROPERTIES = "properties"      # 含 mutations（.value = 'x'）
    ACTIONS = "actions"
    NAVIGATION = "navigation"
    WAITS = "waits"
    STORAGE = "storage"
    DIALOGS = "dialogs"
    ASSERTIONS = "assertions"


class ExtractKind(Enum):
    SELECT = "select"
    ACTION = "action"
    NAVIGATION = "navigation"


class Phase(Enum):
    GIVEN = "Given"
    WHEN = "When"
    THEN = "Then"


PHASE_ORDER = {Phase.GIVEN: 0, Phase.WHEN: 1, Phase.THEN: 2}


@dataclass(frozen=True)
class PatternRule:
    """單一規則：pattern + 替換模板（template 為 None 表示只偵測不改寫）"""
    category: Category
    idiom_id: str
    pattern: re.Pattern
    template: str | None = None
    kind: ExtractKind | None = None      # 需要擷取參數時指定
    selector_format: str = "{}"          # 擷取的 selector 轉成 locator 字串，如 "#{}"
    method: str | None = None            # 擷取時記錄的方法名稱

    @property
    def is_detector(self) -> bool:
        return self.template is None


@dataclass(frozen=True)
class ExtractedAction:
    """從原始碼擷取出的一次選取 / 操作 / 導航"""
    kind: ExtractKind
    selector: str | None = None
    method_name: str | None = None
    value: str | None = None
    position: int = 0


@dataclass(frozen=True)
class DetectionResult:
    """單一檔案的偵測結果（建立後不可變）"""
    idiom_ids: frozenset[str] = frozenset()
    extracted_actions: tuple[ExtractedAction, ...] = ()

    @property
    def is_candidate(self) -> bool:
        """有任何 idiom 命中才是遷移候選"""
        return bool(self.idiom_ids)

    def actions_of(self, kind: ExtractKind) -> list[ExtractedAction]:
        return [a for a in self.extracted_actions if a.kind == kind]

    @property
    def navigation_url(self) -> str | None:
        """第一個有 URL 參數的導航"""
        for action in self.actions_of(ExtractKind.NAVIGATION):
            if action.value:
                return action.value
        return None


@dataclass(frozen=True)
class TestCase:
    """從 describe / it 標記切出的測試案例"""
    describe_label: str
    name: str
    body: str = ""
    setups: tuple[str, ...] = ()     # 外層 describe 的 hook 區段，由內而外

    __test__ = False   # 避免被 pytest 當成測試類別收集


@dataclass(frozen=True)
class SynthesizedStep:
    """Gherkin 步驟，phrase 已代入字面參數"""
    phase: Phase
    phrase: str

    def __str__(self) -> str:
        return f"{self.phase.value} {self.phrase}"


class StepVocabulary:
    """
    整次執行累積的步驟詞彙（只增不減的集合）。

    以 phrase 文字去重；每個檔案的合成結果透過 update() / merge()
    併入，順序不影響最終內容。
    """

    def __init__(self, steps=None):
        self._steps: dict[str, SynthesizedStep] = {}
        if steps:
            self.update(steps)

    def add(self, step: SynthesizedStep) -> bool:
        """加入一個步驟，回傳是否為新詞彙"""
        key = str(step)
        if key in self._steps:
            return False
        self._steps[key] = step
        return True

    def update(self, steps) -> int:
        """加入多個步驟，回傳新增數量"""
        return sum(1 for s in steps if self.add(s))

    def merge(self, other: "StepVocabulary") -> "StepVocabulary":
        merged = StepVocabulary(self._steps.values())
        merged.update(other._steps.values())
        return merged

    def freeze(self) -> tuple[SynthesizedStep, ...]:
        """凍結：依 phase → 字母順序排列"""
        return tuple(sorted(
            self._steps.values(),
            key=lambda s: (PHASE_ORDER[s.phase], s.phrase),
        ))

    def __len__(self) -> int:
        return len(self._steps)

    def __contains__(self, item) -> bool:
        return str(item) in self._steps

    def __iter__(self):
        return iter(self.freeze())


@dataclass
class Scenario:
    name: str
    tags: set[str] = field(default_factory=set)
    steps: list[SynthesizedStep] = field(default_factory=list)

    def steps_in(self, phase: Phase) -> list[SynthesizedStep]:
        return [s for s in self.steps if s.phase == phase]


@dataclass
class Feature:
    title: str
    tags: set[str] = field(default_factory=set)
    scenarios: list[Scenario] = field(default_factory=list)


# ── 報告 ──

@dataclass
class FileAnalysis:
    """單一檔案的分析紀錄"""
    path: str
    patterns: list[str]
    complexity: str        # low / medium / high
    score: int = 0


@dataclass
class AnalysisReport:
    """整批檔案的分析彙整"""
    files: list[FileAnalysis] = field(default_factory=list)
    total: int = 0
    candidates: int = 0
    pattern_counts: dict[str, int] = field(default_factory=dict)

    @property
    def skipped(self) -> int:
        return self.total - self.candidates

    def to_dict(self) -> dict:
        """轉為 dict（寫 migration-analysis.json 用）"""
        return {
            "files": [
                {
                    "path": f.path,
                    "patterns": list(f.patterns),
                    "complexity": f.complexity,
                    "score": f.score,
                }
                for f in self.files
            ],
            "summary": {
                "total": self.total,
                "browserJS": self.candidates,
                "skipped": self.skipped,
                "patterns": dict(self.pattern_counts),
            },
        }


@dataclass(frozen=True)
class FileError:
    path: str
    message: str


@dataclass
class MigrationReport:
    analyzed: int = 0
    migrated: int = 0
    skipped: int = 0
    errors: list[FileError] = field(default_factory=list)
    files: list[str] = field(default_factory=list)

    def record_error(self, path: str, message: str) -> None:
        """同一檔案的同一錯誤只記一次（analyze 與 migrate 會各讀一次檔）"""
        error = FileError(path=path, message=message)
        if error not in self.errors:
            self.errors.append(error)


@dataclass
class MigrationOptions:
    """一次遷移執行的選項（預設值來自 Config）"""
    repo_path: str
    output: str = field(default_factory=lambda: Config.OUTPUT_DIR)
    include: list[str] = field(default_factory=lambda: list(Config.INCLUDE))
    exclude: list[str] = field(default_factory=lambda: list(Config.EXCLUDE))
    dry_run: bool = False
    verbose: bool = False
    yes: bool = False
    bdd: bool = False
    base_url: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "MigrationOptions":
        """從 dict 建立（CLI 參數 / 設定檔合併後使用）"""
        return cls(
            repo_path=data.get("repo_path", "."),
            output=data.get("output") or Config.OUTPUT_DIR,
            include=list(data.get("include") or Config.INCLUDE),
            exclude=list(data.get("exclude") or Config.EXCLUDE),
            dry_run=bool(data.get("dry_run", False)),
            verbose=bool(data.get("verbose", False)),
            yes=bool(data.get("yes", False)),
            bdd=bool(data.get("bdd", False)),
            base_url=data.get("baseUrl") or data.get("base_url") or "",
        )
