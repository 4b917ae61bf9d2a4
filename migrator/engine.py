"""
Migration Engine (核心引擎)
串接偵測、改寫、步驟合成與設定產生，一次遷移整個專案。

使用方式：
    1. 程式化呼叫：
        engine = MigrationEngine(MigrationOptions(repo_path="./web-app"))
        engine.run_full()

    2. 讀取專案根目錄的 migrate.config.json：
        engine = MigrationEngine.from_repo("./web-app", bdd=True)
        engine.analyze()

    3. CLI：
        python -m migrator ./web-app --full
"""

import json
import re
from pathlib import Path, PurePosixPath

from config.config import Config
from core.exceptions import (
    FileReadError,
    FileWriteError,
    InvalidConfigError,
    MigratorError,
    RepositoryNotFoundError,
)
from migrator.analysis import AnalysisReporter
from migrator.config_builder import FEATURES_DIR, ConfigBuilder
from migrator.detector import detect, is_candidate
from migrator.feature_builder import (
    build_feature,
    ensure_test_cases,
    extract_test_cases,
    preamble,
    render_feature,
)
from migrator.interactive import confirm_migration
from migrator.rewriter import rewrite
from migrator.schema import AnalysisReport, MigrationOptions, MigrationReport, StepVocabulary
from migrator.step_renderer import render_step_definitions
from migrator.steps import StepSynthesizer
from utils.logger import logger

STEP_DEFINITIONS_FILE = "step_definitions/common.steps.ts"

_TEST_SUFFIX = re.compile(r"(?:\.(?:test|spec|cy))?\.js$")


def _check_patterns(key: str, patterns: list[str]) -> None:
    """glob 必須是相對於專案根目錄的非空 pattern"""
    for pattern in patterns:
        if not pattern.strip() or PurePosixPath(pattern).is_absolute():
            raise InvalidConfigError(key, pattern, "必須是相對於專案根目錄的 glob")


def _is_excluded(path: Path, excluded: set[Path]) -> bool:
    return path in excluded or any(parent in excluded for parent in path.parents)


def _navigation_url(text: str) -> str | None:
    detection = detect(text)
    return detection.navigation_url if "navigation" in detection.idiom_ids else None


def target_name(rel: str) -> str:
    """login.test.js → login.spec.ts"""
    return _TEST_SUFFIX.sub(".spec.ts", rel)


def feature_name(rel: str) -> str:
    """e2e/login.cy.js → e2e/login.feature"""
    stem = _TEST_SUFFIX.sub("", rel)
    if stem == rel:
        stem = str(PurePosixPath(rel).with_suffix(""))
    return f"{stem}.feature"


class MigrationEngine:
    """Browser JS → Playwright 遷移引擎"""

    def __init__(self, options: MigrationOptions):
        self.options = options
        self.root = Path(options.repo_path).resolve()
        if not self.root.is_dir():
            raise RepositoryNotFoundError(str(self.root))
        _check_patterns("include", options.include)
        _check_patterns("exclude", options.exclude)
        self.report = MigrationReport()
        self.vocabulary = StepVocabulary()
        self.analysis: AnalysisReport | None = None

    @classmethod
    def from_repo(cls, repo_path: str, **overrides) -> "MigrationEngine":
        """
        以 migrate.config.json 為底，再套用呼叫端（CLI）的參數。

        值為 None 的參數視為未指定。
        """
        root = Path(repo_path).resolve()
        if not root.is_dir():
            raise RepositoryNotFoundError(str(root))
        data = Config.defaults()
        data.update(Config.load_overrides(root))
        data.update({k: v for k, v in overrides.items() if v is not None})
        data["repo_path"] = str(root)
        return cls(MigrationOptions.from_dict(data))

    @property
    def output_dir(self) -> Path:
        return self.root / self.options.output

    # ── 檔案 I/O ──

    def _rel(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    def discover(self) -> list[Path]:
        """依 include / exclude 找出要處理的檔案（相對路徑排序）"""
        excluded: set[Path] = set()
        for pattern in self.options.exclude:
            excluded.update(self.root.glob(pattern))

        found: set[Path] = set()
        for pattern in self.options.include:
            for path in self.root.glob(pattern):
                if path.is_file() and not _is_excluded(path, excluded):
                    found.add(path)

        files = sorted(found, key=self._rel)
        logger.debug(f"找到 {len(files)} 個檔案")
        return files

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(self._rel(path), e) from e

    def _write(self, path: Path, content: str) -> None:
        """dry-run 時只記錄，不寫檔"""
        if self.options.dry_run:
            logger.info(f"[dry-run] {self._rel(path)}")
            return
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FileWriteError(self._rel(path), e) from e

    def _fail(self, rel: str, error: Exception) -> None:
        logger.error(f"{rel}: {error}")
        self.report.record_error(rel, str(error))

    # ── 分析 ──

    def analyze(self) -> AnalysisReport:
        """
        掃描所有檔案並彙整 idiom 統計。

        非 dry-run 時把結果寫到專案根目錄的 migration-analysis.json。
        """
        reporter = AnalysisReporter()
        for path in self.discover():
            rel = self._rel(path)
            try:
                text = self._read(path)
            except MigratorError as e:
                self._fail(rel, e)
                continue
            entry = reporter.add(rel, text, detect(text))
            if entry:
                logger.debug(f"{rel}: {', '.join(entry.patterns)} ({entry.complexity})")

        reporter.print_summary()
        report = reporter.report

        if not self.options.dry_run:
            target = self.root / Config.ANALYSIS_FILE
            try:
                self._write(target, json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
            except MigratorError as e:
                self._fail(Config.ANALYSIS_FILE, e)

        self.report.analyzed = report.candidates
        self.analysis = report
        return report

    # ── 直接改寫 ──

    def migrate(self) -> MigrationReport:
        """每個候選檔改寫成 <output>/<相對路徑>.spec.ts"""
        print(f"\n[migrate] 改寫到 {self.output_dir}")
        for path in self.discover():
            rel = self._rel(path)
            try:
                text = self._read(path)
                if not is_candidate(text):
                    self.report.skipped += 1
                    logger.debug(f"略過（沒有 Browser JS）: {rel}")
                    continue
                target = self.output_dir / target_name(rel)
                self._write(target, rewrite(text, path.name))
            except (OSError, UnicodeDecodeError, MigratorError) as e:
                self._fail(rel, e)
                continue

            self.report.migrated += 1
            self.report.files.append(self._rel(target))
            print(f"  ✓ {rel} → {self._rel(target)}")

        return self.report

    # ── BDD ──

    def feature_for(self, file_name: str, text: str, vocabulary: StepVocabulary) -> str:
        """
        單一檔案 → .feature 文字。

        Args:
            file_name: 檔名（Feature 標題用）
            text: 檔案內容
            vocabulary: 這個檔案合成的步驟會加進來
        """
        synthesizer = StepSynthesizer(vocabulary)
        file_url = _navigation_url(preamble(text))

        cases = ensure_test_cases(text, extract_test_cases(text))
        steps = []
        for case in cases:
            # 最近的 describe hook 優先，再來才是檔案開頭
            urls = [_navigation_url(setup) for setup in case.setups]
            fallback_url = next((url for url in urls if url), file_url)
            steps.append(
                synthesizer.synthesize(case.body, detect(case.body), fallback_url, then_text=text)
            )
        return render_feature(build_feature(file_name, cases, steps))

    def migrate_bdd(self) -> MigrationReport:
        """
        每個候選檔產生一個 .feature；全部處理完後輸出一份 step definitions。

        每個檔案的詞彙先獨立累積，成功後才併入整次執行的詞彙。
        """
        features = self.output_dir / FEATURES_DIR
        print(f"\n[bdd] 產生 Gherkin 到 {features}")

        for path in self.discover():
            rel = self._rel(path)
            file_vocabulary = StepVocabulary()
            try:
                text = self._read(path)
                if not is_candidate(text):
                    self.report.skipped += 1
                    logger.debug(f"略過（沒有 Browser JS）: {rel}")
                    continue
                target = features / feature_name(rel)
                self._write(target, self.feature_for(path.name, text, file_vocabulary))
            except (OSError, UnicodeDecodeError, MigratorError) as e:
                self._fail(rel, e)
                continue

            self.vocabulary = self.vocabulary.merge(file_vocabulary)
            self.report.migrated += 1
            self.report.files.append(self._rel(target))
            print(f"  ✓ {rel} → {self._rel(target)}")

        steps_path = features / STEP_DEFINITIONS_FILE
        try:
            self._write(steps_path, render_step_definitions(self.vocabulary))
            self.report.files.append(self._rel(steps_path))
            print(f"  ✓ {self._rel(steps_path)}  ({len(self.vocabulary)} 個步驟)")
        except MigratorError as e:
            self._fail(self._rel(steps_path), e)

        return self.report

    # ── 設定 ──

    def setup(self) -> list[str]:
        """產生 playwright.config.ts / package.json（BDD 模式含 support 檔）"""
        print("\n[setup] 設定 Playwright...")
        builder = ConfigBuilder(self.options, self.root)
        try:
            if self.options.dry_run:
                created = [str(rel) for rel in builder.render_all()]
                for rel in created:
                    logger.info(f"[dry-run] {rel}")
            else:
                created = [self._rel(p) for p in builder.build_all()]
        except (OSError, MigratorError) as e:
            self._fail("package.json", e)
            return []

        for rel in created:
            print(f"  ✓ {rel}")
        return created

    # ── 完整流程 ──

    def run_full(self, confirm=None) -> MigrationReport:
        """
        analyze → 確認 → setup → migrate（或 migrate_bdd）。

        Args:
            confirm: 確認函式 (candidate 數量) -> bool；預設在 terminal 詢問。
                     dry-run 或 yes 時不詢問。

        Returns:
            MigrationReport
        """
        mode = "BDD (Gherkin + Cucumber)" if self.options.bdd else "Playwright Test"
        print(f"\n{'='*60}")
        print(f"  Browser JS → Playwright")
        print(f"  專案:   {self.root}")
        print(f"  輸出:   {self.output_dir}")
        print(f"  模式:   {mode}")
        if self.options.dry_run:
            print(f"  (dry-run：不寫入任何檔案)")
        print(f"{'='*60}")

        analysis = self.analyze()
        if analysis.candidates == 0:
            return self.report

        if not self.options.dry_run and not self.options.yes:
            confirm = confirm or confirm_migration
            if not confirm(analysis.candidates):
                print("已取消。")
                return self.report

        self.setup()
        if self.options.bdd:
            self.migrate_bdd()
        else:
            self.migrate()

        self.print_report()
        return self.report

    def print_report(self) -> None:
        report = self.report
        print(f"\n{'='*60}")
        print(f"  完成！")
        print(f"  遷移:   {report.migrated}")
        print(f"  略過:   {report.skipped}")
        print(f"  錯誤:   {len(report.errors)}")
        for error in report.errors:
            print(f"    ✗ {error.path}: {error.message}")
        print(f"")
        print(f"  下一步:")
        print(f"    npm install && npx playwright install")
        print(f"    {'npm run test:bdd' if self.options.bdd else 'npm test'}")
        print(f"{'='*60}\n")
