"""
CLI 入口

用法:
    # 只分析（預設）
    python -m migrator ./web-app

    # 完整遷移成 Playwright Test
    python -m migrator ./web-app --full

    # 完整遷移成 Gherkin + Cucumber step definitions
    python -m migrator ./web-app --full --bdd

    # 預覽，不寫任何檔案
    python -m migrator ./web-app --full --dry-run
"""

import argparse
import logging
import sys
from pathlib import Path

from config.config import ConfigValidationError
from core.exceptions import MigratorError
from migrator import __version__
from migrator.engine import MigrationEngine
from migrator.interactive import collect_options
from utils.logger import logger, set_console_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="browserjs-to-playwright",
        description="Convert Browser JS tests to Playwright",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
範例:
  python -m migrator ./web-app                 # 只分析
  python -m migrator ./web-app --full          # 完整遷移
  python -m migrator ./web-app --full --bdd    # 產生 Gherkin
""",
    )
    parser.add_argument("path", nargs="?", default=".", help="專案路徑 (預設目前目錄)")
    parser.add_argument("-a", "--analyze", action="store_true", help="只分析")
    parser.add_argument("--full", action="store_true", help="完整遷移")
    parser.add_argument("--bdd", action="store_true", default=None,
                        help="產生 Gherkin feature + step definitions")
    parser.add_argument("-o", "--output", help="輸出目錄 (預設 tests)")
    parser.add_argument("--dry-run", action="store_true", help="預覽，不寫入檔案")
    parser.add_argument("--verbose", action="store_true", help="顯示 debug 訊息")
    parser.add_argument("-y", "--yes", action="store_true", help="略過確認")
    parser.add_argument("-i", "--interactive", action="store_true", help="互動模式")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_console_level(logging.DEBUG)

    print("\n" + "=" * 60)
    print("  Browser JS → Playwright Migration")
    print("=" * 60)

    root = Path(args.path).resolve()
    if not root.exists():
        print(f"Not found: {root}", file=sys.stderr)
        return 1
    print(f"Path: {root}")

    full = args.full
    if args.interactive:
        answers = collect_options(args.output)
        full = answers["full"]
        args.bdd = answers["bdd"]
        args.output = answers["output"]

    try:
        engine = MigrationEngine.from_repo(
            str(root),
            output=args.output,
            bdd=args.bdd,
            dry_run=args.dry_run,
            verbose=args.verbose,
            yes=args.yes,
        )
    except (MigratorError, ConfigValidationError) as e:
        logger.error(str(e))
        print(str(e), file=sys.stderr)
        return 1

    if full:
        engine.run_full()
    elif args.analyze:
        engine.analyze()
    else:
        engine.analyze()
        print("Use --full to migrate")

    return 0


if __name__ == "__main__":
    sys.exit(main())
