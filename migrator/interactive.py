"""
互動式問答 CLI
透過 terminal 問答決定遷移模式，以及寫檔前的確認。
"""

from config.config import Config


def _ask(prompt: str, default: str = "") -> str:
    hint = f" [{default}]" if default else ""
    answer = input(f"  {prompt}{hint}: ").strip()
    return answer or default


def _ask_yn(prompt: str, default: bool = True) -> bool:
    yn = "Y/n" if default else "y/N"
    answer = input(f"  {prompt} ({yn}): ").strip().lower()
    if not answer:
        return default
    return answer.startswith("y")


def collect_options(output: str | None = None) -> dict:
    """
    互動式問答收集遷移選項。

    Args:
        output: 預設輸出目錄（CLI 已指定時作為預設值）

    Returns:
        {"full": bool, "bdd": bool, "output": str}
    """
    print("\n" + "=" * 60)
    print("  Browser JS → Playwright 互動模式")
    print("=" * 60)

    full = _ask_yn("完整遷移 (否則只分析)", True)
    bdd = _ask_yn("產生 BDD (Gherkin + Cucumber)", False) if full else False
    output = _ask("輸出目錄", output or Config.OUTPUT_DIR)

    return {"full": full, "bdd": bdd, "output": output}


def confirm_migration(count: int) -> bool:
    """寫檔前確認"""
    return _ask_yn(f"遷移 {count} 個檔案", True)
