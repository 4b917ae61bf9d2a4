"""
Browser JS → Playwright 遷移工具 (Migrator)

把用原生 DOM API、jQuery、Puppeteer、Cypress、Selenium 寫的
瀏覽器測試，轉成 Playwright Test 或 Gherkin + Cucumber。

用法:
    python -m migrator ./web-app --full

兩種輸出模式：
    1. 直接改寫：每個檔案 → <output>/<原路徑>.spec.ts
    2. BDD (--bdd)：
        <output>/features/
        ├── <原路徑>.feature
        ├── step_definitions/common.steps.ts
        └── support/
            ├── world.ts
            └── hooks.ts

另外在專案根目錄產生 playwright.config.ts，並合併 package.json。
"""

__version__ = "1.0.0"
