"""
Config Builder
遷移完成後，替目標專案產生 Playwright 的設定：
- playwright.config.ts
- package.json（合併既有內容，沒有就建立新的）
- BDD 模式另外產生 cucumber.js 與 features/support/world.ts、hooks.ts
"""

import json
from pathlib import Path

from config.config import Config
from core.exceptions import ConfigFileError
from migrator.schema import MigrationOptions
from utils.logger import logger

FEATURES_DIR = "features"


class ConfigBuilder:
    """產生設定檔到目標專案根目錄"""

    def __init__(self, options: MigrationOptions, root: Path | None = None):
        self.options = options
        self.root = Path(root or options.repo_path).resolve()
        self.base_url = options.base_url or Config.BASE_URL

    @property
    def features_dir(self) -> str:
        """BDD 產出目錄（相對於專案根目錄）"""
        return f"{self.options.output.strip('/')}/{FEATURES_DIR}"

    def render_all(self) -> dict[str, str]:
        """所有設定檔內容，key 為相對於專案根目錄的路徑"""
        files = {
            "playwright.config.ts": self._render_playwright_config(),
            "package.json": self._render_package_json(),
        }
        if self.options.bdd:
            files["cucumber.js"] = self._render_cucumber_profile()
            files[f"{self.features_dir}/support/world.ts"] = WORLD_TS
            files[f"{self.features_dir}/support/hooks.ts"] = HOOKS_TS
        return files

    def build_all(self) -> list[Path]:
        """寫入所有設定檔，回傳已建立的檔案路徑"""
        created = []
        for rel, content in self.render_all().items():
            path = self.root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            logger.debug(f"寫入設定檔: {rel}")
            created.append(path)
        return created

    def _render_playwright_config(self) -> str:
        return f"""\
import {{ defineConfig, devices }} from '@playwright/test';

export default defineConfig({{
  testDir: './{self.options.output.strip('/')}',
  fullyParallel: true,
  retries: process.env.CI ? 2 : 0,
  reporter: [['html', {{ open: 'never' }}], ['list']],
  use: {{
    baseURL: process.env.BASE_URL || '{self.base_url}',
    trace: 'on-first-retry',
    screenshot: 'only-on-failure',
  }},
  projects: [
    {{ name: 'chromium', use: {{ ...devices['Desktop Chrome'] }} }},
  ],
}});
"""

    def load_package_json(self) -> dict:
        """
        讀取既有的 package.json。

        Returns:
            內容 dict；檔案不存在時回傳空 dict

        Raises:
            ConfigFileError: 檔案存在但不是 JSON object
        """
        path = self.root / "package.json"
        if not path.exists():
            logger.info("找不到 package.json，將建立新的")
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigFileError(str(path), str(e)) from e
        if not isinstance(data, dict):
            raise ConfigFileError(str(path), "最外層必須是 JSON object")
        return data

    def merge_package_json(self, pkg: dict) -> dict:
        """加入 Playwright（BDD 模式再加 Cucumber）的依賴與 scripts，保留其他欄位"""
        merged = dict(pkg)
        dev = dict(merged.get("devDependencies") or {})
        scripts = dict(merged.get("scripts") or {})

        dev["@playwright/test"] = Config.PLAYWRIGHT_VERSION
        scripts["test"] = "playwright test"
        scripts["test:ui"] = "playwright test --ui"

        if self.options.bdd:
            dev["@cucumber/cucumber"] = Config.CUCUMBER_VERSION
            dev["ts-node"] = Config.TS_NODE_VERSION
            scripts["test:bdd"] = "cucumber-js"

        merged["devDependencies"] = dev
        merged["scripts"] = scripts
        return merged

    def _render_package_json(self) -> str:
        pkg = self.merge_package_json(self.load_package_json())
        return json.dumps(pkg, indent=2, ensure_ascii=False) + "\n"

    def _render_cucumber_profile(self) -> str:
        features = self.features_dir
        return f"""\
module.exports = {{
  default: {{
    paths: ['{features}/**/*.feature'],
    require: ['{features}/step_definitions/**/*.ts', '{features}/support/**/*.ts'],
    requireModule: ['ts-node/register'],
    format: ['progress', 'html:reports/cucumber-report.html'],
  }},
}};
"""


WORLD_TS = """\
import { setWorldConstructor, World, IWorldOptions } from '@cucumber/cucumber';
import { Browser, BrowserContext, Page } from '@playwright/test';

export interface ICustomWorld extends World {
  browser?: Browser;
  context?: BrowserContext;
  page?: Page;
}

export class CustomWorld extends World implements ICustomWorld {
  browser?: Browser;
  context?: BrowserContext;
  page?: Page;

  constructor(options: IWorldOptions) {
    super(options);
  }
}

setWorldConstructor(CustomWorld);
"""

HOOKS_TS = """\
import { Before, After, BeforeAll, AfterAll, Status, setDefaultTimeout } from '@cucumber/cucumber';
import { chromium, Browser } from '@playwright/test';
import { ICustomWorld } from './world';

let browser: Browser;

setDefaultTimeout(30 * 1000);

BeforeAll(async function () {
  browser = await chromium.launch({ headless: !process.env.HEADED });
});

Before(async function (this: ICustomWorld) {
  this.browser = browser;
  this.context = await browser.newContext({
    baseURL: process.env.BASE_URL || 'http://localhost:3000',
  });
  this.page = await this.context.newPage();
});

After(async function (this: ICustomWorld, { result }) {
  if (result?.status === Status.FAILED && this.page) {
    const screenshot = await this.page.screenshot({ fullPage: true });
    this.attach(screenshot, 'image/png');
  }
  await this.page?.close();
  await this.context?.close();
});

AfterAll(async function () {
  await browser?.close();
});
"""
