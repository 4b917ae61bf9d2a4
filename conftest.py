"""
pytest 全域設定

提供：
- 自訂 marker 註冊
- sample_repo fixture：建立一個含 Browser JS 測試的假專案
"""

import textwrap

import pytest


def pytest_configure(config):
    """註冊自訂 marker"""
    config.addinivalue_line("markers", "unit: 單元測試（不碰網路、不需要 Node）")


LOGIN_TEST = textwrap.dedent("""\
    const assert = require('assert');

    describe('Login', () => {
      beforeEach(() => {
        window.location.href = '/login';
      });

      it('logs in with valid credentials', () => {
        document.getElementById('email').value = 'a@b.com';
        document.getElementById('login-btn').click();
        assert.ok(document.querySelector('.welcome').innerText.includes('Welcome'));
      });
    });
""")

CART_TEST = textwrap.dedent("""\
    describe('Cart', function () {
      it('adds an item', function () {
        $('.add-to-cart').click();
        document.querySelector('.login-btn').click();
      });
    });
""")

PLAIN_JS = "const x = 1 + 1;\n"


@pytest.fixture
def sample_repo(tmp_path):
    """建立一個模擬的前端專案結構"""
    repo = tmp_path / "web-app"
    (repo / "test").mkdir(parents=True)
    (repo / "test" / "login.test.js").write_text(LOGIN_TEST, encoding="utf-8")
    (repo / "test" / "cart.spec.js").write_text(CART_TEST, encoding="utf-8")
    (repo / "test" / "math.test.js").write_text(PLAIN_JS, encoding="utf-8")

    # exclude 的目錄
    vendored = repo / "node_modules" / "lib" / "test"
    vendored.mkdir(parents=True)
    (vendored / "vendored.test.js").write_text(CART_TEST, encoding="utf-8")

    # 不在 include 範圍
    (repo / "src").mkdir()
    (repo / "src" / "app.js").write_text("document.getElementById('x').click();\n", encoding="utf-8")
    return repo
