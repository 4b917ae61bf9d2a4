"""
migrator/feature_builder.py 單元測試
"""

import textwrap

import pytest

from core.exceptions import TransformError
from migrator.feature_builder import (
    MAIN_TEST_NAME,
    build_feature,
    ensure_test_cases,
    extract_test_cases,
    feature_title,
    preamble,
    render_feature,
    tag_for,
)
from migrator.schema import Phase, SynthesizedStep, TestCase

NESTED = textwrap.dedent("""\
    describe('Account', () => {
      const style = "{ not a block";
      describe('Profile', () => {
        it('shows the name', () => {
          // a { brace in a comment
          expect(name).toBe('Ada');
        });
      });
      it('logs out', () => {
        document.getElementById('logout').click();
      });
    });
    describe('Billing', () => {
      test("pays", () => {});
    });
""")


def _steps(*items):
    return [SynthesizedStep(phase, phrase) for phase, phrase in items]


COMPLETE = _steps(
    (Phase.GIVEN, "I am on the application page"),
    (Phase.WHEN, 'I click on "#go"'),
    (Phase.THEN, "I should see the expected result"),
)


@pytest.mark.unit
class TestExtractTestCases:

    @pytest.mark.unit
    def test_source_order_and_labels(self):
        cases = extract_test_cases(NESTED)
        assert [(c.describe_label, c.name) for c in cases] == [
            ("Account > Profile", "shows the name"),
            ("Account", "logs out"),
            ("Billing", "pays"),
        ]

    @pytest.mark.unit
    def test_body_is_own_slice(self):
        cases = extract_test_cases(NESTED)
        assert "expect(name)" in cases[0].body
        assert "logout" not in cases[0].body
        assert "getElementById('logout')" in cases[1].body

    @pytest.mark.unit
    def test_no_markers(self):
        assert extract_test_cases("const x = 1;") == []

    @pytest.mark.unit
    def test_ensure_main_test(self):
        cases = ensure_test_cases("const x = 1;", [])
        assert cases == [TestCase(describe_label="", name=MAIN_TEST_NAME, body="const x = 1;")]

    @pytest.mark.unit
    def test_preamble(self):
        text = "describe('A', () => {\n  beforeEach(() => { go(); });\n  it('x', () => {});\n});"
        assert preamble(text) == "describe('A', () => {\n  beforeEach(() => { go(); });\n  "


@pytest.mark.unit
class TestBuildFeature:

    @pytest.mark.unit
    def test_title(self):
        assert feature_title("user_profile.test.js") == "User Profile Test"
        assert feature_title("e2e/checkout-flow.cy.js") == "Checkout Flow Cy"

    @pytest.mark.unit
    def test_tag(self):
        assert tag_for("Shopping Cart") == "@shopping-cart"
        assert tag_for("") == ""

    @pytest.mark.unit
    def test_scenarios_in_order_with_tags(self):
        cases = extract_test_cases(NESTED)
        feature = build_feature("account.test.js", cases, [COMPLETE] * len(cases))
        assert [s.name for s in feature.scenarios] == ["shows the name", "logs out", "pays"]
        assert feature.scenarios[0].tags == {"@profile"}
        assert feature.scenarios[1].tags == {"@account"}
        assert feature.tags == {"@migrated"}

    @pytest.mark.unit
    def test_zero_test_cases_yields_main_test(self):
        feature = build_feature("flow.js", [], [COMPLETE])
        assert [s.name for s in feature.scenarios] == [MAIN_TEST_NAME]
        assert feature.scenarios[0].tags == set()

    @pytest.mark.unit
    def test_mismatched_lengths(self):
        with pytest.raises(TransformError):
            build_feature("a.js", [TestCase("", "x")], [])

    @pytest.mark.unit
    def test_incomplete_scenario_rejected(self):
        no_then = COMPLETE[:2]
        with pytest.raises(TransformError):
            build_feature("a.js", [TestCase("", "x")], [no_then])

    @pytest.mark.unit
    def test_two_givens_rejected(self):
        steps = [COMPLETE[0], *COMPLETE]
        with pytest.raises(TransformError):
            build_feature("a.js", [TestCase("", "x")], [steps])


@pytest.mark.unit
class TestRenderFeature:

    @pytest.mark.unit
    def test_render(self):
        feature = build_feature("login.test.js", [TestCase("Login", "valid user")], [COMPLETE])
        assert render_feature(feature) == textwrap.dedent("""\
            @migrated
            Feature: Login Test

              @login
              Scenario: valid user
                Given I am on the application page
                When I click on "#go"
                Then I should see the expected result
        """)

    @pytest.mark.unit
    def test_render_with_and(self):
        steps = _steps(
            (Phase.GIVEN, "I am on the application page"),
            (Phase.WHEN, 'I click on "#a"'),
            (Phase.WHEN, 'I click on "#b"'),
            (Phase.THEN, "the assertion should pass"),
        )
        feature = build_feature("a.js", [TestCase("", "x")], [steps])
        lines = render_feature(feature, use_and=True).splitlines()
        assert lines[-3:] == [
            '    When I click on "#a"',
            '    And I click on "#b"',
            "    Then the assertion should pass",
        ]


TWO_SUITES = textwrap.dedent("""\
    describe('Login', () => {
      beforeEach(() => {
        window.location.href = '/login';
      });
      it('signs in', () => {
        document.getElementById('go').click();
      });
    });
    describe('Cart', () => {
      beforeEach(() => {
        window.location.href = '/cart';
      });
      it('adds', () => {
        $('.add').click();
      });
    });
""")


@pytest.mark.unit
class TestDescribeSetups:
    """describe 內、第一個測試之前的 hook 區段"""

    @pytest.mark.unit
    def test_each_case_keeps_its_own_describe_setup(self):
        cases = extract_test_cases(TWO_SUITES)
        assert [len(c.setups) for c in cases] == [1, 1]
        assert "'/login'" in cases[0].setups[0]
        assert "'/cart'" in cases[1].setups[0]
        assert "'/login'" not in cases[1].setups[0]

    @pytest.mark.unit
    def test_nested_setups_innermost_first(self):
        cases = extract_test_cases(NESTED)
        assert cases[0].setups[0].startswith("describe('Profile'")
        assert cases[0].setups[1].startswith("describe('Account'")
        assert cases[1].setups == (cases[0].setups[1],)

    @pytest.mark.unit
    def test_top_level_test_has_no_setups(self):
        assert extract_test_cases("it('x', () => {});")[0].setups == ()


@pytest.mark.unit
class TestCommentedOutMarkers:

    @pytest.mark.unit
    def test_line_comments_ignored(self):
        text = textwrap.dedent("""\
            describe('A', () => {
              // it('old disabled test', () => {});
              // describe('Old suite', () => {});
              it('real', () => {});
            });
        """)
        cases = extract_test_cases(text)
        assert [(c.describe_label, c.name) for c in cases] == [("A", "real")]

    @pytest.mark.unit
    def test_block_comment_ignored(self):
        text = "/*\nit('gone', () => {});\n*/\ntest('kept', () => {});"
        assert [c.name for c in extract_test_cases(text)] == ["kept"]

    @pytest.mark.unit
    def test_url_in_string_is_not_a_comment(self):
        text = "const base = 'http://x.test';\nit('after url', () => {});"
        assert [c.name for c in extract_test_cases(text)] == ["after url"]

    @pytest.mark.unit
    def test_preamble_skips_commented_test(self):
        text = "// it('old', () => {});\nbeforeEach(() => {});\nit('new', () => {});"
        assert preamble(text) == "// it('old', () => {});\nbeforeEach(() => {});\n"
