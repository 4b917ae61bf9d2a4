"""
migrator/steps.py 單元測試

驗證 Given / When / Then 的合成規則與 fallback。
"""

import pytest

from migrator.detector import detect
from migrator.schema import Phase, StepVocabulary
from migrator.steps import StepSynthesizer, given_step, synthesize, then_steps, when_steps

LOGIN_SNIPPET = (
    "document.getElementById('email').value = 'a@b.com'; "
    "document.getElementById('login-btn').click();"
)


def _strs(steps):
    return [str(s) for s in steps]


@pytest.mark.unit
class TestSynthesize:

    @pytest.mark.unit
    def test_login_snippet(self):
        steps = synthesize(LOGIN_SNIPPET, detect(LOGIN_SNIPPET))
        assert _strs(steps) == [
            "Given I am on the application page",
            'When I enter "a@b.com" in the "#email" field',
            'When I click on "#login-btn"',
            "Then I should see the expected result",
        ]

    @pytest.mark.unit
    def test_exactly_one_given_and_at_least_one_then(self):
        text = "$('#a').val('x'); window.location.href = '/a'; window.location.href = '/b';"
        steps = synthesize(text, detect(text))
        assert len([s for s in steps if s.phase == Phase.GIVEN]) == 1
        assert [s for s in steps if s.phase == Phase.THEN]

    @pytest.mark.unit
    def test_phase_order(self):
        steps = synthesize(LOGIN_SNIPPET, detect(LOGIN_SNIPPET))
        order = {Phase.GIVEN: 0, Phase.WHEN: 1, Phase.THEN: 2}
        assert [order[s.phase] for s in steps] == sorted(order[s.phase] for s in steps)

    @pytest.mark.unit
    def test_then_text_overrides_assertion_source(self):
        body = "document.getElementById('go').click();"
        whole = body + "\nexpect(title).toBe('Home');"
        steps = synthesize(body, detect(body), then_text=whole)
        assert str(steps[-1]) == "Then the assertion should pass"


@pytest.mark.unit
class TestGiven:

    @pytest.mark.unit
    def test_navigation_with_url(self):
        text = "window.location.href = '/checkout';"
        assert str(given_step(detect(text))) == 'Given I navigate to "/checkout"'

    @pytest.mark.unit
    def test_navigation_without_url_uses_default(self):
        text = "window.location.reload();"
        assert str(given_step(detect(text))) == "Given I am on the application page"

    @pytest.mark.unit
    def test_fallback_url(self):
        text = "document.getElementById('go').click();"
        assert str(given_step(detect(text), "/login")) == 'Given I navigate to "/login"'

    @pytest.mark.unit
    def test_own_url_wins_over_fallback(self):
        text = "cy.visit('/cart');"
        assert given_step(detect(text), "/login").phrase == 'I navigate to "/cart"'


@pytest.mark.unit
class TestWhen:

    @pytest.mark.unit
    def test_priority_order_fill_before_click(self):
        """click 寫在前面，仍然先輸出 fill"""
        text = "$('.go').click();\n$('#q').val('shoes');"
        assert [s.phrase for s in when_steps(text)] == [
            'I enter "shoes" in the "#q" field',
            'I click on ".go"',
        ]

    @pytest.mark.unit
    def test_selector_rule_before_library_rule(self):
        text = "$('.add-to-cart').click();\ndocument.querySelector('.login-btn').click();"
        assert [s.phrase for s in when_steps(text)] == [
            'I click on ".login-btn"',
            'I click on ".add-to-cart"',
        ]

    @pytest.mark.unit
    def test_duplicate_phrase_emitted_once(self):
        text = "$('.next').click();\n$('.next').click();"
        assert [s.phrase for s in when_steps(text)] == ['I click on ".next"']

    @pytest.mark.unit
    def test_fallback_when_nothing_extracted(self):
        text = "const el = document.getElementById('x');\nel.click();"
        assert [s.phrase for s in when_steps(text)] == ["I perform the test actions"]

    @pytest.mark.unit
    def test_cypress_and_puppeteer(self):
        text = "cy.get('#name').type('Ada');\nawait page.click('.save');"
        assert [s.phrase for s in when_steps(text)] == [
            'I enter "Ada" in the "#name" field',
            'I click on ".save"',
        ]


@pytest.mark.unit
class TestThen:

    @pytest.mark.unit
    def test_fallback(self):
        assert [s.phrase for s in then_steps("x = 1;")] == ["I should see the expected result"]

    @pytest.mark.unit
    def test_content_read(self):
        phrases = [s.phrase for s in then_steps("const html = el.innerHTML;")]
        assert phrases == ["I should see the expected content"]


@pytest.mark.unit
class TestStepSynthesizer:

    @pytest.mark.unit
    def test_accumulates_vocabulary(self):
        synth = StepSynthesizer()
        synth.synthesize(LOGIN_SNIPPET, detect(LOGIN_SNIPPET))
        synth.synthesize(LOGIN_SNIPPET, detect(LOGIN_SNIPPET))
        assert synth.emitted == 8
        assert len(synth.vocabulary) == 4

    @pytest.mark.unit
    def test_vocabulary_never_exceeds_emitted(self):
        synth = StepSynthesizer()
        for text in (LOGIN_SNIPPET, "$('.x').click();", "const y = 2;"):
            synth.synthesize(text, detect(text))
        assert len(synth.vocabulary) <= synth.emitted

    @pytest.mark.unit
    def test_uses_given_vocabulary(self):
        vocabulary = StepVocabulary()
        synth = StepSynthesizer(vocabulary)
        synth.synthesize(LOGIN_SNIPPET, detect(LOGIN_SNIPPET))
        assert synth.vocabulary is vocabulary
        assert 'When I click on "#login-btn"' in vocabulary
