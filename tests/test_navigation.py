"""Tests for the search, consent and result stages."""

import pytest
from models.errors import NoSearchTerm, NoResultFound, ProviderFailure
from tasks.navigation import derive_search_term, open_site, submit_search, dismiss_consent, open_first_result
from tests.fakes import FakePage, FakeElement


PLACEHOLDER_CASES = [
    {"id": "example_marker", "hint": "Example: zavegepant", "expected": "zavegepant"},
    {"id": "site_placeholder", "hint": "Search pharmaceutical patents by INN - Ex: zavegepant", "expected": "zavegepant"},
    {"id": "lowercase_marker", "hint": "search... ex:semaglutide", "expected": "semaglutide"},
    {"id": "no_marker", "hint": "Search patents", "expected": None},
    {"id": "marker_without_term", "hint": "Example: ", "expected": None},
    {"id": "missing_hint", "hint": None, "expected": None},
]


@pytest.mark.parametrize("case", PLACEHOLDER_CASES, ids=lambda x: x["id"])
def test_derive_search_term(case):
    assert derive_search_term(case["hint"]) == case["expected"]


class TestOpenSite:

    def test_navigates(self):
        page = FakePage()
        open_site(page, 'https://example.org/')
        assert page.visited == ['https://example.org/']

    def test_navigation_error_is_provider_failure(self):
        with pytest.raises(ProviderFailure):
            open_site(FakePage(goto_error='net::ERR_NAME_NOT_RESOLVED'), 'https://example.org/')


class TestSubmitSearch:

    def _page(self, placeholder=None):
        attrs = {'placeholder': placeholder} if placeholder else {}
        return FakePage({'input[type="text"]': [FakeElement(attrs=attrs)]})

    def test_supplied_term(self):
        page = self._page()
        assert submit_search(page, 'aspirin', timeout=1) == 'aspirin'
        assert page.actions == [
            ('fill', 'input[type="text"]', 'aspirin'),
            ('press', 'input[type="text"]', 'Enter'),
        ]

    def test_term_from_placeholder(self):
        page = self._page('Search pharmaceutical patents by INN - Ex: zavegepant')
        assert submit_search(page, timeout=1) == 'zavegepant'
        assert ('fill', 'input[type="text"]', 'zavegepant') in page.actions

    def test_no_term_anywhere(self):
        with pytest.raises(NoSearchTerm):
            submit_search(self._page('Search patents'), timeout=1)

    def test_missing_search_box_degrades(self):
        page = FakePage()
        assert submit_search(page, 'aspirin', timeout=1) is None
        assert page.actions == []


class TestDismissConsent:

    def test_clicks_first_matching_button(self):
        page = FakePage({'button:has-text("Accept")': [FakeElement()], '#cookie-accept': [FakeElement()]})
        assert dismiss_consent(page, timeout=1) == 'button:has-text("Accept")'
        assert page.actions == [('click', 'button:has-text("Accept")', None)]

    def test_no_dialog(self):
        page = FakePage()
        assert dismiss_consent(page, timeout=1) is None
        assert page.actions == []

    def test_click_failure_is_absorbed(self):
        page = FakePage({'#cookie-accept': [FakeElement(click_error='Element is detached')]})
        assert dismiss_consent(page, timeout=1) is None


class TestOpenFirstResult:

    def test_specific_result(self):
        page = FakePage({'li.titlePreview': [FakeElement()], 'table tr td a': [FakeElement()]})
        assert open_first_result(page, timeout=1) == 'li.titlePreview'

    def test_generic_fallback(self):
        page = FakePage({'table a, .results a, .result a': [FakeElement()]})
        assert open_first_result(page, timeout=1) == 'table a, .results a, .result a'

    def test_nothing_to_open(self):
        with pytest.raises(NoResultFound):
            open_first_result(FakePage(), timeout=1)

    def test_click_failure_is_terminal(self):
        page = FakePage({'li.medNum': [FakeElement(click_error='Element is not attached')]})
        with pytest.raises(NoResultFound):
            open_first_result(page, timeout=1)
