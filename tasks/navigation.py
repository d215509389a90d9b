import re
from typing import Optional
from playwright.sync_api import Error as PlaywrightError

from config import (
    SITE_URL, NAVIGATION_TIMEOUT, RESOLVE_TIMEOUT, CONSENT_TIMEOUT,
    TYPE_SETTLE_MS, RESULTS_SETTLE_MS, CONSENT_SETTLE_MS, CONSENT_CLICK_SETTLE_MS, RESULT_SETTLE_MS,
    SEARCH_BOX_SELECTORS, CONSENT_SELECTORS, RESULT_SELECTORS, FALLBACK_RESULT_SELECTORS
)
from models.errors import NoSearchTerm, NoResultFound, ProviderFailure
from models.enums import RunStage
from .resolver import resolve_first

# "Search pharmaceutical patents by INN - Ex: zavegepant"
_EXAMPLE_MARKER = re.compile(r'\bex(?:ample)?\s*:\s*(\w+)', re.IGNORECASE)


def derive_search_term(hint: Optional[str]) -> Optional[str]:
    """Pull the example term out of a placeholder hint"""
    match = _EXAMPLE_MARKER.search(hint or '')
    return match.group(1) if match else None


def open_site(page, url: str = SITE_URL, timeout: int = NAVIGATION_TIMEOUT):
    """Navigate and wait for the network to go idle"""
    print(f"[BROWSER] Navigating to {url}")
    try:
        page.goto(url, wait_until='networkidle', timeout=timeout * 1000)
    except PlaywrightError as e:
        raise ProviderFailure(f"Failed to load {url}: {e}", stage=RunStage.INIT) from e
    print(f"[BROWSER] Page loaded")


def submit_search(page, search_term: Optional[str] = None, selectors=SEARCH_BOX_SELECTORS,
                  timeout: float = RESOLVE_TIMEOUT) -> Optional[str]:
    """
    Fill the search box and submit.

    Returns:
        The term searched for, or None if the search box was missing or
        could not be used.

    Raises:
        NoSearchTerm: box found, but no term given and none in its placeholder
    """
    resolution = resolve_first(page, selectors, timeout)
    if not resolution.found:
        print("[SEARCH] Search box not found")
        return None
    print(f"[SEARCH] Search box found: {resolution.descriptor}")
    box = resolution.locator

    try:
        if not search_term:
            placeholder = box.get_attribute('placeholder')
            search_term = derive_search_term(placeholder)
            if not search_term:
                raise NoSearchTerm(
                    'No search term provided and none could be derived from the search box placeholder',
                    stage=RunStage.INIT)
            print(f"[SEARCH] No search term provided, using example from placeholder: \"{search_term}\"")

        print(f"[SEARCH] Searching for: \"{search_term}\"")
        box.fill(search_term)
        page.wait_for_timeout(TYPE_SETTLE_MS)
        box.press('Enter')
        print("[SEARCH] Waiting for search results...")
        page.wait_for_timeout(RESULTS_SETTLE_MS)
    except PlaywrightError as e:
        print(f"[SEARCH] Search failed: {e}")
        return None

    return search_term


def dismiss_consent(page, selectors=CONSENT_SELECTORS, timeout: float = CONSENT_TIMEOUT) -> Optional[str]:
    """Click through a disclaimer/consent dialog if one shows up. Returns the selector clicked."""
    try:
        page.wait_for_timeout(CONSENT_SETTLE_MS)
        resolution = resolve_first(page, selectors, timeout)
        if not resolution.found:
            print("[CONSENT] No disclaimer shown")
            return None
        resolution.locator.click()
        page.wait_for_timeout(CONSENT_CLICK_SETTLE_MS)
    except PlaywrightError as e:
        print(f"[CONSENT] Could not dismiss disclaimer: {e}")
        return None

    print(f"[CONSENT] Disclaimer accepted ({resolution.descriptor})")
    return resolution.descriptor


def open_first_result(page, selectors=RESULT_SELECTORS, fallback_selectors=FALLBACK_RESULT_SELECTORS,
                      timeout: float = RESOLVE_TIMEOUT) -> str:
    """
    Click the first search result.

    Returns:
        Selector of the result that was opened

    Raises:
        NoResultFound: neither the result chain nor the fallback resolved,
        or the click itself failed
    """
    print("[RESULT] Looking for patent results...")
    resolution = resolve_first(page, selectors, timeout)
    if not resolution.found:
        print("[RESULT] No specific result matched, trying generic result links")
        resolution = resolve_first(page, fallback_selectors, timeout)
    if not resolution.found:
        raise NoResultFound('No search result found', stage=RunStage.CONSENT_HANDLED)

    try:
        resolution.locator.click()
        page.wait_for_timeout(RESULT_SETTLE_MS)
    except PlaywrightError as e:
        raise NoResultFound(f"Could not open result {resolution.descriptor}: {e}",
                            stage=RunStage.CONSENT_HANDLED) from e

    print(f"[RESULT] Opened first result ({resolution.descriptor})")
    return resolution.descriptor
