from contextlib import contextmanager
from playwright.sync_api import sync_playwright, Error as PlaywrightError

from config import HEADLESS, USER_AGENT
from models.errors import ProviderFailure
from models.enums import RunStage


@contextmanager
def page_session(headless: bool = HEADLESS):
    """Yield a fresh incognito page; the browser is closed on every exit path"""
    with sync_playwright() as p:
        try:
            browser = p.chromium.launch(headless=headless, args=['--incognito'])
        except PlaywrightError as e:
            raise ProviderFailure(f"Browser launch failed: {e}", stage=RunStage.INIT) from e

        try:
            context = browser.new_context(user_agent=USER_AGENT)
            yield context.new_page()
        finally:
            browser.close()
            print("[BROWSER] Browser closed")
