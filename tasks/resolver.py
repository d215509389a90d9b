from typing import Iterable
from playwright.sync_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeout

from config import RESOLVE_TIMEOUT
from models.enums import ResolveStatus
from models.schemas import Resolution, ResolveAttempt


def resolve_first(page, descriptors: Iterable[str], timeout: float = RESOLVE_TIMEOUT) -> Resolution:
    """
    Return the first selector whose element becomes visible.

    Args:
        page: Playwright page
        descriptors: Selectors, most specific first
        timeout: Seconds to wait on each selector before moving on

    Returns:
        Resolution with the winning descriptor and locator, or an unresolved
        Resolution listing every attempt. Never raises for a missing element.
    """
    resolution = Resolution()

    for descriptor in descriptors:
        try:
            locator = page.locator(descriptor).first
            locator.wait_for(state='visible', timeout=timeout * 1000)
        except PlaywrightTimeout:
            resolution.attempts.append(ResolveAttempt(descriptor, ResolveStatus.NOT_FOUND))
            continue
        except PlaywrightError as e:
            print(f"[RESOLVER] Selector failed: {descriptor} ({e})")
            resolution.attempts.append(ResolveAttempt(descriptor, ResolveStatus.ERROR, str(e)))
            continue

        resolution.attempts.append(ResolveAttempt(descriptor, ResolveStatus.FOUND))
        resolution.descriptor = descriptor
        resolution.locator = locator
        return resolution

    return resolution
