import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Target site
SITE_URL = os.getenv('PATENT_SITE_URL', 'https://patinformed.wipo.int/')

# Browser
HEADLESS = os.getenv('HEADLESS', 'false').lower() == 'true'
USER_AGENT = os.getenv('USER_AGENT', 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36')

# Timeouts (seconds)
NAVIGATION_TIMEOUT = int(os.getenv('NAVIGATION_TIMEOUT', '60'))
RESOLVE_TIMEOUT = int(os.getenv('RESOLVE_TIMEOUT', '3'))   # per selector attempt
CONSENT_TIMEOUT = int(os.getenv('CONSENT_TIMEOUT', '2'))

# Settle delays (milliseconds)
TYPE_SETTLE_MS = int(os.getenv('TYPE_SETTLE_MS', '1000'))
RESULTS_SETTLE_MS = int(os.getenv('RESULTS_SETTLE_MS', '3000'))
CONSENT_SETTLE_MS = int(os.getenv('CONSENT_SETTLE_MS', '2000'))
CONSENT_CLICK_SETTLE_MS = int(os.getenv('CONSENT_CLICK_SETTLE_MS', '1000'))
RESULT_SETTLE_MS = int(os.getenv('RESULT_SETTLE_MS', '3000'))
LINGER_MS = int(os.getenv('LINGER_MS', '0'))  # keep the window open before closing

# Selector chains, most specific first
SEARCH_BOX_SELECTORS = (
    'input.searchField',
    'input[class="searchField"]',
    'input[placeholder*="Search"]',
    'input[type="text"]',
)

CONSENT_SELECTORS = (
    'button:has-text("I have read and agree to the terms")',
    'button:has-text("agree to the terms")',
    'button:has-text("Accept")',
    'button:has-text("Accept all")',
    'button:has-text("I agree")',
    'button:has-text("OK")',
    'button:has-text("Agree")',
    '[id*="accept"]',
    '[class*="accept"]',
    '.cookie-accept',
    '#cookie-accept',
)

# Results render as <li class="medNum card titlePreview">
RESULT_SELECTORS = (
    'li.medNum.card.titlePreview',
    'li.titlePreview',
    'li.medNum',
    '.titlePreview',
    'li.card',
    'a:has-text("Patents")',
    'tr:has-text("Patents") a',
    '.result-title:has-text("Patents")',
    'td:has-text("Patents") a',
    '[data-testid*="result"] a',
    'table tr td a',
    '.result a',
    'a[href*="patent"]',
)

FALLBACK_RESULT_SELECTORS = (
    'table a, .results a, .result a',
)

SECTION_SELECTORS = (
    'table:first-of-type',
    '.patent-details table',
    '.details-section',
    '[class*="patent"] table',
    'table',
    '.info-box',
    '.patent-info',
)
