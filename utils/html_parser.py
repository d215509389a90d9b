from bs4 import BeautifulSoup, Comment
from typing import List

# Row-like elements scanned one at a time by the date miner
_UNIT_TAGS = ['tr', 'div']
_NOISE_TAGS = ['script', 'style', 'noscript']

# Line boundaries for sections without rows; <dt>/<dd> handled as one line
_BLOCK_TAGS = ['p', 'li', 'ul', 'ol', 'dl', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
               'section', 'article', 'header', 'footer', 'blockquote', 'pre', 'table']

_collapse = lambda text: ' '.join(text.split())


def _is_leaf(element) -> bool:
    """Rows are leaves unless they hold nested rows; divs unless they hold rows or divs"""
    if element.name == 'tr':
        return element.find('tr') is None
    return element.find(_UNIT_TAGS) is None


def _has_own_text(element) -> bool:
    """True if some text belongs to `element` itself rather than a nested row/div"""
    return any(
        text.strip() and not isinstance(text, Comment) and text.find_parent(_UNIT_TAGS) is element
        for text in element.find_all(string=True)
    )


def _row_units(soup) -> List[str]:
    """
    Leaf rows first, in document order. Then containers carrying their own
    label text (e.g. <div><span>Filing date</span><div>2015-03-10</div></div>),
    smallest first so a label row beats the wrapper around it.
    """
    elements = soup.find_all(_UNIT_TAGS)
    leaves = [el for el in elements if _is_leaf(el)]
    labeled = [el for el in elements if not _is_leaf(el) and _has_own_text(el)]
    labeled.sort(key=lambda el: len(el.find_all(_UNIT_TAGS)))

    units = (_collapse(el.get_text(' ', strip=True)) for el in leaves + labeled)
    return [unit for unit in units if unit]


def _block_lines(soup) -> List[str]:
    """Split row-less markup into lines at block elements and <br>, never at inline tags"""
    for br in soup.find_all('br'):
        br.replace_with('\n')
    for block in soup.find_all(_BLOCK_TAGS):
        block.insert_before('\n')
        block.insert_after('\n')
    for dt in soup.find_all('dt'):
        dt.insert_before('\n')
    for dd in soup.find_all('dd'):
        dd.insert_before(' ')
        dd.insert_after('\n')

    lines = (_collapse(line) for line in soup.get_text().split('\n'))
    return [line for line in lines if line]


def section_units(html: str) -> List[str]:
    """
    Split a section's HTML into discrete text units.

    Args:
        html: Inner HTML of a candidate section (table, container div, ...)

    Returns:
        Text of each row/division, whitespace collapsed, leaf rows first.
        Sections without rows fall back to one unit per block-level line.
    """
    soup = BeautifulSoup(html or '', 'html.parser')

    for tag in soup(_NOISE_TAGS):
        tag.decompose()
    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()

    return _row_units(soup) or _block_lines(soup)
