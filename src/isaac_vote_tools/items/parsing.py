# ABOUTME: BeautifulSoup extraction of item name and quality from a wiki search fragment
# ABOUTME: Each extractor returns None when its element is absent

from bs4 import BeautifulSoup

from isaac_vote_tools.items.base import ItemDetails

QUALITY_SELECTOR = 'span[id="333"]'
NAME_SELECTOR = ".i-gs-icon-name a"


def parse_fragment(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def extract_quality(soup: BeautifulSoup) -> str | None:
    """Text of the quality span, or None if the fragment has no such span."""
    element = soup.select_one(QUALITY_SELECTOR)
    return element.get_text() if element is not None else None


def extract_item_name(soup: BeautifulSoup) -> str | None:
    """First non-empty item name link text, or None."""
    for link in soup.select(NAME_SELECTOR):
        text = link.get_text().strip()
        if text:
            return text
    return None


def extract_item_details(html: str) -> ItemDetails:
    soup = parse_fragment(html)
    return ItemDetails(name=extract_item_name(soup), quality=extract_quality(soup))
