"""Extraction of broadcast details from the TBN on-air page.

The page shows the current programme as

    <p class="greeting-text">
      <b id="forumName">TITLE</b>
      <span>MC : NAME | 방송시간 : 07:00 ~ 09:00</span>
    </p>
"""

import re

from bs4 import BeautifulSoup

from tbn.domain.error import BroadcastParseError
from tbn.domain.model import BroadcastDetails

TITLE_SELECTOR = "p.greeting-text > b#forumName"
SUBTITLE_SELECTOR = "p.greeting-text > span"

# Full-width colon and box-drawing bars appear on the live site
MC_PATTERN = re.compile(r"MC\s*[:：]\s*([^|│｜\n\r]*)")
TIME_PATTERN = re.compile(r"방송시간\s*[:：]\s*([0-9:~\s]+)")


def _text(element) -> str | None:
    if element is None:
        return None
    text = " ".join(element.get_text(" ").split())
    return text or None


def _match(pattern: re.Pattern, text: str | None) -> str | None:
    if not text:
        return None
    match = pattern.search(text)
    if not match:
        return None
    return match.group(1).strip() or None


def parse_broadcast_page(html: str) -> BroadcastDetails:
    """Extract title, MC and airtime from page HTML.

    Each field is None when the page does not carry it.

    Raises:
        BroadcastParseError: If the document cannot be processed
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
        subtitle = _text(soup.select_one(SUBTITLE_SELECTOR))
        return BroadcastDetails(
            title=_text(soup.select_one(TITLE_SELECTOR)),
            mc=_match(MC_PATTERN, subtitle),
            time=_match(TIME_PATTERN, subtitle),
        )
    except Exception as e:
        raise BroadcastParseError(f"Could not parse TBN page: {e}") from e
