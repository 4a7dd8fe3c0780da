"""Rewriting of placeholder daily-note wikilinks."""

import re
from datetime import datetime
from typing import NamedTuple

from dates import format_date

PLACEHOLDER = "DDMMYYYY"

# Links are matched against this folder name regardless of dailyNotesPath.
DAILY_LINK_FOLDER = "Daily Notes"


class LinkRewrite(NamedTuple):
    changed: bool
    text: str


def daily_link_pattern(folder: str = DAILY_LINK_FOLDER) -> re.Pattern:
    """Matches [[<anything>/<folder>/DDMMYYYY-daily|<anything>]]."""
    return re.compile(
        r"(\[\[.*?/" + re.escape(folder) + "/)" + PLACEHOLDER + r"(-daily\|.*?\]\])"
    )


def find_daily_links(text: str, folder: str = DAILY_LINK_FOLDER) -> list[str]:
    """Extract all placeholder daily links from text."""
    return [m.group(0) for m in daily_link_pattern(folder).finditer(text)]


def rewrite_daily_links(
    text: str,
    settings: dict,
    when: datetime | None = None,
    folder: str = DAILY_LINK_FOLDER,
) -> LinkRewrite:
    """Replace the DDMMYYYY filename token in each placeholder link with the date.

    Each match is rewritten at its own position in one pass, so repeated
    identical links are all updated.
    """
    pattern = daily_link_pattern(folder)
    if pattern.search(text) is None:
        return LinkRewrite(False, text)

    date = format_date(settings["dateFormat"], when or datetime.now())
    new_text = pattern.sub(lambda m: m.group(1) + date + m.group(2), text)
    return LinkRewrite(True, new_text)
