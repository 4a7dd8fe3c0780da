"""Daily note template rendering."""

import logging
from datetime import datetime

import frontmatter
from dates import long_date, preview_date, timestamp, utc_timestamp
from vault import Vault

logger = logging.getLogger(__name__)

DATE_TOKEN = "{{date}}"


def template_source(vault: Vault, settings: dict) -> str:
    """Template text: the templatePath file if readable, else the inline template."""
    content = settings["template"]
    template_path = settings.get("templatePath", "")
    if not template_path:
        return content

    resolved = vault.lookup(template_path)
    if resolved is None:
        logger.debug("Template file not found, using inline template: %s", template_path)
        return content

    try:
        return vault.read_text(resolved)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Error reading template file %s: %s", template_path, e)
        return content


def render_template(vault: Vault, settings: dict, when: datetime | None = None) -> str:
    """Render the content of a new daily note.

    Every {{date}} becomes the long-form date ("March 7, 2024"). With
    useYamlFrontmatter set, a date/type/created block is prepended.
    """
    when = when or datetime.now()
    date = long_date(when)

    content = template_source(vault, settings).replace(DATE_TOKEN, date)

    if settings.get("useYamlFrontmatter"):
        content = frontmatter.daily_block(date, timestamp(when)) + content

    return content


def preview_template(vault: Vault, settings: dict, when: datetime | None = None) -> str:
    """Settings-panel preview: like render_template but with the weekday date."""
    when = when or datetime.now()
    date = preview_date(when)

    content = template_source(vault, settings).replace(DATE_TOKEN, date)

    if settings.get("useYamlFrontmatter"):
        content = frontmatter.daily_block(date, utc_timestamp(when)) + content

    return content
