"""Daily note operations: path resolution, create/open, file-open handling."""

import logging
from datetime import datetime

import frontmatter
from dates import format_date
from links import rewrite_daily_links
from templates import render_template
from vault import Vault

logger = logging.getLogger(__name__)


def daily_note_path(settings: dict, when: datetime | None = None) -> tuple[str, str]:
    """Return (file_path, file_name) for the daily note of a given day."""
    date = format_date(settings["dateFormat"], when or datetime.now())
    ext = ".canvas" if settings["defaultNoteType"] == "canvas" else ".md"
    file_name = f"{date}-daily{ext}"
    file_path = f"{settings['dailyNotesPath']}/{file_name}"
    return file_path, file_name


def _opened(file_path: str, content: str, created: bool = False) -> str:
    marker = "\n[Created]" if created else ""
    return f"path: {file_path}{marker}\n---\n{content}"


def create_or_open_daily_note(
    vault: Vault, settings: dict, when: datetime | None = None
) -> str:
    """Open today's daily note, creating it from the template if missing."""
    when = when or datetime.now()
    file_path, _ = daily_note_path(settings, when)

    try:
        existing = vault.lookup(file_path)
        if existing is not None:
            return _opened(file_path, vault.read_text(existing))

        content = render_template(vault, settings, when)
        vault.write_new(file_path, content)
    except (OSError, ValueError) as e:
        logger.error("Failed to create daily note %s: %s", file_path, e)
        return f"Error: Failed to create daily note: {e}"

    logger.info("Created daily note %s", file_path)
    return _opened(file_path, content, created=True)


def open_today_note(vault: Vault, settings: dict, when: datetime | None = None) -> str:
    """Open today's note; falls back to creating it when it doesn't exist yet."""
    when = when or datetime.now()
    file_path, _ = daily_note_path(settings, when)

    try:
        existing = vault.lookup(file_path)
        if existing is not None:
            return _opened(file_path, vault.read_text(existing))
    except (OSError, ValueError) as e:
        logger.error("Failed to open today's note %s: %s", file_path, e)
        return f"Error: Failed to open today's note: {e}"

    result = create_or_open_daily_note(vault, settings, when)
    return f"Today's note does not exist yet. Creating...\n{result}"


def handle_file_open(
    vault: Vault, path: str, settings: dict, when: datetime | None = None
) -> str:
    """React to a note being opened.

    Placeholder daily links in the opened note are rewritten and saved
    first; only then is today's daily note checked for and created.
    """
    when = when or datetime.now()
    opened = vault.lookup(path)
    if opened is None:
        return f"Error: Note not found: {path}"

    try:
        if opened.suffix == ".md":
            rewrite = rewrite_daily_links(vault.read_text(opened), settings, when)
            if rewrite.changed:
                vault.overwrite(opened, rewrite.text)
                opened_rel = vault.relative(opened)
                logger.info("Rewrote daily links in %s", opened_rel)
                result = create_or_open_daily_note(vault, settings, when)
                return f"Updated daily links in {opened_rel}\n{result}"

        file_path, _ = daily_note_path(settings, when)
        if vault.relative(opened) == file_path.strip("/"):
            return f"Daily note already open: {file_path}"

        if vault.lookup(file_path) is None:
            return create_or_open_daily_note(vault, settings, when)
    except (OSError, ValueError) as e:
        logger.exception("Error handling file open for %s", path)
        return f"Error: Error handling daily note: {e}"

    return "No daily note changes."


def daily_note_info(vault: Vault, settings: dict, when: datetime | None = None) -> str:
    """Summarize where today's daily note lives and what it contains."""
    file_path, file_name = daily_note_path(settings, when)
    lines = [f"path: {file_path}", f"name: {file_name}"]

    existing = vault.lookup(file_path)
    if existing is None:
        lines.append("exists: no")
        return "\n".join(lines)

    lines.append("exists: yes")
    meta = frontmatter.metadata(vault.read_text(existing))
    if meta:
        lines.append("frontmatter:")
        for k, v in meta.items():
            lines.append(f"  {k}: {v}")
    return "\n".join(lines)
