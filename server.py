"""FastMCP server for Obsidian daily notes."""

import logging
import os

from fastmcp import FastMCP

import daily_notes as dn
import settings as cfg
import templates
from vault import Vault

vault_path = os.environ.get("OBSIDIAN_VAULT_PATH", "~/Documents/Obsidian")
vault = Vault(vault_path)

mcp = FastMCP("daily-notes")


# --- Daily Notes ---


@mcp.tool(
    annotations={
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
    }
)
def create_daily_note() -> str:
    """Create today's daily note from the template, or open it if it exists."""
    return dn.create_or_open_daily_note(vault, cfg.load_settings(vault))


@mcp.tool(
    annotations={
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
    }
)
def open_today_note() -> str:
    """Open today's note, creating it first if it does not exist yet."""
    return dn.open_today_note(vault, cfg.load_settings(vault))


@mcp.tool(
    annotations={
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
    }
)
def note_opened(path: str) -> str:
    """Notify that a note was opened.

    Rewrites [[.../Daily Notes/DDMMYYYY-daily|...]] placeholder links in the
    note to today's date, then makes sure today's daily note exists.

    Args:
        path: Exact vault-relative path of the opened file
    """
    return dn.handle_file_open(vault, path, cfg.load_settings(vault))


@mcp.tool(
    annotations={"readOnlyHint": True, "destructiveHint": False, "idempotentHint": True}
)
def daily_note_info() -> str:
    """Show today's daily note path, whether it exists, and its frontmatter."""
    return dn.daily_note_info(vault, cfg.load_settings(vault))


# --- Settings ---


@mcp.tool(
    annotations={"readOnlyHint": True, "destructiveHint": False, "idempotentHint": True}
)
def get_settings() -> str:
    """Show the current daily notes settings."""
    settings = cfg.load_settings(vault)
    lines = [f"Vault: {vault.root}", ""]
    for key in cfg.DEFAULT_SETTINGS:
        value = settings[key]
        if key == "template":
            value = f"({len(value)} chars)"
        lines.append(f"{key}: {value if value != '' else '(none)'}")
    return "\n".join(lines)


@mcp.tool(
    annotations={
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
    }
)
def update_settings(
    daily_notes_path: str | None = None,
    template: str | None = None,
    template_path: str | None = None,
    date_format: str | None = None,
    use_yaml_frontmatter: bool | None = None,
    default_note_type: str | None = None,
) -> str:
    """Change one or more daily notes settings.

    Args:
        daily_notes_path: Folder where daily notes are created
        template: Inline template text ({{date}} is replaced)
        template_path: Vault-relative template file (empty string to clear)
        date_format: Filename date format using DD, MM and YYYY
        use_yaml_frontmatter: Prepend date/type/created frontmatter
        default_note_type: "markdown" or "canvas"
    """
    changes = {
        "dailyNotesPath": daily_notes_path,
        "template": template,
        "templatePath": template_path,
        "dateFormat": date_format,
        "useYamlFrontmatter": use_yaml_frontmatter,
        "defaultNoteType": default_note_type,
    }
    return cfg.update_settings(
        vault, **{k: v for k, v in changes.items() if v is not None}
    )


@mcp.tool(
    annotations={"readOnlyHint": True, "destructiveHint": False, "idempotentHint": False}
)
def preview_template() -> str:
    """Preview what a new daily note would look like with the current settings."""
    return templates.preview_template(vault, cfg.load_settings(vault))


@mcp.tool(
    annotations={"readOnlyHint": True, "destructiveHint": False, "idempotentHint": True}
)
def pick_folder(query: str = "") -> str:
    """List vault folders matching a query, for choosing the daily notes folder.

    Args:
        query: Case-insensitive substring to filter folder paths
    """
    folders = vault.find_folders(query)
    if not folders:
        return f"No folders matching {query!r}."
    return "\n".join(folders)


@mcp.tool(
    annotations={"readOnlyHint": True, "destructiveHint": False, "idempotentHint": True}
)
def pick_template_file(query: str = "") -> str:
    """List markdown files matching a query, for choosing a template file.

    Args:
        query: Case-insensitive substring to filter file paths
    """
    files = vault.find_notes(query)
    if not files:
        return f"No markdown files matching {query!r}."
    return "\n".join(files)


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("DAILY_NOTES_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run(transport="streamable-http", host="127.0.0.1", port=3001)
