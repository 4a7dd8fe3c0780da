"""Daily notes plugin settings: defaults, loading and saving."""

import logging

from vault import Vault

logger = logging.getLogger(__name__)

NOTE_TYPES = ("markdown", "canvas")

DEFAULT_TEMPLATE = """---
date: {{date}}
type: daily-note
---

# {{date}}

## 🎯 Tasks
- [ ]

## 📝 Notes


## 📅 Events


## 🔄 Daily Review
- [ ] Review today's tasks
- [ ] Plan for tomorrow
- [ ] Reflect on the day

## 📚 Links
-
"""

DEFAULT_SETTINGS = {
    "dailyNotesPath": "Daily Notes",
    "template": DEFAULT_TEMPLATE,
    "templatePath": "",
    "dateFormat": "DDMMYYYY",
    "useYamlFrontmatter": True,
    "defaultNoteType": "markdown",
}


def load_settings(vault: Vault) -> dict:
    """Stored settings merged over the defaults (shallow).

    A stored value of the wrong type (e.g. null) is ignored and the default
    kept. Unknown keys pass through untouched.
    """
    settings = dict(DEFAULT_SETTINGS)
    for key, value in vault.read_plugin_data().items():
        if key in DEFAULT_SETTINGS and not isinstance(value, type(DEFAULT_SETTINGS[key])):
            logger.warning("Ignoring stored %s of type %s", key, type(value).__name__)
            continue
        settings[key] = value
    return settings


def save_settings(vault: Vault, settings: dict) -> None:
    vault.write_plugin_data(settings)


def update_settings(vault: Vault, **changes) -> str:
    """Validate and persist a partial settings update."""
    for key, value in changes.items():
        if key not in DEFAULT_SETTINGS:
            return f"Error: Unknown setting: {key}"
        expected = type(DEFAULT_SETTINGS[key])
        if not isinstance(value, expected):
            return f"Error: {key} must be {expected.__name__}, got {type(value).__name__}"
    note_type = changes.get("defaultNoteType")
    if note_type is not None and note_type not in NOTE_TYPES:
        return f"Error: defaultNoteType must be one of {', '.join(NOTE_TYPES)}"

    if not changes:
        return "No changes."

    settings = load_settings(vault)
    settings.update(changes)
    save_settings(vault, settings)
    logger.info("Updated settings: %s", ", ".join(sorted(changes)))

    lines = ["Updated settings:"]
    for key in changes:
        value = settings[key]
        if key == "template":
            value = f"({len(value)} chars)"
        lines.append(f"  {key}: {value}")
    return "\n".join(lines)
