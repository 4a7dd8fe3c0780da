"""YAML frontmatter for daily notes."""

import yaml


def daily_block(date: str, created: str) -> str:
    """The metadata block prepended to a new daily note.

    Written by hand rather than via yaml.dump so the layout stays fixed
    (yaml.dump would quote the timestamp).
    """
    return f"---\ndate: {date}\ntype: daily-note\ncreated: {created}\n---\n\n"


def metadata(content: str) -> dict:
    """The leading frontmatter block of a note as a dict, or {} if absent/invalid."""
    if not content.startswith("---\n"):
        return {}
    end = content.find("\n---", 3)
    if end == -1:
        return {}
    try:
        meta = yaml.safe_load(content[4:end])
    except yaml.YAMLError:
        return {}
    return meta if isinstance(meta, dict) else {}
