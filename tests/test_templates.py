"""Tests for daily note template rendering."""

import logging
from pathlib import Path

from templates import preview_template, render_template, template_source
from vault import Vault


def test_render_replaces_date(tmp_vault: Path, settings, when):
    v = Vault(tmp_vault)
    settings.update(template="Hello {{date}}!", useYamlFrontmatter=False)
    result = render_template(v, settings, when)
    assert result == "Hello March 7, 2024!"
    assert "{{date}}" not in result
    assert result.count("March 7, 2024") == 1


def test_render_replaces_every_token(tmp_vault: Path, settings, when):
    v = Vault(tmp_vault)
    settings.update(template="{{date}} {{date}}{{date}}", useYamlFrontmatter=False)
    result = render_template(v, settings, when)
    assert result == "March 7, 2024 March 7, 2024March 7, 2024"


def test_render_with_frontmatter(tmp_vault: Path, settings, when):
    v = Vault(tmp_vault)
    settings.update(template="Body {{date}}", useYamlFrontmatter=True)
    result = render_template(v, settings, when)
    assert result.startswith("---\ndate: March 7, 2024\ntype: daily-note\ncreated: ")
    assert result.index("created: ") < result.index("Body")
    assert result.endswith("---\n\nBody March 7, 2024")


def test_render_default_template(tmp_vault: Path, settings, when):
    v = Vault(tmp_vault)
    result = render_template(v, settings, when)
    assert "{{date}}" not in result
    assert "# March 7, 2024" in result
    assert "## 🔄 Daily Review" in result


def test_render_is_deterministic_with_clock(tmp_vault: Path, settings, when):
    v = Vault(tmp_vault)
    assert render_template(v, settings, when) == render_template(v, settings, when)


def test_render_from_template_file(tmp_vault: Path, settings, when):
    v = Vault(tmp_vault)
    settings.update(templatePath="Templates/Daily.md", useYamlFrontmatter=False)
    assert render_template(v, settings, when) == "# March 7, 2024\n\n## Log\n"


def test_missing_template_file_falls_back(tmp_vault: Path, settings, when):
    v = Vault(tmp_vault)
    settings.update(
        template="inline {{date}}", templatePath="Templates/Nope.md", useYamlFrontmatter=False
    )
    assert render_template(v, settings, when) == "inline March 7, 2024"


def test_unreadable_template_falls_back(tmp_vault: Path, settings, when, caplog):
    v = Vault(tmp_vault)
    (tmp_vault / "Templates" / "Binary.md").write_bytes(b"\xff\xfe\x00bad")
    settings.update(template="inline", templatePath="Templates/Binary.md")

    with caplog.at_level(logging.WARNING, logger="templates"):
        assert template_source(v, settings) == "inline"
    assert "Error reading template file" in caplog.text


def test_preview_uses_weekday(tmp_vault: Path, settings, when):
    v = Vault(tmp_vault)
    settings.update(template="# {{date}}", useYamlFrontmatter=True)
    result = preview_template(v, settings, when)
    assert result.startswith("---\ndate: Thursday, March 7, 2024\n")
    assert result.endswith("# Thursday, March 7, 2024")
    created = [line for line in result.splitlines() if line.startswith("created: ")]
    assert created and created[0].endswith("Z")
