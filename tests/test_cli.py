import json

import pytest
from click.testing import CliRunner

from a11y_compliance import __version__
from a11y_compliance.cli import main


@pytest.fixture
def runner(clean_env):
    return CliRunner()


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_contrast_pass(runner):
    result = runner.invoke(main, ["contrast", "#FFFFFF", "#1C8282"])
    assert result.exit_code == 0
    assert "(AA)" in result.output


def test_contrast_fail_exit_code(runner):
    result = runner.invoke(main, ["contrast", "#9CA3AF", "#FFFFFF"])
    assert result.exit_code == 1
    assert "Fail" in result.output


def test_contrast_json_large_text(runner):
    result = runner.invoke(main, ["contrast", "#777777", "#FFFFFF", "--large", "--output", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["level"] == "AA"
    assert data["required_ratio"] == 3
    assert data["is_large_text"] is True


def test_contrast_invalid_color(runner):
    result = runner.invoke(main, ["contrast", "teal", "#FFFFFF"])
    assert result.exit_code == 2
    assert "Invalid hex color" in result.output


def test_palette_json(runner):
    result = runner.invoke(main, ["palette", "--output", "json"])
    assert result.exit_code == 0
    rows = {row["name"]: row for row in json.loads(result.output)}
    assert rows["Placeholder Text on White"]["passes"] is False
    assert rows["Skip Link"]["passes"] is True


def test_palette_rich(runner):
    result = runner.invoke(main, ["palette"])
    assert result.exit_code == 0
    assert "WCAG Color Contrast Report" in result.output


def _write_page(path, help_width=32):
    document = {
        "root": {
            "tag": "body",
            "children": [
                {"tag": "button", "text": "Submit", "width": 120, "height": 48},
                {"tag": "button", "text": "Help", "width": help_width, "height": 44},
            ],
        },
        "colors": [
            {"name": "Body", "foreground": "#111827", "background": "#FFFFFF"},
        ],
    }
    path.write_text(json.dumps(document))
    return str(path)


def test_audit_json_reports_issues(runner, clean_env):
    page = _write_page(clean_env / "page.json")
    result = runner.invoke(main, ["audit", page, "--output", "json"])
    assert result.exit_code == 1
    report = json.loads(result.output)
    assert report["touch_targets"]["total"] == 2
    assert report["touch_targets"]["compliant"] == 1
    assert report["contrast"]["Body"]["level"] == "AAA"
    assert report["issues"][0]["location"] == "Help"


def test_audit_min_size_override(runner, clean_env):
    page = _write_page(clean_env / "page.json")
    result = runner.invoke(main, ["audit", page, "--min-size", "32"])
    assert result.exit_code == 0
    assert "No issues found" in result.output


def test_audit_rich_output(runner, clean_env):
    page = _write_page(clean_env / "page.json")
    result = runner.invoke(main, ["audit", page])
    assert result.exit_code == 1
    assert "[touch_target]" in result.output
    assert "Touch target 'Help' is 32x44px" in result.output


def test_audit_invalid_tree(runner, clean_env):
    path = clean_env / "bad.json"
    path.write_text(json.dumps({"root": {"text": "no tag"}}))
    result = runner.invoke(main, ["audit", str(path)])
    assert result.exit_code == 2
    assert "Invalid element tree" in result.output


def test_invalid_config_from_env(runner, monkeypatch):
    monkeypatch.setenv("A11Y_POLITE_DELAY_MS", "soon")
    result = runner.invoke(main, ["palette"])
    assert result.exit_code == 2
    assert "Invalid configuration" in result.output


def test_audit_rejects_non_positive_min_size(runner, clean_env):
    path = clean_env / "hidden.json"
    path.write_text(json.dumps({"tag": "body", "children": [{"tag": "button", "text": "Hidden"}]}))
    result = runner.invoke(main, ["audit", str(path), "--min-size", "0"])
    assert result.exit_code == 2
    assert "--min-size" in result.output


def test_audit_min_size_above_config_limit(runner, clean_env):
    page = _write_page(clean_env / "page.json")
    result = runner.invoke(main, ["audit", page, "--min-size", "500"])
    assert result.exit_code == 2
    assert "Invalid --min-size" in result.output


def test_audit_reports_markup_issues(runner, clean_env):
    path = clean_env / "form.json"
    path.write_text(json.dumps({"tag": "form", "children": [
        {"tag": "img", "alt": "Logo"},
        {"tag": "input", "type": "email"},
        {"tag": "div", "text": "Send", "tabindex": "0", "clickable": True},
    ]}))
    result = runner.invoke(main, ["audit", str(path), "--output", "json"])
    assert result.exit_code == 1
    report = json.loads(result.output)
    assert report["markup"]["checked"] == 3
    assert [i["dimension"] for i in report["issues"]] == ["semantics", "semantics"]
