import io
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gitinfo.config.constants import GREEN, NC, RED
from gitinfo.models import ValidationIssue
from gitinfo.rendering.console import render_error, render_failure, render_success, use_color


class _Tty(io.StringIO):
    def isatty(self):
        return True


def test_render_failure_lists_issues():
    issues = [
        ValidationIssue(path="root", message='unknown property "x"'),
        ValidationIssue(path=".tags[2]", message="expected string"),
    ]
    assert render_failure(".gitinfo", issues) == (
        "Validation failed for .gitinfo:\n"
        '  - root: unknown property "x"\n'
        "  - .tags[2]: expected string"
    )


def test_render_colors_only_headlines():
    text = render_failure(".gitinfo", [ValidationIssue(path=".a", message="m")], color=True)
    assert text.splitlines() == [f"{RED}Validation failed for .gitinfo:{NC}", "  - .a: m"]
    assert render_success(".gitinfo", color=True) == f"{GREEN}✓ .gitinfo is valid{NC}"
    assert render_error("boom") == "Error: boom"


def test_use_color_modes(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert use_color("always", io.StringIO())
    assert not use_color("never", _Tty())
    assert not use_color("auto", io.StringIO())
    assert use_color("auto", _Tty())


def test_no_color_env_disables_auto(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert not use_color("auto", _Tty())
    assert use_color("always", _Tty())
