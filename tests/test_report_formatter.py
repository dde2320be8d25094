"""Tests for the Markdown report formatter."""

from datetime import datetime

from app.report_formatter import format_markdown_report
from code_quality_checker.analyzer import analyze_code
from code_quality_checker.report import Report

GENERATED = datetime(2024, 5, 1, 9, 30, 0)


def test_empty_report():
    text = format_markdown_report(Report(), "python", generated_at=GENERATED)
    assert "Generated: 2024-05-01 09:30:00" in text
    assert "No issues found." in text
    assert "## Suggested code" not in text


def test_issue_line_shows_severity_and_title():
    text = format_markdown_report(analyze_code("# TODO", "python"), "python", generated_at=GENERATED)
    assert "**Line 1 · Warning · TODO comment found**" in text


def test_plain_suggested_code_uses_three_backticks():
    report = Report().with_suggested_code("x = 1")
    text = format_markdown_report(report, "python", generated_at=GENERATED)
    assert text.endswith("```python\nx = 1\n```\n")


def test_suggested_code_containing_fences_stays_in_one_block():
    code = 'doc = """\n```js\nrun()\n```\n"""\nquote = "````"'
    report = Report().with_suggested_code(code)
    text = format_markdown_report(report, "python", generated_at=GENERATED)
    assert text.endswith("`````python\n" + code + "\n`````\n")
