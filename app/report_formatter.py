"""Format analysis results as human-readable Markdown."""

from code_quality_checker.issue import Issue, Severity
from code_quality_checker.report import Report
from code_quality_checker.utils import extract_line_numbers
from deps import List, Optional, datetime, re


def _issue_block_md(i: Issue) -> List[str]:
    """One issue as Markdown: Line N · Severity · title, then the message."""
    return [
        f"**Line {i.line_number} · {i.type.title()} · {i.title}**",
        "",
        i.message,
        "",
    ]


def _code_fence(code: str) -> str:
    """Backtick fence longer than any backtick run inside ``code`` (at least three)."""
    longest = max((len(run) for run in re.findall(r"`+", code)), default=0)
    return "`" * max(3, longest + 1)


def format_markdown_report(
    report: Report,
    language: str,
    generated_at: Optional[datetime] = None,
) -> str:
    """Format one analysis as Markdown: summary, issues by severity, suggested code."""
    generated_at = generated_at or datetime.now()
    lines = []
    lines.append("# Code Quality Report")
    lines.append("")
    lines.append(f"Language: {language}")
    lines.append(f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("")
    lines.append(
        f"**{report.total}** issue(s) found ({report.warnings} warning(s), {report.suggestions} suggestion(s))."
    )
    lines.append("")
    flagged = extract_line_numbers(i.message for i in report.issues)
    if flagged:
        lines.append(f"Lines with issues: {', '.join(str(n) for n in flagged)}")
        lines.append("")

    lines.append("## Issues")
    lines.append("")
    if not report.issues:
        lines.append("No issues found.")
        lines.append("")
    else:
        for severity in Severity:
            for i in report.issues:
                if i.severity == severity:
                    lines.extend(_issue_block_md(i))

    if report.suggested_code:
        lines.append("## Suggested code")
        lines.append("")
        fence = _code_fence(report.suggested_code)
        lines.append(f"{fence}{language}")
        lines.append(report.suggested_code)
        lines.append(fence)
        lines.append("")

    return "\n".join(lines)
