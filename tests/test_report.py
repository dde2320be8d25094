"""Tests for Report and SessionLog."""

import threading
from datetime import datetime, timedelta

import pytest

from code_quality_checker.analyzer import analyze_code
from code_quality_checker.issue import Issue, Severity
from code_quality_checker.report import Report
from code_quality_checker.session_log import SessionLog, SessionRecord


def _issue(severity, n=1):
    return Issue(severity, "t", f"Line {n}: m", n)


def test_counts_derived_from_issues():
    report = Report.from_issues([_issue(Severity.WARNING), _issue(Severity.SUGGESTION), _issue(Severity.WARNING)])
    assert report.warnings == 2
    assert report.suggestions == 1
    assert report.total == 3
    assert report.counts() == {"warning": 2, "suggestion": 1}


def test_total_not_settable():
    report = Report.from_issues([])
    with pytest.raises(AttributeError):
        report.total = 5


def test_with_suggested_code_keeps_issues():
    report = Report.from_issues([_issue(Severity.WARNING)])
    rewritten = report.with_suggested_code("x = 1")
    assert rewritten.suggested_code == "x = 1"
    assert rewritten.issues == report.issues
    assert rewritten.warnings == 1
    assert report.suggested_code is None


def test_to_dict_shape():
    report = analyze_code("print(x)", "python")
    assert report.to_dict() == {
        "warnings": 0,
        "suggestions": 1,
        "total": 1,
        "issues": [
            {
                "type": "suggestion",
                "title": "Debug statement",
                "message": "Line 1: Remove debug prints/logs in production code.",
                "line_number": 1,
            }
        ],
        "suggested_code": None,
    }


def test_session_log_most_recent_first():
    start = datetime(2024, 1, 1, 12, 0, 0)
    ticks = iter(start + timedelta(seconds=s) for s in range(10))
    log = SessionLog(clock=lambda: next(ticks))

    reports = [
        ("python", analyze_code("print(1)", "python")),
        ("javascript", analyze_code("if (a == b) {}\n// TODO", "javascript")),
        ("c", analyze_code("", "c")),
    ]
    for language, report in reports:
        log.record(language, report)

    records = log.list()
    assert len(records) == len(log) == 3
    assert [r.language for r in records] == ["c", "javascript", "python"]
    assert records[0].timestamp == "2024-01-01 12:00:02"
    assert records[1] == SessionRecord(
        timestamp="2024-01-01 12:00:01",
        language="javascript",
        total=2,
        warnings=2,
        suggestions=0,
    )


def test_session_log_list_is_a_snapshot():
    log = SessionLog()
    log.record("python", Report())
    snapshot = log.list()
    log.record("python", Report())
    assert len(snapshot) == 1
    assert len(log.list()) == 2


def test_session_log_concurrent_record():
    log = SessionLog()
    report = Report()

    def worker():
        for _ in range(200):
            log.record("python", report)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(log) == 1600


def test_api_response_built_from_to_dict():
    from app.services import report_to_out

    report = analyze_code("// TODO\nconsole.log(a == b)", "javascript").with_suggested_code("x")
    assert report_to_out(report).model_dump() == report.to_dict()
