#
# src/mvnexec/executor/reports.py
#
"""
Discovers JUnit/Surefire XML reports and turns their test cases into steps.
"""
import math
import os
from collections.abc import Iterator
from pathlib import Path
from xml.etree.ElementTree import Element

import defusedxml.ElementTree as ET
import structlog
from attrs import define, field
from defusedxml import DefusedXmlException

from mvnexec.exceptions import ReportCollectionError
from mvnexec.models import ExecutionStatus, ReportWarning, StepResult
from mvnexec.telemetry import StructLogger

log: StructLogger = structlog.get_logger("executor.reports")

REPORT_SUFFIX = ".xml"

# Child elements of <testcase> and the native status they denote.
_STATUS_ELEMENTS = (
    ("error", "error"),
    ("failure", "failed"),
    ("skipped", "skipped"),
)


@define(frozen=True, slots=True)
class ReportCollection:
    """Steps gathered from a report directory plus files that failed to parse."""
    steps: list[StepResult] = field(factory=list)
    warnings: list[ReportWarning] = field(factory=list)


def map_status(native_status: str) -> ExecutionStatus:
    """Only 'passed' is a pass; failed, error, skipped and unknown all fail."""
    if native_status == "passed":
        return ExecutionStatus.PASSED
    return ExecutionStatus.FAILED


def _trim(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


def format_duration(seconds: float) -> str:
    """Renders seconds as a compact elapsed time, e.g. '250ms', '1.5s', '2m3s'."""
    if seconds <= 0:
        return "0s"
    if seconds < 1:
        for unit, scale in (("ms", 1e3), ("µs", 1e6)):
            value = seconds * scale
            if value >= 1:
                return f"{_trim(value)}{unit}"
        return f"{_trim(seconds * 1e9)}ns"

    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    text = f"{_trim(secs)}s"
    if hours:
        return f"{int(hours)}h{int(minutes)}m{text}"
    if minutes:
        return f"{int(minutes)}m{text}"
    return text


def _parse_time(raw: str | None) -> float:
    if not raw:
        return 0.0
    try:
        # Surefire may format large values with grouping separators.
        value = float(raw.replace(",", ""))
    except ValueError:
        return 0.0
    # NaN and infinities carry no usable duration.
    return value if math.isfinite(value) else 0.0


def native_status(testcase: Element) -> str:
    for tag, status in _STATUS_ELEMENTS:
        if testcase.find(tag) is not None:
            return status
    return "passed"


def _iter_suites(root: Element) -> Iterator[Element]:
    # iter() includes the root itself when it is a bare <testsuite>.
    yield from root.iter("testsuite")


def parse_report(path: Path) -> list[StepResult]:
    """
    Parses one report file into steps, in document order.

    Raises:
        ET.ParseError, DefusedXmlException, OSError, ValueError: The file is unreadable.
    """
    root = ET.parse(path).getroot()
    steps: list[StepResult] = []
    for suite in _iter_suites(root):
        suite_name = suite.get("name", "")
        for testcase in suite.findall("testcase"):
            steps.append(
                StepResult(
                    name=f"{suite_name} - {testcase.get('name', '')}",
                    duration=format_duration(_parse_time(testcase.get("time"))),
                    status=map_status(native_status(testcase)),
                )
            )
    return steps


def _walk_reports(report_dir: Path) -> Iterator[Path]:
    """Yields report files in a stable, sorted walk order. Walk errors propagate."""
    def _raise(error: OSError) -> None:
        raise error

    for dirpath, dirnames, filenames in os.walk(report_dir, onerror=_raise):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if path.suffix == REPORT_SUFFIX and path.is_file():
                yield path


def collect_reports(report_dir: Path) -> ReportCollection:
    """
    Walks `report_dir` and parses every XML report found.

    Files that fail to parse are recorded as warnings and contribute no
    steps. A failure to walk the directory itself is fatal; the steps
    gathered up to that point travel on the error as `partial`.

    Raises:
        ReportCollectionError: The directory is missing or cannot be read.
    """
    collection = ReportCollection()
    collect_log = log.bind(report_dir=str(report_dir))

    try:
        for path in _walk_reports(report_dir):
            try:
                steps = parse_report(path)
            except (ET.ParseError, DefusedXmlException, OSError, ValueError) as e:
                collect_log.warning("Skipping unparsable report", path=str(path), error=str(e))
                collection.warnings.append(ReportWarning(path=path, error=str(e)))
                continue
            collect_log.debug("Report parsed", path=str(path), steps=len(steps))
            collection.steps.extend(steps)
    except OSError as e:
        collect_log.error("Could not walk report directory", error=str(e), emoji_key="fail")
        raise ReportCollectionError(
            str(e), report_dir=report_dir, details=e, partial=collection
        ) from e

    collect_log.info(
        "Reports collected",
        steps=len(collection.steps),
        warnings=len(collection.warnings),
        emoji_key="reports",
    )
    return collection


# 🔼⚙️
