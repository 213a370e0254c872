"""
================================================================================
Allure Report Utilities
================================================================================

This module provides helpers for attaching scenario artifacts to Allure and
for turning an allure-results directory into an HTML report.

Features:
- Attachment helpers (JSON, text, PNG screenshots)
- environment.properties generation from resolved configuration
- Result summary, history management and report generation

================================================================================
"""

import json
import shutil
import subprocess
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """Attach text content to Allure report."""
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_png(image: bytes, name: str = "Screenshot"):
    """Attach a PNG screenshot to Allure report."""
    allure.attach(
        image,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


# ================================================================================
# Environment Properties
# ================================================================================

def build_environment_properties(config) -> Dict[str, str]:
    """
    Collect the run-level facts shown on the Allure overview page.

    Args:
        config: GlobalProperties instance
    """
    use_options = config.get_playwright_use_options()
    viewport = use_options.get("viewport") or {}
    return {
        "Environment": config.get_environment(),
        "CI": str(config.is_ci()).lower(),
        "Browser": str(config.get("browser.name", "chromium")),
        "Headless": str(use_options.get("headless")).lower(),
        "Viewport": f"{viewport.get('width')}x{viewport.get('height')}",
    }


def write_environment_properties(results_dir: Path, config) -> Path:
    """
    Write ``environment.properties`` into the allure-results directory.

    Returns:
        Path to the written file
    """
    results_dir = Path(results_dir)
    results_dir.mkdir(parents=True, exist_ok=True)

    properties_file = results_dir / "environment.properties"
    lines = [f"{key}={value}" for key, value in build_environment_properties(config).items()]
    properties_file.write_text("\n".join(lines) + "\n", encoding="utf-8")

    logger.debug(f"Allure environment properties written: {properties_file}")
    return properties_file


# ================================================================================
# Result Summary
# ================================================================================

RESULT_STATUSES = ("passed", "failed", "broken", "skipped")


@dataclass
class ScenarioResult:
    """One ``*-result.json`` entry reduced to what the run summary needs."""

    name: str
    feature: str
    status: str
    duration_ms: int

    @classmethod
    def from_result(cls, data: Dict[str, Any]) -> "ScenarioResult":
        labels = {label.get("name"): label.get("value") for label in data.get("labels", [])}
        status = data.get("status")
        return cls(
            name=data.get("name", "unnamed scenario"),
            feature=labels.get("feature") or labels.get("suite") or "unknown",
            status=status if status in RESULT_STATUSES else "unknown",
            duration_ms=max(0, data.get("stop", 0) - data.get("start", 0)),
        )


@dataclass
class TestResultSummary:
    """Scenario counts per status and per feature."""
    __test__ = False

    scenarios: List[ScenarioResult] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def count(self, status: str) -> int:
        return sum(1 for scenario in self.scenarios if scenario.status == status)

    @property
    def total(self) -> int:
        return len(self.scenarios)

    @property
    def passed(self) -> int:
        return self.count("passed")

    @property
    def failed(self) -> int:
        return self.count("failed")

    @property
    def broken(self) -> int:
        return self.count("broken")

    @property
    def skipped(self) -> int:
        return self.count("skipped")

    @property
    def duration_ms(self) -> int:
        return sum(scenario.duration_ms for scenario in self.scenarios)

    @property
    def pass_rate(self) -> float:
        """Passed scenarios as a percentage of all scenarios (0 when empty)."""
        return self.passed / self.total * 100 if self.total else 0.0

    @property
    def failed_scenarios(self) -> List[str]:
        return [s.name for s in self.scenarios if s.status in ("failed", "broken")]

    def by_feature(self) -> Dict[str, Dict[str, int]]:
        """{feature: {status: count}}"""
        features: Dict[str, Counter] = {}
        for scenario in self.scenarios:
            features.setdefault(scenario.feature, Counter())[scenario.status] += 1
        return {feature: dict(counts) for feature, counts in sorted(features.items())}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            **{status: self.count(status) for status in RESULT_STATUSES},
            "pass_rate": f"{self.pass_rate:.2f}%",
            "duration_ms": self.duration_ms,
            "failed_scenarios": self.failed_scenarios,
            "features": self.by_feature(),
            "timestamp": self.timestamp,
        }


# ================================================================================
# Report Generation
# ================================================================================

class AllureReportProcessor:
    """
    Reads an allure-results directory and turns it into an HTML report.

    History from the previous report is carried into the results before
    generation so Allure can draw trend graphs.
    """

    def __init__(self, results_dir: Path, report_dir: Optional[Path] = None):
        self.results_dir = Path(results_dir)
        self.report_dir = Path(report_dir) if report_dir else self.results_dir.parent / "allure-report"

    def parse_results(self) -> List[ScenarioResult]:
        """Load ``*-result.json`` files; unreadable ones are skipped with a warning."""
        scenarios = []
        for result_file in sorted(self.results_dir.glob("*-result.json")):
            try:
                data = json.loads(result_file.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                logger.warning(f"Skipping unreadable result {result_file.name}: {e}")
                continue
            scenarios.append(ScenarioResult.from_result(data))
        return scenarios

    def generate_summary(self) -> TestResultSummary:
        return TestResultSummary(scenarios=self.parse_results())

    def copy_history(self) -> bool:
        """Copy ``<report>/history`` into the results. Returns True if copied."""
        source = self.report_dir / "history"
        if not source.is_dir():
            return False

        target = self.results_dir / "history"
        shutil.rmtree(target, ignore_errors=True)
        shutil.copytree(source, target)
        logger.debug(f"Carried report history into {target}")
        return True

    def generate_report(self) -> bool:
        """
        Run ``allure generate``.

        Returns:
            False when the Allure CLI is missing or exits non-zero
        """
        self.copy_history()
        cmd = ["allure", "generate", str(self.results_dir), "-o", str(self.report_dir), "--clean"]

        try:
            completed = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            logger.warning("Allure CLI not found. Please install Allure to generate reports.")
            return False

        if completed.returncode != 0:
            logger.error(f"allure generate exited with {completed.returncode}: {completed.stderr.strip()}")
            return False

        logger.info(f"Report generated at {self.report_dir}")
        return True

    def log_summary(self) -> TestResultSummary:
        summary = self.generate_summary()

        logger.info("=" * 60)
        logger.info(
            f"Scenarios: {summary.total} | passed {summary.passed} | failed {summary.failed} "
            f"| broken {summary.broken} | skipped {summary.skipped}"
        )
        logger.info(f"Pass rate: {summary.pass_rate:.2f}% in {summary.duration_ms / 1000:.2f}s")
        for feature, counts in summary.by_feature().items():
            logger.info(f"  {feature}: {counts}")
        for name in summary.failed_scenarios:
            logger.error(f"  Failed: {name}")
        logger.info("=" * 60)

        return summary


def generate_allure_report(results_dir: str, output_dir: Optional[str] = None) -> bool:
    """Generate the HTML report and log the run summary. Returns True on success."""
    processor = AllureReportProcessor(Path(results_dir), Path(output_dir) if output_dir else None)
    if not processor.generate_report():
        return False
    processor.log_summary()
    return True


__all__ = [
    "attach_json",
    "attach_text",
    "attach_png",
    "build_environment_properties",
    "write_environment_properties",
    "ScenarioResult",
    "TestResultSummary",
    "AllureReportProcessor",
    "generate_allure_report",
]
