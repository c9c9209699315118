"""
Evaluation results and reporting.

Track per-case precision/recall, suite-level aggregates and model latency.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Optional

from models import LintWarning

__all__ = [
    "CaseResult",
    "EvalReport",
    "format_report",
]

# ══════════════════════════════════════════════════════════════════════════════
# Result Classes
# ══════════════════════════════════════════════════════════════════════════════


@dataclass
class CaseResult:
    """Outcome of evaluating a single fixture."""

    name: str
    precision: float = 0.0
    recall: float = 0.0
    matches: int = 0
    expected_count: int = 0
    extracted: list[LintWarning] = field(default_factory=list)
    latency_ms: float = 0.0
    cached: bool = False
    error: Optional[str] = None
    passed: bool = False

    @property
    def errored(self) -> bool:
        return self.error is not None

    @classmethod
    def failed(cls, name: str, exc: BaseException) -> "CaseResult":
        """Result for a case aborted by a hard failure."""
        return cls(name=name, error=f"{type(exc).__name__}: {exc}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "precision": round(self.precision, 4),
            "recall": round(self.recall, 4),
            "matches": self.matches,
            "expected": self.expected_count,
            "extracted": [w.model_dump() for w in self.extracted],
            "latency_ms": round(self.latency_ms, 1),
            "cached": self.cached,
            "error": self.error,
        }


@dataclass
class EvalReport:
    """Suite-level view over all case results."""

    model: str
    results: list[CaseResult] = field(default_factory=list)
    min_precision: float = 1.0
    min_recall: float = 1.0
    start_time: float = field(default_factory=time.time)
    end_time: Optional[float] = None

    @property
    def scored(self) -> list[CaseResult]:
        return [r for r in self.results if not r.errored]

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def errored_count(self) -> int:
        return sum(1 for r in self.results if r.errored)

    @property
    def failed_count(self) -> int:
        return len(self.results) - self.passed_count - self.errored_count

    @property
    def ok(self) -> bool:
        return bool(self.results) and self.passed_count == len(self.results)

    @property
    def mean_precision(self) -> float:
        if not self.scored:
            return 0.0
        return sum(r.precision for r in self.scored) / len(self.scored)

    @property
    def mean_recall(self) -> float:
        if not self.scored:
            return 0.0
        return sum(r.recall for r in self.scored) / len(self.scored)

    @property
    def micro_precision(self) -> float:
        extracted = sum(len(r.extracted) for r in self.scored)
        if extracted == 0:
            return 1.0
        return sum(r.matches for r in self.scored) / extracted

    @property
    def micro_recall(self) -> float:
        expected = sum(r.expected_count for r in self.scored)
        if expected == 0:
            return 1.0
        return sum(r.matches for r in self.scored) / expected

    @property
    def avg_latency_ms(self) -> float:
        if not self.scored:
            return 0.0
        return sum(r.latency_ms for r in self.scored) / len(self.scored)

    @property
    def duration_seconds(self) -> float:
        return (self.end_time or time.time()) - self.start_time

    def finish(self) -> None:
        self.end_time = time.time()

    def summary(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "total": len(self.results),
            "passed": self.passed_count,
            "failed": self.failed_count,
            "errored": self.errored_count,
            "mean_precision": round(self.mean_precision, 4),
            "mean_recall": round(self.mean_recall, 4),
            "micro_precision": round(self.micro_precision, 4),
            "micro_recall": round(self.micro_recall, 4),
            "avg_latency_ms": round(self.avg_latency_ms, 0),
            "duration_seconds": round(self.duration_seconds, 1),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "summary": self.summary(),
            "thresholds": {
                "min_precision": self.min_precision,
                "min_recall": self.min_recall,
            },
            "cases": [r.to_dict() for r in self.results],
        }


# ══════════════════════════════════════════════════════════════════════════════
# Formatting
# ══════════════════════════════════════════════════════════════════════════════


def format_report(report: EvalReport) -> str:
    """Generate human-readable evaluation report."""
    lines = [
        "# Linter Evaluation",
        "",
        "## Summary",
        f"- Model: {report.model}",
        f"- Cases: {len(report.results)}",
        f"- Passed: {report.passed_count}",
        f"- Failed: {report.failed_count}",
        f"- Errored: {report.errored_count}",
        f"- Mean Precision: {report.mean_precision:.2f}",
        f"- Mean Recall: {report.mean_recall:.2f}",
        f"- Avg Latency: {report.avg_latency_ms:.0f}ms",
        f"- Duration: {report.duration_seconds:.1f}s",
        "",
        "## Cases",
    ]

    for result in report.results:
        if result.errored:
            lines.append(f"- ERROR {result.name}: {result.error}")
            continue
        status = "PASS" if result.passed else "FAIL"
        lines.append(
            f"- {status} {result.name}: Precision = {result.precision:.2f}, "
            f"Recall = {result.recall:.2f} "
            f"({result.matches}/{result.expected_count} matched, "
            f"{len(result.extracted)} extracted)"
        )

    failing = [r for r in report.results if not r.passed and not r.errored]
    if failing:
        lines.append("")
        lines.append("## Extracted Warnings (failing cases)")
        for result in failing:
            lines.append(f"### {result.name}")
            if not result.extracted:
                lines.append("- (none)")
            for w in result.extracted:
                lines.append(f"- {w.path} | {w.key} | {w.message}")

    return "\n".join(lines)
