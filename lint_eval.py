#!/usr/bin/env python3
"""
Config Lint Eval

Grades a locally served LLM acting as a YAML configuration-tree linter.
For every JSON fixture the harness builds the linter prompt, asks the
model, extracts the warnings it reports and scores them against the
hand-authored expectations.

Features:
- Fuzzy matching (path overlap, exact key, message cosine similarity)
- Precision/recall per case and across the suite
- Per-case failure isolation: a broken fixture or model call aborts that case only
- Optional response cache for replaying model output
- Offline scoring of saved responses
"""

import asyncio
import dataclasses
import json
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional

import httpx
import typer

from api import DEFAULT_MODEL, DEFAULT_TIMEOUT, DEFAULT_URL, generate
from core import (
    MATCH_THRESHOLD,
    CaseResult,
    EvalReport,
    WarningScorer,
    extract_warnings,
    format_report,
)
from models import EvalCase, ReportFormat
from utils import (
    CACHE_TTL_SECONDS,
    build_prompt,
    discover_test_cases,
    get_cache_key,
    get_cached_result,
    load_test_case,
    set_cached_result,
)

logger = logging.getLogger("lint_eval")

ROOT_DIR = Path(__file__).resolve().parent

# ============================================================================
# Configuration
# ============================================================================

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "model": {
        "name": DEFAULT_MODEL,
        "url": DEFAULT_URL,
        "temperature": 0,
        "timeout_seconds": DEFAULT_TIMEOUT,
    },
    "scoring": {
        "path_weight": 0.4,
        "key_weight": 0.4,
        "message_weight": 0.2,
        "match_threshold": MATCH_THRESHOLD,
    },
    # The original harness only accepts a perfect run
    "thresholds": {"min_precision": 1.0, "min_recall": 1.0},
    "cache": {"enabled": False, "ttl_seconds": CACHE_TTL_SECONDS},
    "runner": {"test_cases_dir": "test_cases", "concurrency": 1},
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    """Load configuration from config.json, merged section by section over defaults."""
    config_path = config_path or ROOT_DIR / "config.json"
    config = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}

    try:
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                overrides = json.load(f)
            if not isinstance(overrides, dict):
                raise ValueError("top-level value must be an object")
            for section, values in overrides.items():
                if isinstance(values, dict):
                    config.setdefault(section, {}).update(values)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not load {config_path.name}: {e}")

    return config


CONFIG = load_config()


@dataclass
class RunSettings:
    """Everything a suite run needs besides the fixtures themselves."""

    model: str = DEFAULT_MODEL
    url: str = DEFAULT_URL
    temperature: float = 0
    timeout: float = DEFAULT_TIMEOUT
    min_precision: float = 1.0
    min_recall: float = 1.0
    use_cache: bool = False
    cache_ttl: float = CACHE_TTL_SECONDS
    concurrency: int = 1

    @classmethod
    def from_config(cls, config: Dict[str, Dict[str, Any]]) -> "RunSettings":
        return cls(
            model=config["model"]["name"],
            url=config["model"]["url"],
            temperature=config["model"]["temperature"],
            timeout=config["model"]["timeout_seconds"],
            min_precision=config["thresholds"]["min_precision"],
            min_recall=config["thresholds"]["min_recall"],
            use_cache=config["cache"]["enabled"],
            cache_ttl=config["cache"]["ttl_seconds"],
            concurrency=config["runner"]["concurrency"],
        )


# ============================================================================
# Evaluation
# ============================================================================


def score_response(
    case: EvalCase,
    text: str,
    scorer: Optional[WarningScorer] = None,
    min_precision: float = 1.0,
    min_recall: float = 1.0,
) -> CaseResult:
    """Extract warnings from a model response and grade them against the case."""
    scorer = scorer or WarningScorer()
    extracted = extract_warnings(text)
    match = scorer.match(case.expected_warnings, extracted)

    return CaseResult(
        name=case.name,
        precision=match.precision,
        recall=match.recall,
        matches=match.matches,
        expected_count=len(case.expected_warnings),
        extracted=extracted,
        passed=match.precision >= min_precision and match.recall >= min_recall,
    )


async def _fetch_response(prompt: str, settings: RunSettings) -> tuple[str, bool]:
    """Model response for ``prompt`` and whether it came from the cache."""
    cache_key = get_cache_key(settings.model, prompt, settings.temperature)
    if settings.use_cache:
        cached = get_cached_result(cache_key, settings.cache_ttl)
        if cached is not None:
            return cached, True

    text = await generate(
        prompt,
        model=settings.model,
        url=settings.url,
        temperature=settings.temperature,
        timeout=settings.timeout,
    )

    if settings.use_cache:
        set_cached_result(cache_key, text)
    return text, False


async def evaluate_case(
    case: EvalCase,
    settings: RunSettings,
    scorer: Optional[WarningScorer] = None,
) -> CaseResult:
    """Run one fixture through the model and score the response.

    A failed model call aborts only this case; the error is recorded on the
    returned result.
    """
    prompt = build_prompt(case.input_tree)

    start = time.perf_counter()
    try:
        text, cached = await _fetch_response(prompt, settings)
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Case {case.name} aborted: {type(e).__name__}: {e}")
        return CaseResult.failed(case.name, e)
    latency_ms = (time.perf_counter() - start) * 1000

    result = score_response(
        case, text, scorer, settings.min_precision, settings.min_recall
    )
    result.latency_ms = latency_ms
    result.cached = cached

    logger.info(
        f"{case.name}: Precision = {result.precision:.2f}, Recall = {result.recall:.2f}"
    )
    if not result.passed:
        logger.warning(f"Failed test case {case.name}: extracted = {result.extracted}")
    return result


async def run_suite(
    paths: List[Path],
    settings: RunSettings,
    scorer: Optional[WarningScorer] = None,
) -> EvalReport:
    """Evaluate every fixture in ``paths``; results keep the order of ``paths``."""
    report = EvalReport(
        model=settings.model,
        min_precision=settings.min_precision,
        min_recall=settings.min_recall,
    )
    semaphore = asyncio.Semaphore(max(1, settings.concurrency))

    async def _run(path: Path) -> CaseResult:
        try:
            case = load_test_case(path)
        except (OSError, ValueError) as e:
            logger.error(f"Could not load {path.name}: {type(e).__name__}: {e}")
            return CaseResult.failed(path.name, e)

        async with semaphore:
            return await evaluate_case(case, settings, scorer)

    report.results = list(await asyncio.gather(*(_run(p) for p in paths)))
    report.finish()
    return report


# ============================================================================
# Command Line
# ============================================================================

app = typer.Typer(
    name="lint-eval",
    add_completion=False,
    no_args_is_help=True,
    help="Score an LLM configuration linter against expected-warning fixtures.",
)


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


@app.command("run")
def run(
    cases_dir: Annotated[
        Path,
        typer.Argument(
            help="Directory containing JSON test case fixtures.",
            envvar="LINT_EVAL_CASES_DIR",
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = ROOT_DIR / CONFIG["runner"]["test_cases_dir"],
    model: Annotated[
        str,
        typer.Option("--model", "-m", help="Model name.", envvar="OLLAMA_MODEL"),
    ] = CONFIG["model"]["name"],
    url: Annotated[
        str,
        typer.Option("--url", help="Generate endpoint URL.", envvar="OLLAMA_URL"),
    ] = CONFIG["model"]["url"],
    temperature: Annotated[
        float, typer.Option("--temperature", help="Sampling temperature.")
    ] = CONFIG["model"]["temperature"],
    timeout: Annotated[
        float, typer.Option("--timeout", help="Request timeout in seconds.")
    ] = CONFIG["model"]["timeout_seconds"],
    concurrency: Annotated[
        int,
        typer.Option("--concurrency", "-j", min=1, help="Cases evaluated at once."),
    ] = CONFIG["runner"]["concurrency"],
    case: Annotated[
        str, typer.Option("--case", "-k", help="Glob selecting fixture files.")
    ] = "*.json",
    use_cache: Annotated[
        bool,
        typer.Option("--cache/--no-cache", help="Replay cached model responses."),
    ] = CONFIG["cache"]["enabled"],
    report_format: Annotated[
        ReportFormat,
        typer.Option("--format", "-f", case_sensitive=False, help="Report format."),
    ] = ReportFormat.MARKDOWN,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the report to this file instead of stdout.",
            file_okay=True,
            dir_okay=False,
            writable=True,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log per-case progress.")
    ] = False,
) -> None:
    """Run every fixture through the model and report precision/recall."""
    _configure_logging(verbose)

    settings = dataclasses.replace(
        RunSettings.from_config(CONFIG),
        model=model,
        url=url,
        temperature=temperature,
        timeout=timeout,
        concurrency=concurrency,
        use_cache=use_cache,
    )

    try:
        paths = discover_test_cases(cases_dir, case)
    except FileNotFoundError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)
    if not paths:
        typer.secho("No test cases found to evaluate.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    scorer = WarningScorer.from_config(CONFIG["scoring"])
    report = asyncio.run(run_suite(paths, settings, scorer))

    if report_format == ReportFormat.JSON:
        rendered = json.dumps(report.to_dict(), indent=2)
    else:
        rendered = format_report(report)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered + "\n", encoding="utf-8")
        typer.secho(f"Report written to {output}", err=True)
    else:
        typer.echo(rendered)

    typer.secho(
        f"{report.passed_count}/{len(report.results)} passed "
        f"({report.failed_count} failed, {report.errored_count} errored)",
        fg=typer.colors.GREEN if report.ok else typer.colors.RED,
        err=True,
    )
    raise typer.Exit(code=0 if report.ok else 1)


@app.command("score")
def score(
    fixture: Annotated[
        Path,
        typer.Argument(
            help="JSON test case fixture.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    response: Annotated[
        str, typer.Argument(help="Saved model response file, or '-' for stdin.")
    ] = "-",
) -> None:
    """Score a saved model response against a fixture without calling the model."""
    _configure_logging(False)

    try:
        case = load_test_case(fixture)
        if response == "-":
            text = sys.stdin.read()
        else:
            text = Path(response).read_text(encoding="utf-8")
    except (OSError, ValueError) as e:
        typer.secho(f"{type(e).__name__}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    thresholds = CONFIG["thresholds"]
    result = score_response(
        case,
        text,
        WarningScorer.from_config(CONFIG["scoring"]),
        thresholds["min_precision"],
        thresholds["min_recall"],
    )
    typer.echo(json.dumps(result.to_dict(), indent=2))
    raise typer.Exit(code=0 if result.passed else 1)


def main() -> None:
    """Entry point for executing the Typer application."""
    app()


if __name__ == "__main__":
    main()
