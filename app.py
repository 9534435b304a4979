"""
app.py
──────
Machine Health Engine: command-line entry point.

Commands:
  predict   score one ad-hoc reading given as a JSON object (argument or stdin)
  summary   enrich and summarize a simulated fleet of persisted readings

Output is JSON on stdout; logs go to stderr.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Optional

import typer

from config.settings import settings
from src.analytics.fleet import compute_summary_stats
from src.analytics.predictor import predict_realtime
from src.data.simulator import generate_history
from src.data.validation import ValidationError
from src.logging_config import configure_logging

logger = logging.getLogger("app")

app = typer.Typer(
    help="Health scoring and anomaly detection for machine sensor readings.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _fail(error: str, **extra) -> None:
    typer.echo(json.dumps({"success": False, "error": error, **extra}))
    raise typer.Exit(code=2)


@app.callback()
def main() -> None:
    """Entry point for the CLI."""
    configure_logging()


@app.command("predict")
def predict_command(
    payload: Optional[str] = typer.Argument(
        None,
        help="JSON object with the reading (read from stdin when omitted).",
    ),
) -> None:
    """Score a single live reading."""
    raw = payload if payload is not None else sys.stdin.read()
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as exc:
        _fail(f"Invalid JSON: {exc.msg}")
    if not isinstance(body, dict):
        _fail("Expected a JSON object")

    try:
        prediction = predict_realtime(body)
    except ValidationError as exc:
        _fail(str(exc), fields=exc.fields)

    typer.echo(json.dumps({"success": True, "prediction": prediction.to_json_dict()}, indent=2))


@app.command("summary")
def summary_command(
    size: int = typer.Option(settings.SIMULATION_SIZE, "--size", "-n", min=0, help="Number of simulated records."),
    seed: int = typer.Option(settings.SIMULATION_SEED, "--seed", help="Random seed for the simulation."),
) -> None:
    """Summarize a simulated fleet."""
    records = generate_history(seed=seed, size=size)
    logger.info("simulated fleet generated", extra={"record_count": len(records)})
    summary = compute_summary_stats(records)
    typer.echo(json.dumps({"success": True, "summary": summary.to_json_dict()}, indent=2))


if __name__ == "__main__":
    app()
