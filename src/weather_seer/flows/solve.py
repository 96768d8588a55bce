"""
Prefect flow for turning an observation log into pattern candidates.

Reads an ``ObservationLog`` JSON file, feeds each recorded day through the
evidence populator into an in-memory accumulator and reports, per day, the
patterns still possible or why the evidence was rejected.

Run locally:
    python -m weather_seer.flows.solve observations.json
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_seer.accumulator import MemoryGuessData
from weather_seer.analysis import populate_guess_data
from weather_seer.oracle import get_oracle
from weather_seer.reference.patterns import pattern_name
from weather_seer.schemas import ObservationLog, is_day_non_empty


@task(name="load-observations")
def load_observations(path: Path) -> ObservationLog:
    """Read and validate an observation log file."""
    return ObservationLog.model_validate_json(path.read_text())


@flow(name="solve-observations", log_prints=True)
def solve_observations(path: Path) -> dict[str, Any]:
    """
    Populate an accumulator from every non-empty day in ``path``.

    Returns a summary with one entry per processed day.
    """
    log = load_observations(path)
    oracle = get_oracle()
    data = MemoryGuessData()

    results: list[dict[str, Any]] = []
    skipped = 0
    for day in log.days:
        if not is_day_non_empty(day):
            skipped += 1
            continue

        error = populate_guess_data(oracle, log.hemisphere, data, day)
        patterns = sorted(data.patterns_for(day.calendar_date))
        names = [pattern_name(p) for p in patterns]
        label = day.calendar_date.isoformat()

        if error is not None:
            print(f"{label}: {error}")
        else:
            print(f"{label}: {len(names)} possible ({', '.join(names)})")

        results.append(
            {
                "date": label,
                "day_type": str(day.day_type),
                "patterns": names,
                "error": str(error.kind) if error else None,
                "error_hour": error.hour if error else None,
                "error_minute": error.minute if error else None,
            }
        )

    errors = sum(1 for r in results if r["error"])
    pinned = sum(1 for r in results if len(r["patterns"]) == 1 and not r["error"])
    print(f"{len(results)} days processed, {pinned} pinned, {errors} with errors, {skipped} empty")

    return {
        "hemisphere": str(log.hemisphere),
        "days": len(results),
        "pinned": pinned,
        "errors": errors,
        "skipped": skipped,
        "results": results,
    }


if __name__ == "__main__":
    summary = solve_observations(Path(sys.argv[1]))
    print(f"Flow complete: {summary['days']} days")
