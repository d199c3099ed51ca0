"""Stage 3: Write lookup results."""

import json
import sys
from typing import TextIO

from loguru import logger

from symdelete.core.types import Suggestion
from symdelete.processing.stages.data_models import LookupData
from symdelete.utils import write_file_safely


def format_suggestion(suggestion: Suggestion) -> str:
    """Render a suggestion as ``term (distance, count)``."""
    return f"{suggestion.term} ({suggestion.distance}, {suggestion.count})"


def format_text(lookups: LookupData) -> str:
    """One line per word: ``word -> suggestion, suggestion``."""
    lines = []
    for word, suggestions in lookups.results.items():
        rendered = ", ".join(format_suggestion(s) for s in suggestions) or "?"
        lines.append(f"{word} -> {rendered}")
    return "\n".join(lines) + "\n" if lines else ""


def format_json(lookups: LookupData) -> str:
    """A JSON list with one object per word."""
    payload = [
        {
            "word": word,
            "suggestions": [
                {"term": s.term, "distance": s.distance, "count": s.count} for s in suggestions
            ],
        }
        for word, suggestions in lookups.results.items()
    ]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def write_results(
    lookups: LookupData,
    output: str | None,
    output_format: str = "text",
    verbose: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Write results to ``output``, or to ``stream`` (stdout) when no path is given."""
    content = format_json(lookups) if output_format == "json" else format_text(lookups)

    if output:
        write_file_safely(output, lambda f: f.write(content), "writing results")
        if verbose:
            logger.info(f"Stage 3: Wrote {len(lookups.results)} results to {output}")
    else:
        (stream or sys.stdout).write(content)
