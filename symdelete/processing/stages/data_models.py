"""Data models for passing information between pipeline stages."""

from pydantic import BaseModel, Field

from symdelete.core.engine import SymSpell
from symdelete.core.types import Suggestion


class StageResult(BaseModel):
    """Base class for stage results with timing."""

    elapsed_time: float = Field(0.0, ge=0)


class DictionaryData(StageResult):
    """Output from dictionary building stage."""

    engine: SymSpell
    occurrences: int = Field(0, ge=0)
    word_count: int = Field(0, ge=0)
    sources: list[str] = Field(default_factory=list)

    model_config = {
        "arbitrary_types_allowed": True,  # For SymSpell
    }


class LookupData(StageResult):
    """Output from lookup stage: suggestions per input word, in input order."""

    results: dict[str, list[Suggestion]] = Field(default_factory=dict)

    @property
    def corrected_count(self) -> int:
        """Number of words whose best suggestion differs from the word itself."""
        return sum(
            1
            for word, suggestions in self.results.items()
            if suggestions and suggestions[0].term != word
        )

    @property
    def unknown_count(self) -> int:
        """Number of words without any suggestion."""
        return sum(1 for suggestions in self.results.values() if not suggestions)


class PipelineResult(StageResult):
    """Everything produced by a pipeline run."""

    dictionary: DictionaryData
    lookups: LookupData
