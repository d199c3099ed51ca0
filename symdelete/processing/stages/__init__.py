"""Pipeline stages for symdelete."""

from symdelete.processing.stages.data_models import (
    DictionaryData,
    LookupData,
    PipelineResult,
    StageResult,
)
from symdelete.processing.stages.dictionary_building import build_dictionary
from symdelete.processing.stages.lookup import collect_input_words, lookup_words
from symdelete.processing.stages.output_generation import (
    format_json,
    format_text,
    write_results,
)

__all__ = [
    "DictionaryData",
    "LookupData",
    "PipelineResult",
    "StageResult",
    "build_dictionary",
    "collect_input_words",
    "format_json",
    "format_text",
    "lookup_words",
    "write_results",
]
