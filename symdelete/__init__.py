"""symdelete - Symmetric Delete spelling correction.

Index a dictionary once, then find corrections within a bounded edit
distance without comparing the input against every dictionary word.
"""

from symdelete.core import Config, Mode, Suggestion, SymSpell, load_config, tokenize
from symdelete.processing import run_pipeline
from symdelete.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "Mode",
    "Suggestion",
    "SymSpell",
    "load_config",
    "run_pipeline",
    "setup_logger",
    "tokenize",
]
