"""
abicombine: merge Foundry artifact ABIs into a single CombinedABI.json.
"""

__version__ = "0.1.0"

from .core import Combiner, CombineResult, extract_abis, run, write_combined
from .errors import CombineError, ConfigError, ParseError, ReadError, WriteError

__all__ = [
    "Combiner",
    "CombineResult",
    "extract_abis",
    "run",
    "write_combined",
    "CombineError",
    "ConfigError",
    "ParseError",
    "ReadError",
    "WriteError",
]
