"""Streaming top-K selection.

A bounded, always-sorted buffer of the K largest values seen in a
stream, plus the YAML config layer and small helpers used to drive it.
"""

from .errors import InvalidArgument, TopKError, Underfilled
from .selector import TopKSelector, create
from .config import build_selector, load_config, merge_defaults
