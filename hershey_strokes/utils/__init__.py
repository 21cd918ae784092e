"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - YAML loading and atomic writes (fs)
    - Unified logging (logging_config)

No module in utils/ may import from the decoder, font or config modules.

Convenience imports:
    from hershey_strokes.utils import fs
    from hershey_strokes.utils.logging_config import setup_logging, get_logger
"""

from . import fs
from . import logging_config

from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    'fs',
    'logging_config',
    'setup_logging',
    'get_logger',
    'push_context',
]
