"""Formatting of the emitted module."""

import black

from xrmgen.api.gen_logging import get_logger

logger = get_logger(__name__)

_MODE = black.Mode(line_length=120)


def format_python_code(code: str) -> str:
    """Run the emitted module through Black; text Black rejects is written as rendered."""
    try:
        return black.format_str(code, mode=_MODE)
    except black.InvalidInput as e:
        logger.warning(f"  [FORMAT] Black could not parse the generated module, writing it unformatted: {e}")
        return code
