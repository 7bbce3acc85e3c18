"""
Validation for filter definitions.

Structural checks run while the parser walks each declaration; the
cross-declaration checks here run once the whole file has been read.
"""

from xrmgen.validation.filter_validators import (
    require_attribute,
    verify_actions,
    verify_entities,
    verify_global_optionsets,
)

__all__ = [
    "require_attribute",
    "verify_actions",
    "verify_entities",
    "verify_global_optionsets",
]
