from .models import (
    ActionModel,
    ActivityMember,
    ActivityModel,
    EntityModel,
    FilterDefinition,
    OptionSetModel,
    OptionValue,
)
from .registry import ModelRegistry

__all__ = [
    "ActionModel",
    "ActivityMember",
    "ActivityModel",
    "EntityModel",
    "FilterDefinition",
    "ModelRegistry",
    "OptionSetModel",
    "OptionValue",
]
