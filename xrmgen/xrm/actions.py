"""Base types for generated action request/response contracts."""

from typing import Any, Dict


class AbstractActionRequest:
    """Reads action input parameters from the invoking execution context."""

    def __init__(self, ctx):
        self._ctx = ctx

    def value_of(self, name: str, default: Any = None) -> Any:
        return self._ctx.input_parameters.get(name, default)


class OutputProperty:
    """Read/write action output, tagged with its original parameter name."""

    def __init__(self, name: str, required: bool = False):
        self.name = name
        self.required = required
        self.attribute = name

    def __set_name__(self, owner, attribute):
        self.attribute = attribute

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.__dict__.get(self.attribute)

    def __set__(self, instance, value):
        instance.__dict__[self.attribute] = value


def output(name: str, required: bool = False) -> OutputProperty:
    return OutputProperty(name, required)


class ActionResponse:
    @classmethod
    def output_properties(cls) -> Dict[str, OutputProperty]:
        found = {}
        for klass in reversed(cls.__mro__):
            for attribute, value in vars(klass).items():
                if isinstance(value, OutputProperty):
                    found[attribute] = value
        return found

    def to_output_parameters(self) -> Dict[str, Any]:
        """
        Collect output values keyed by their original parameter names.

        Raises:
            ValueError: A required output has no value.
        """
        parameters = {}
        for attribute, prop in self.output_properties().items():
            value = getattr(self, attribute)
            if value is None and prop.required:
                raise ValueError(f"Required output '{prop.name}' of {type(self).__name__} is not set")
            parameters[prop.name] = value
        return parameters
