"""Process-wide lookups populated by generated modules when they are imported."""

entity_types = {}
exports = {}


def register_entity_types(mapping):
    """Map entity logical names to their generated classes."""
    entity_types.update(mapping)


def entity_type(logical_name):
    return entity_types[logical_name]


def export(interface):
    """Class decorator registering the decorated class as *interface*'s implementation."""

    def _register(cls):
        exports[interface] = cls
        return cls

    return _register
