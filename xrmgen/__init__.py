"""
xrmgen: filter-driven generator of typed data-access code for a schema-hosting platform.

A filter definition selects entities, option sets and actions; the decision
engine applies it to the platform's metadata; the emitter writes one Python
module with repositories, units of work and action contracts.
"""

__version__ = "1.0.0"
