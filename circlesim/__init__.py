"""A 2D circle physics sandbox on a generational entity-component store, with a pygame editor."""

__version__ = "0.1.0"