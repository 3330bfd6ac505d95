"""Errors raised while loading inputs, before any validation happens."""


class LoadError(ValueError):
    """A target, schema or config file could not be found, read or parsed."""
