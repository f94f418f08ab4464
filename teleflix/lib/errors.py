class ConfigurationError(ValueError):
    """The resolved configuration cannot produce a valid manifest set."""

class SerializationError(ValueError):
    """An API object could not be rendered to YAML."""
