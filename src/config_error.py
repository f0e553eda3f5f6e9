"""Exception raised for invalid configuration."""


class ConfigError(ValueError):
    """Configuration file or value could not be used."""
