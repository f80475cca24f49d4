class ConfigurationError(ValueError):
    """Invalid category table. Raised at construction, never while scoring."""
