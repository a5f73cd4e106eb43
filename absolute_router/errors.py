"""Route configuration errors."""


class ConfigurationError(Exception):
    """A route was defined with an invalid constraint."""

    def __init__(self, message: str, parameter_name: str, url_pattern: str) -> None:
        super().__init__(message)
        self.parameter_name = parameter_name
        self.url_pattern = url_pattern
