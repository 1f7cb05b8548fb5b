from typing import Optional, Sequence


class ConfigurationError(ValueError):
    """
    Exception raised when a configuration object is missing required fields or is malformed.

    Configuration errors are detected by a single validation pass at the boundary, before
    any scan begins, so a configuration is either fully accepted or rejected outright.

    Attributes:
        reason (str): The problem itself, without the "Invalid config" prefix.
        source (Optional[str]): Where the configuration came from (usually a file path), if known.

    Example:
        >>> error = ConfigurationError("missing version")
        >>> str(error)
        'Invalid config: missing version'
        >>> str(ConfigurationError("missing version", source="ftree.yaml"))
        'Invalid config (ftree.yaml): missing version'
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        """
        Initialize the exception.

        Args:
            message (str): Description of what is wrong with the configuration.
            source (str, optional): Origin of the configuration, included in the message.
        """
        self.reason = message
        self.source = source
        prefix = f"Invalid config ({source})" if source else "Invalid config"
        super().__init__(f"{prefix}: {message}")


class PresetNotFoundError(LookupError):
    """
    Exception raised when a requested preset or alias name does not exist in the configuration.

    This is reported separately from configuration errors so that callers can offer the
    available names as suggestions.

    Attributes:
        name (str): The preset name that was requested.
        available (list[str]): Preset and alias names defined by the configuration.

    Example:
        >>> error = PresetNotFoundError("docz", ["docs", "source"])
        >>> str(error)
        'Preset "docz" not found. Available: docs, source'
        >>> error.available
        ['docs', 'source']
    """

    def __init__(self, name: str, available: Sequence[str] = ()) -> None:
        self.name = name
        self.available = list(available)
        message = f'Preset "{name}" not found'
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)
