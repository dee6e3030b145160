class LangEnsembleError(Exception):
    """
    Base exception class for all errors raised by langensemble.
    Catching this allows users to handle any library-specific error.
    """

    pass


class ConfigurationError(LangEnsembleError):
    """
    Raised when the ensemble is misconfigured or a method is called with invalid
    arguments.
    Example: threshold out of range, malformed expected language, missing engine.
    """

    pass


class UnknownEngineError(ConfigurationError):
    """
    Raised when a caller selects an engine that is not registered on the ensemble.

    Attributes:
        engine (str): The selector that was requested.
        available (list[str]): The engine ids that are registered.
    """

    def __init__(self, engine: str, available: list[str]) -> None:
        super().__init__(
            f"Unknown engine '{engine}'. Registered engines: {', '.join(available)}."
        )
        self.engine = engine
        self.available = available


class ConfigValidationError(ConfigurationError):
    """Raised when a configuration file cannot be parsed or fails validation."""

    pass
