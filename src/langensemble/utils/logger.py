import logging

LOGGER_NAME = "langensemble"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Returns the library logger.

    A NullHandler is attached once so that applications which never configure
    logging do not see "No handlers could be found" noise. Applications opt in by
    configuring the 'langensemble' logger (or the root logger) themselves.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger
