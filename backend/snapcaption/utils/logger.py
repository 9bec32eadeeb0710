import logging


def get_logger(name: str) -> logging.Logger:
    """Return a module logger. Handlers and format are set up once in create_app()."""
    return logging.getLogger(name)
