import logging

from streamable.settings import LOGGER_NAME, LOGGING_LEVEL, USE_GCP_LOGGING

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'

# pylint: disable=invalid-name
_logger = None


def get_logger():
    """
    The process-wide logger for the file server.

    Records go to Google Cloud Logging when SF_ENABLE_GCP_LOGGING is set,
    otherwise to stderr, at SF_LOGGING_LEVEL and above.
    """
    # pylint: disable=global-statement
    global _logger
    if _logger:
        return _logger

    # uvicorn --reload is chatty about every file it watches
    for lname in ('asyncio', 'watchfiles', 'watchfiles.main'):
        logging.getLogger(lname).setLevel(logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level=LOGGING_LEVEL)

    if USE_GCP_LOGGING:
        # pylint: disable=import-outside-toplevel,c-extension-no-member
        import google.cloud.logging

        # attaches the cloud handler to the root logger, which we propagate to
        google.cloud.logging.Client().setup_logging(log_level=LOGGING_LEVEL)
    elif not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        # don't print twice if the root logger is configured too
        logger.propagate = False

    _logger = logger
    return _logger
