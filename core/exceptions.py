import logging
import traceback


class WikiError(Exception):
    """Base class for wiki errors"""


class PageNotFound(WikiError):
    """No page matches the requested name or id"""


class PersistenceError(WikiError):
    """The store could not complete a write"""


def handle_exception(
    e: Exception,
    message: str = "An error occurred",
    source: str = "app",
):
    """
    Handle exception with logging
    Args:
        e: The exception
        message: Custom error message
        source: Source of the error (store/web)
    """
    # Get full traceback
    error_traceback = "".join(traceback.format_tb(e.__traceback__))

    # Get original error location (for brief display)
    tb = traceback.extract_tb(e.__traceback__)
    if tb:
        error_location = f'File "{tb[-1].filename}", line {tb[-1].lineno}, in {tb[-1].name}'
    else:
        error_location = "unknown"

    # Combine error message
    error_message = (
        f"{message}: {str(e)}\n"
        f"Location: {error_location}\n"
        f"Full traceback:\n{error_traceback}"
    )

    extra = {"source": source}
    logging.error(error_message, extra=extra)
