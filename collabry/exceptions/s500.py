import inspect
import logging

from .base import BaseCustomHTTPException

logger = logging.getLogger(__name__)


class SendFeedbackToAdminException(BaseCustomHTTPException):
    """Raised where the database handed back nothing after a successful write."""

    def __init__(self):
        location = "unknown location"
        current_frame = inspect.currentframe()
        outer_frame = current_frame.f_back if current_frame else None
        if outer_frame:
            location = f"{outer_frame.f_code.co_name} " \
                       f"({outer_frame.f_code.co_filename}:{outer_frame.f_lineno})"
        logger.error("unexpected state in %s", location, stack_info=True)
        super().__init__(500, "Unexpected error occurred. "
                              "Please contact the administrator for assistance.")
