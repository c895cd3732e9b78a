
import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify_success(self, message: str) -> None:
        ...

    def notify_failure(self, message: str) -> None:
        ...


class LoggingNotifier:
    def __init__(self, name: str = "collabry.board.notifications"):
        self.logger = logging.getLogger(name)

    def notify_success(self, message: str) -> None:
        self.logger.info(message)

    def notify_failure(self, message: str) -> None:
        self.logger.warning(message)
