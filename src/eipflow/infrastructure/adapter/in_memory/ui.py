import logging

from eipflow.application.port import Ui

logger = logging.getLogger(__name__)


class InMemoryUi(Ui):
    """Ui that records every message and forwards it to the log."""

    def __init__(self):
        self.messages: list[str] = []

    def say(self, message: str) -> None:
        self.messages.append(message)
        logger.info(message)
