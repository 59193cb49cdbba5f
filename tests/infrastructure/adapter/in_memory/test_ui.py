"""
Tests for the in-memory Ui.
"""

import logging

from eipflow.infrastructure.adapter.in_memory.ui import InMemoryUi


class TestInMemoryUi:
    def test_records_messages(self):
        ui = InMemoryUi()

        ui.say("Allocating eip")
        ui.say("Allocated eip 47.100.0.1")

        assert ui.messages == ["Allocating eip", "Allocated eip 47.100.0.1"]

    def test_logs_messages(self, caplog):
        ui = InMemoryUi()

        with caplog.at_level(logging.INFO, logger="eipflow.infrastructure.adapter.in_memory.ui"):
            ui.say("Allocated eip 47.100.0.1")

        assert "Allocated eip 47.100.0.1" in caplog.text
