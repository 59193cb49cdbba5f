"""
Tests for factory functions.

This module tests the create factory function.
"""

from unittest.mock import Mock

import pytest

from eipflow.application.adapter import StepConfigEip
from eipflow.application.port import EcsClient, Ui
from eipflow.client import Client
from eipflow.factory import create
from eipflow.infrastructure.adapter.in_memory.step_runner import InMemoryStepRunner
from eipflow.infrastructure.adapter.in_memory.ui import InMemoryUi


class TestCreate:
    """Test cases for create factory function."""

    def setup_method(self):
        self.ecs_client = Mock(spec=EcsClient)

    def test_create_without_config(self):
        """Test creating a client with no steps."""
        client = create(self.ecs_client)

        assert isinstance(client, Client)
        assert isinstance(client._runner, InMemoryStepRunner)
        assert isinstance(client._ui, InMemoryUi)
        assert client.steps == []

    def test_create_with_ui(self):
        ui = Mock(spec=Ui)

        client = create(self.ecs_client, ui=ui)

        assert client._ui is ui

    def test_create_with_config(self):
        """Test the configuration pre-registers the eip step."""
        client = create(
            self.ecs_client,
            config={"region_id": "cn-hangzhou", "associate_public_ip_address": True},
        )

        assert len(client.steps) == 1
        assert isinstance(client.steps[0], StepConfigEip)
        assert client.steps[0].config.region_id == "cn-hangzhou"

    def test_create_with_invalid_config(self):
        with pytest.raises(ValueError, match="region_id is required"):
            create(self.ecs_client, config={"associate_public_ip_address": True})
