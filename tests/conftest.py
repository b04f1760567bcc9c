"""
Shared test fixtures — a small model with one system, one container
and one deployment node.
"""

import pytest

from archmodel.core.models import (
    Container,
    DeploymentNode,
    Location,
    Model,
    SoftwareSystem,
)


@pytest.fixture
def model() -> Model:
    return Model()


@pytest.fixture
def software_system(model: Model) -> SoftwareSystem:
    return model.add_software_system(Location.EXTERNAL, "System", "Description")


@pytest.fixture
def database(software_system: SoftwareSystem) -> Container:
    return software_system.add_container("Database Schema", "Stores data", "MySQL")


@pytest.fixture
def deployment_node(model: Model) -> DeploymentNode:
    return model.add_deployment_node("Deployment Node", "Description", "Technology")
