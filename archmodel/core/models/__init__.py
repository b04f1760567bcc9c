"""
Domain models — the architecture model and its deployment instances.

All models are re-exported here for convenient access:

    from archmodel.core.models import Model, Location, ContainerInstance
"""

from archmodel.core.models.container import Container
from archmodel.core.models.container_instance import ContainerInstance
from archmodel.core.models.deployment_node import DeploymentNode
from archmodel.core.models.element import Element, Location
from archmodel.core.models.errors import InvalidArgumentError, ModelError
from archmodel.core.models.health_check import HttpHealthCheck
from archmodel.core.models.instance import ElementInstance
from archmodel.core.models.model import Model
from archmodel.core.models.relationship import InteractionStyle, Relationship
from archmodel.core.models.software_system import SoftwareSystem
from archmodel.core.models.software_system_instance import SoftwareSystemInstance
from archmodel.core.models.tags import Tags, TagSet

__all__ = [
    # container.py
    "Container",
    # container_instance.py
    "ContainerInstance",
    # deployment_node.py
    "DeploymentNode",
    # element.py
    "Element",
    # instance.py
    "ElementInstance",
    # health_check.py
    "HttpHealthCheck",
    # relationship.py
    "InteractionStyle",
    # errors.py
    "InvalidArgumentError",
    "Location",
    # model.py
    "Model",
    "ModelError",
    "Relationship",
    # software_system.py
    "SoftwareSystem",
    # software_system_instance.py
    "SoftwareSystemInstance",
    # tags.py
    "TagSet",
    "Tags",
]
