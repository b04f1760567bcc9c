"""
Tests for software system instances.
"""

import pytest

from archmodel.core.models import InvalidArgumentError, SoftwareSystemInstance


class TestSoftwareSystemInstance:
    """Placing a software system on a deployment node."""

    def test_construction(self, software_system, deployment_node):
        instance = deployment_node.add(software_system)

        assert isinstance(instance, SoftwareSystemInstance)
        assert instance.software_system is software_system
        assert instance.software_system_id == software_system.id
        assert instance.instance_id == 1
        assert instance.name is None

    def test_canonical_name(self, software_system, deployment_node):
        """System canonical name plus the instance number."""
        deployment_node.add(software_system)
        second = deployment_node.add(software_system)
        assert second.canonical_name == "/System[2]"

    def test_parent_is_none(self, software_system, deployment_node):
        """Software systems are top-level, so their instances have no parent."""
        assert deployment_node.add(software_system).parent is None

    def test_tags(self, software_system, deployment_node):
        software_system.add_tags("Legacy")
        instance = deployment_node.add(software_system)
        instance.add_tags("Blue")
        assert instance.tags == "Element,Software System,Legacy,Software System Instance,Blue"

    def test_required_tags_survive(self, software_system, deployment_node):
        """Required tags can't be removed."""
        instance = deployment_node.add(software_system)
        for tag in ("Element", "Software System", "Software System Instance"):
            assert instance.remove_tag(tag) is False
            assert instance.has_tag(tag)

    def test_setting_name_is_ignored(self, software_system, deployment_node):
        instance = deployment_node.add(software_system)
        instance.name = "foo"
        assert instance.name is None

    def test_reference_can_be_cleared(self, software_system, deployment_node):
        """The id outlives the reference and drives the canonical name."""
        instance = deployment_node.add(software_system)
        instance.software_system = None
        assert instance.software_system_id == software_system.id
        assert instance.canonical_name == "/System[1]"

        instance.software_system_id = "1234"
        assert instance.software_system_id == "1234"
        assert instance.canonical_name == "/1234[1]"

    def test_unresolvable_id_keeps_required_tags(self, software_system, deployment_node):
        instance = deployment_node.add(software_system)
        instance.software_system = None
        instance.software_system_id = "1234"

        assert instance.required_tags <= set(instance.tag_list)
        assert instance.tags == "Element,Software System,Software System Instance"

    def test_health_checks(self, software_system, deployment_node):
        """A rejected health check leaves the list unchanged."""
        instance = deployment_node.add(software_system)
        hc = instance.add_health_check("Home page", "https://example.com")
        assert hc.interval == 60
        assert instance.health_checks == [hc]

        with pytest.raises(InvalidArgumentError, match="The URL must not be null or empty"):
            instance.add_health_check("Home page", "")
        with pytest.raises(InvalidArgumentError, match="example.com:443 is not a valid URL"):
            instance.add_health_check("Home page", "example.com:443")
        assert len(instance.health_checks) == 1

    def test_numbering_independent_of_containers(
        self, software_system, database, deployment_node
    ):
        """Instance numbers are counted per element."""
        deployment_node.add(database)
        assert deployment_node.add(software_system).instance_id == 1

    def test_to_dict(self, software_system, deployment_node):
        data = deployment_node.add(software_system).to_dict()
        assert data["softwareSystemId"] == software_system.id
        assert data["instanceId"] == 1
        assert "name" not in data
