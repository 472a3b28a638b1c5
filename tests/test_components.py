"""Tests for component collection operations."""

import pytest

from builders import container, make_devfile, volume
from pydevfile.data import (
    AlreadyExistsError,
    ComponentOptions,
    DevfileOptions,
    NotFoundError,
    UnknownVariantError,
)
from pydevfile.models import Component, ComponentType, OpenshiftComponent


class TestGetComponents:
    """Tests for listing components."""

    def test_all_components_in_order(self, devfile):
        """Test no filter returns every component in document order."""
        names = [component.name for component in devfile.get_components()]
        assert names == ["runtime", "cache"]

    def test_attribute_filter(self):
        """Test only components with matching attributes are returned."""
        d = make_devfile(
            components=[
                container("c1", attributes={"firstString": "firstStringValue", "x": "y"}),
                container("c2", attributes={"firstString": "other"}),
                volume("v1", attributes={"firstString": "firstStringValue"}),
            ]
        )
        options = DevfileOptions(filter={"firstString": "firstStringValue"})
        assert [c.name for c in d.get_components(options)] == ["c1", "v1"]

    def test_component_type_filter(self):
        """Test the component type option keeps a single variant."""
        d = make_devfile(components=[container("c1"), volume("v1"), container("c2")])
        options = DevfileOptions(
            component_options=ComponentOptions(component_type=ComponentType.VOLUME)
        )
        assert [c.name for c in d.get_components(options)] == ["v1"]

    def test_component_type_filter_unknown_variant(self):
        """Test type filtering fails on a component without a variant."""
        d = make_devfile(components=[Component(name="broken")])
        options = DevfileOptions(
            component_options=ComponentOptions(component_type=ComponentType.CONTAINER)
        )
        with pytest.raises(UnknownVariantError):
            d.get_components(options)

    def test_container_and_volume_helpers(self, devfile):
        """Test the container and volume shortcuts."""
        assert [c.name for c in devfile.get_devfile_container_components()] == ["runtime"]
        assert [c.name for c in devfile.get_devfile_volume_components()] == ["cache"]


class TestAddComponents:
    """Tests for adding components."""

    def test_add_appends_once(self, devfile):
        """Test added components are listed once, after existing ones."""
        new = [container("tools"), volume("data")]
        devfile.add_components(new)

        components = devfile.get_components()
        assert [c.name for c in components] == ["runtime", "cache", "tools", "data"]
        assert components[-2:] == new

    def test_same_name_different_variant(self, devfile):
        """Test a volume may share its name with a container."""
        devfile.add_components([volume("runtime")])
        assert [c.name for c in devfile.get_components()] == ["runtime", "cache", "runtime"]

    def test_duplicate_fails(self, devfile):
        """Test a name clash within a variant fails."""
        with pytest.raises(AlreadyExistsError, match="component runtime already exists") as exc:
            devfile.add_components([container("runtime")])
        assert exc.value.name == "runtime"
        assert exc.value.field == "component"

    def test_partial_apply_on_conflict(self, devfile):
        """Test components before the clash stay added, later ones do not."""
        with pytest.raises(AlreadyExistsError):
            devfile.add_components([container("a"), container("a"), container("b")])
        assert [c.name for c in devfile.get_components()] == ["runtime", "cache", "a"]

    def test_other_variants_are_checked(self):
        """Test uniqueness also holds for non container/volume variants."""
        d = make_devfile(components=[Component(name="k8s", openshift=OpenshiftComponent())])
        with pytest.raises(AlreadyExistsError):
            d.add_components([Component(name="k8s", openshift=OpenshiftComponent(uri="x"))])

    def test_unknown_variant_rejected(self, devfile):
        """Test a component without a variant cannot be added."""
        with pytest.raises(UnknownVariantError):
            devfile.add_components([Component(name="broken")])


class TestUpdateComponent:
    """Tests for updating components."""

    def test_update_existing(self, devfile):
        """Test the component with the same name and variant is replaced."""
        devfile.update_component(container("runtime", image="other-image"))
        assert devfile.get_components()[0].container.image == "other-image"
        assert devfile.get_components()[0].container.volumeMounts == []

    def test_update_missing_is_noop(self, devfile):
        """Test updating an unknown component changes nothing."""
        before = devfile.content.model_copy(deep=True)
        devfile.update_component(container("unknown"))
        assert devfile.content == before

    def test_update_matches_variant(self):
        """Test only the component of the same variant is replaced."""
        d = make_devfile(components=[container("shared"), volume("shared", size="1Gi")])
        d.update_component(volume("shared", size="5Gi"))
        components = d.get_components()
        assert components[0].container is not None
        assert components[1].volume.size == "5Gi"


class TestDeleteComponent:
    """Tests for deleting components."""

    def test_delete_volume_cascades(self, devfile):
        """Test deleting a volume strips its mounts from containers."""
        devfile.delete_component("cache")
        components = devfile.get_components()
        assert [c.name for c in components] == ["runtime"]
        assert components[0].container.volumeMounts == []

    def test_delete_container_keeps_mounts(self):
        """Test deleting a container leaves other containers' mounts alone."""
        d = make_devfile(
            components=[
                container("c1", ("data", "/data")),
                container("c2", ("data", "/data")),
                volume("data"),
            ]
        )
        d.delete_component("c1")
        assert [c.name for c in d.get_components()] == ["c2", "data"]
        assert d.get_volume_mount_paths("data", "c2") == ["/data"]

    def test_delete_missing(self, devfile):
        """Test deleting an unknown component fails and changes nothing."""
        before = devfile.content.model_copy(deep=True)
        with pytest.raises(NotFoundError, match="component unknown"):
            devfile.delete_component("unknown")
        assert devfile.content == before
