import pytest

from resultwriter.serializers.json_serializer import JSONSerializer
from resultwriter.serializers.registry import SerializerRegistry
from resultwriter.serializers.registry import default_registry


def test_registry_requires_default():
    with pytest.raises(ValueError):
        SerializerRegistry({"application/json": JSONSerializer})


def test_registry_fallback_to_default():
    registry = default_registry()
    ser = registry.create("application/does-not-exist")
    assert isinstance(ser, JSONSerializer)
    assert registry.get("application/does-not-exist") is registry.default


def test_registry_exact_lookup():
    class Other(JSONSerializer):
        pass

    registry = default_registry({"application/other": Other})
    assert isinstance(registry.create("application/other"), Other)
    # keys are matched as given; callers normalize first
    assert not isinstance(registry.create("application/other;q=1"), Other)
    assert registry.is_registered("application/other")
    assert not registry.is_registered("application/missing")


def test_registry_supported_types():
    registry = default_registry({"application/xml": JSONSerializer})
    assert registry.supported_types() == [
        "application/json",
        "application/xml",
    ]


def test_registry_is_read_only():
    factories = {"": JSONSerializer}
    registry = SerializerRegistry(factories)

    # later changes to the source mapping don't leak in
    factories["application/late"] = JSONSerializer
    assert not registry.is_registered("application/late")

    with pytest.raises(TypeError):
        registry._map["application/late"] = JSONSerializer  # type: ignore


def test_registry_creates_new_instances():
    registry = default_registry()
    assert registry.create("") is not registry.create("")
