from types import MappingProxyType
from typing import Dict
from typing import Mapping
from typing import Optional

from .base import Serializer
from .base import SerializerFactory
from .json_serializer import JSONSerializer

DEFAULT_KEY = ""


class SerializerRegistry:
    """
    Serializer factories keyed by content-type, built once at startup.
    Falls back to the default entry (the empty key) when the requested
    content-type isn't registered.
    """

    def __init__(self, factories: Mapping[str, SerializerFactory]) -> None:
        if DEFAULT_KEY not in factories:
            raise ValueError("registry requires a default entry under ''")
        self._map: Mapping[str, SerializerFactory] = MappingProxyType(
            dict(factories)
        )

    def supported_types(self) -> list[str]:
        return [key for key in self._map if key != DEFAULT_KEY]

    def is_registered(self, content_type: str) -> bool:
        return content_type in self._map

    @property
    def default(self) -> SerializerFactory:
        return self._map[DEFAULT_KEY]

    def get(self, content_type: str) -> SerializerFactory:
        return self._map.get(content_type, self.default)

    def create(self, content_type: str) -> Serializer:
        # a new instance per call, never shared between responses
        return self.get(content_type)()


def default_registry(
    extra: Optional[Mapping[str, SerializerFactory]] = None,
) -> SerializerRegistry:
    """
    JSON as the default and under application/json, plus any `extra` entries.
    """
    factories: Dict[str, SerializerFactory] = {
        DEFAULT_KEY: JSONSerializer,
        "application/json": JSONSerializer,
    }
    factories.update(extra or {})
    return SerializerRegistry(factories)
