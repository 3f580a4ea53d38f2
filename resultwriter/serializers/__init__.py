from .base import DeserializationFailure
from .base import Deserializer
from .base import SerializationFailure
from .base import Serializer
from .base import SerializerFactory
from .json_serializer import JSONDeserializer
from .json_serializer import JSONSerializer
from .registry import SerializerRegistry
from .registry import default_registry

__all__ = [
    "Serializer",
    "Deserializer",
    "SerializerFactory",
    "SerializationFailure",
    "DeserializationFailure",
    "JSONSerializer",
    "JSONDeserializer",
    "SerializerRegistry",
    "default_registry",
]
