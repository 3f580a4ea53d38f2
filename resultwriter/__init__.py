from .config import WriterConfig
from .errors import DeserializationFailure
from .errors import ResultWriterError
from .errors import SerializationFailure
from .negotiation import negotiate
from .results import BinaryResult
from .results import InputError
from .results import SelfHandling
from .results import SerializeResult
from .results import StreamResult
from .results import TextResult
from .serializers.base import Deserializer
from .serializers.base import Serializer
from .serializers.json_serializer import JSONDeserializer
from .serializers.json_serializer import JSONSerializer
from .serializers.registry import SerializerRegistry
from .serializers.registry import default_registry
from .transport import BufferedResponse
from .transport import Request
from .transport import ResponseSink
from .writer import Writer

__all__ = [
    "WriterConfig",
    "ResultWriterError",
    "SerializationFailure",
    "DeserializationFailure",
    "negotiate",
    "TextResult",
    "BinaryResult",
    "StreamResult",
    "SerializeResult",
    "SelfHandling",
    "InputError",
    "Serializer",
    "Deserializer",
    "JSONSerializer",
    "JSONDeserializer",
    "SerializerRegistry",
    "default_registry",
    "ResponseSink",
    "Request",
    "BufferedResponse",
    "Writer",
]
