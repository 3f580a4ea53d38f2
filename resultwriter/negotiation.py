from typing import Optional

from resultwriter.log_config import logger
from resultwriter.serializers.base import Serializer
from resultwriter.serializers.registry import SerializerRegistry
from resultwriter.transport import Request


def accept_header(request: Request) -> str:
    # only the first Accept header is considered
    return request.headers.get("accept") or ""


def normalize_media_type(accept: Optional[str]) -> str:
    """
    Reduce an Accept value to its bare media type: everything from the
    first ';' is dropped and whitespace trimmed. Alternatives are not
    ranked, so "a/b, c/d" stays as one (unregistered) key.
    """
    if not accept:
        return ""
    return accept.split(";", 1)[0].strip()


def negotiate(
    accept: Optional[str], registry: SerializerRegistry
) -> Serializer:
    """
    Resolve an Accept value to a fresh Serializer, falling back to the
    registry default for empty, unknown or malformed values.
    """
    media_type = normalize_media_type(accept)
    if media_type and not registry.is_registered(media_type):
        logger.debug("No serializer for '%s', using default", media_type)
    return registry.create(media_type)
