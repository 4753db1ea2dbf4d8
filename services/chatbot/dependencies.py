from .models import ChatRequest
from .exceptions import MessageRequiredException


def require_message(body: ChatRequest) -> str:
    """Returns the raw message, untouched, or rejects a blank one with 400."""
    if body.message is None or not body.message.strip():
        raise MessageRequiredException()
    return body.message
