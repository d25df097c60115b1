import secrets
import string
from datetime import datetime, timezone

_ID_ALPHABET = string.ascii_letters + string.digits
DOCUMENT_ID_LENGTH = 20


def new_document_id(length: int = DOCUMENT_ID_LENGTH) -> str:
    """Opaque alphanumeric record id, same shape as the legacy document-store ids."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def utc_now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
