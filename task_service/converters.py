"""URL converters."""

import uuid

from werkzeug.routing import BaseConverter


class TaskUidConverter(BaseConverter):
    """Match a task UUID in hyphenated or 32-digit simple form.

    Both spellings resolve to the same ``uuid.UUID``; URLs are always
    built with the hyphenated form.
    """

    regex = (
        r"[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}"
        r"|[0-9A-Fa-f]{32}"
    )

    def to_python(self, value: str) -> uuid.UUID:
        return uuid.UUID(value)

    def to_url(self, value: uuid.UUID) -> str:
        return str(value)
