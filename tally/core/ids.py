"""tally.core.ids

Counter identifiers are random 128-bit UUIDs. Clients only ever hand them
back to us as path segments, so parsing has to fail softly.
"""

from __future__ import annotations

import uuid
from uuid import UUID

from tally.core.exceptions import InvalidCounterIdError


def new_counter_id() -> UUID:
    return uuid.uuid4()


def parse_counter_id(raw: str) -> UUID:
    """Parse a textual UUID.

    Accepts the forms ``uuid.UUID`` does: hyphenated, bare hex, braced and
    ``urn:uuid:`` prefixed. Raises ``InvalidCounterIdError`` otherwise.
    """
    try:
        return UUID(raw)
    except (ValueError, TypeError) as e:
        raise InvalidCounterIdError(str(raw)) from e
