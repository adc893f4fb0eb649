"""
Serialize-then-deserialize round trip.
"""

from __future__ import annotations

import io
import logging
import pickle
from typing import Any, Optional

from .config.constants import PICKLE_PROTOCOL

logger = logging.getLogger(__name__)


def serialize_and_recover(obj: Any) -> Optional[Any]:
    """
    Pickle an object to an in-memory buffer and unpickle a new copy of it.

    A failed round trip returns ``None`` instead of raising, so a ``None``
    result means "could not round-trip", not "the value was None".

    Parameters
    ----------
    obj : Any
        Object to serialize and recover

    Returns
    -------
    Optional[Any]
        The recovered object, or None if encoding or decoding failed
    """
    try:
        buf = io.BytesIO()
        pickle.dump(obj, buf, protocol=PICKLE_PROTOCOL)

        buf.seek(0)
        return pickle.load(buf)
    except Exception as e:
        logger.debug("Round trip of %s failed: %r", type(obj).__name__, e)
        return None
