"""Record identifiers shaped like document-database object ids."""
from __future__ import annotations

import itertools
import os
import re
import threading
import time

RECORD_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")

_PROCESS_RANDOM = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))
_counter_lock = threading.Lock()


def new_record_id() -> str:
    """
    Build a 24 hex char id: 4-byte creation second, 5 random bytes fixed per
    process and a 3-byte rolling counter. Ids sort by creation time.
    """
    with _counter_lock:
        count = next(_counter) & 0xFFFFFF
    seconds = int(time.time()) & 0xFFFFFFFF
    raw = seconds.to_bytes(4, "big") + _PROCESS_RANDOM + count.to_bytes(3, "big")
    return raw.hex()


def is_valid_record_id(value: str | None) -> bool:
    if not value or not isinstance(value, str):
        return False
    return bool(RECORD_ID_PATTERN.fullmatch(value))
