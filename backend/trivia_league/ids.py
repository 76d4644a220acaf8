import random
import string
import time
from datetime import datetime, timezone

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


def generate_id(prefix, length=4):
    """``<prefix>_<epoch ms>_<random base36>``, e.g. ``score_1717171717171_k3x9``."""
    suffix = ''.join(random.choices(_SUFFIX_ALPHABET, k=length))
    return f"{prefix}_{int(time.time() * 1000)}_{suffix}"


def utc_timestamp():
    """ISO-8601 UTC with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
