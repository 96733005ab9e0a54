"""Short random record IDs."""

from __future__ import annotations

import random

from data_api.core.constants import ID_ALPHABET, ID_LENGTH


def generate_id(rng: random.Random | None = None) -> str:
    """
    Generate a short random ID (5 chars, a-z0-9).

    Not cryptographically secure and not guaranteed unique: callers
    inserting records must handle the rare collision themselves.
    Pass a seeded ``random.Random`` for reproducible output.
    """
    source = rng if rng is not None else random
    return "".join(source.choices(ID_ALPHABET, k=ID_LENGTH))
