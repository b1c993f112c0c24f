"""Paste token generation.

Tokens come from the ``random`` module, not ``secrets``: they identify pastes,
they do not protect them. Nothing here checks a token against stored pastes;
a collision is reported by the store when the insert hits the primary key.
"""

import random
import string

ALPHABET = string.ascii_letters + string.digits
TOKEN_LENGTH = 10


def generate_token(length: int = TOKEN_LENGTH) -> str:
    return "".join(random.choice(ALPHABET) for _ in range(length))

