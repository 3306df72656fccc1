from __future__ import annotations

import hmac


def verify_token_matches(provided: str | None, expected: str) -> bool:
    """Constant-time check of the webhook verify token.

    An unset expected token never matches, so an unconfigured deployment
    cannot be subscribed with an empty ``hub.verify_token``.
    """
    if not provided or not expected:
        return False
    return hmac.compare_digest(provided.encode(), expected.encode())
