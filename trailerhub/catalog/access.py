"""Subscription access rule for playing a movie."""

PREMIUM = "Premium"


def has_access(subscribed: bool, user_tier: str | None, movie_tier: str) -> bool:
    """Check whether a subscription covers a movie's tier.

    Unsubscribed users cannot play anything. Basic movies need any
    active subscription; Premium movies need the Premium tier.
    """
    if not subscribed:
        return False
    if movie_tier == PREMIUM:
        return user_tier == PREMIUM
    return True
