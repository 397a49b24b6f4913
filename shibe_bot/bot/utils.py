"""Helpers for working with Telegram objects."""

from telegram import User


def extract_username(user: User) -> str:
    """Return a loggable requester name.

    Args:
        user: Telegram user that sent the update.

    Returns:
        The username, or ``id:<user id>`` for users without one.
    """
    if user.username:
        return user.username
    return f"id:{user.id}"
