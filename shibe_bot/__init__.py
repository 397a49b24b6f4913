"""Shibe Bot Application Package.

A Telegram inline bot that answers inline queries with random shibe, cat and
bird pictures from the shibe.online API.

The application is split into:
- Bot handlers and inline query text parsing
- Upstream API client and result mapping
"""

__version__ = "0.3.0"
