"""Telegram bot implementation package.

Contains the inline query handler, query text parsing and small helpers for
working with Telegram objects.
"""
