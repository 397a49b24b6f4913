"""External services package.

Contains the upstream image API client and the mapping of its responses into
inline query results.
"""
