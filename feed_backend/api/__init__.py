"""
API layer for the Feed Backend.

Exposes HTTP and WebSocket endpoints under /api/v1 (auth, feed posts,
image upload, realtime feed socket).
"""
