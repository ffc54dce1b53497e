"""
Path normalization for API routes.

API paths match without regard to case and with an optional trailing slash.
Only the fixed segments are folded; path parameters keep their case.
"""

from starlette.types import ASGIApp, Receive, Scope, Send

# "/api/<lookup>/..." has two fixed leading segments, "/health" has one
FIXED_SEGMENTS = {"api": 2, "health": 1}


def normalize_route_path(path: str, fixed_segments: dict = FIXED_SEGMENTS) -> str:
    """
    Fold the fixed segments of an API path and drop one trailing slash.

    Paths outside the API are returned unchanged so static directories keep
    their own slash handling.

    Args:
        path: Decoded request path

    Returns:
        Path as the router expects it
    """
    segments = path.split("/")
    if len(segments) < 2:
        return path

    fixed = fixed_segments.get(segments[1].lower())
    if fixed is None:
        return path

    for index in range(1, min(fixed + 1, len(segments))):
        segments[index] = segments[index].lower()

    normalized = "/".join(segments)
    if normalized.endswith("/"):
        normalized = normalized[:-1]
    return normalized


class RoutePathMiddleware:
    """ASGI middleware rewriting API request paths before routing."""

    def __init__(self, app: ASGIApp, fixed_segments: dict = FIXED_SEGMENTS):
        self.app = app
        self.fixed_segments = fixed_segments

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = normalize_route_path(scope["path"], self.fixed_segments)
            if path != scope["path"]:
                scope = dict(scope, path=path)
        await self.app(scope, receive, send)
