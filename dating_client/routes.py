# dating_client/routes.py

"""
Client route table.

Paths are matched segment by segment; ``:name`` segments capture a
parameter and ``**`` matches anything. The first matching route wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Route:
    path: str
    view: str

    @property
    def segments(self) -> Tuple[str, ...]:
        return tuple(s for s in self.path.split("/") if s)


@dataclass(frozen=True)
class RouteMatch:
    route: Route
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def view(self) -> str:
        return self.route.view


ROUTES: List[Route] = [
    Route("", "home"),
    Route("members", "member-list"),
    Route("members/:id", "member-detail"),
    Route("list", "lists"),
    Route("messages", "messages"),
    Route("**", "home"),
]


def _match(route: Route, parts: Sequence[str]) -> Optional[Dict[str, str]]:
    segments = route.segments
    if segments == ("**",):
        return {}
    if len(segments) != len(parts):
        return None

    params: Dict[str, str] = {}
    for pattern, part in zip(segments, parts):
        if pattern.startswith(":"):
            params[pattern[1:]] = part
        elif pattern != part:
            return None
    return params


def match_route(path: str, routes: Optional[Sequence[Route]] = None) -> Optional[RouteMatch]:
    """
    Resolve ``path`` (with or without leading slash, query or fragment) to
    the first matching route.
    """
    path = path.split("?", 1)[0].split("#", 1)[0]
    parts = [p for p in path.split("/") if p]

    for route in routes if routes is not None else ROUTES:
        params = _match(route, parts)
        if params is not None:
            return RouteMatch(route=route, params=params)
    return None


__all__ = ["Route", "RouteMatch", "ROUTES", "match_route"]
