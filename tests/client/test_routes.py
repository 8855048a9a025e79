# tests/client/test_routes.py
import pytest

from dating_client.routes import Route, match_route


@pytest.mark.parametrize(
    "path, view",
    [
        ("", "home"),
        ("/", "home"),
        ("/members", "member-list"),
        ("members/", "member-list"),
        ("/list", "lists"),
        ("/messages?unread=1", "messages"),
        ("/nowhere/at/all", "home"),
    ],
)
def test_paths_resolve_to_views(path, view):
    assert match_route(path).view == view


def test_member_detail_captures_id():
    match = match_route("/members/42#top")

    assert match.view == "member-detail"
    assert match.params == {"id": "42"}


def test_no_match_without_wildcard():
    assert match_route("/elsewhere", routes=[Route("", "home")]) is None
