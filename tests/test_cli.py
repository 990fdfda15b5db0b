from __future__ import annotations

from models import Item


def test_seed_items(app, runner) -> None:
    result = runner.invoke(args=["seed-items"])
    assert result.exit_code == 0
    assert "Seeded 5 items." in result.output

    with app.app_context():
        assert Item.query.count() == 5

    result = runner.invoke(args=["seed-items"])
    assert "nothing seeded" in result.output


def test_back_mark_settings(runner) -> None:
    result = runner.invoke(args=["back-mark-settings"])

    assert result.exit_code == 0
    assert "BACK_MARK_IGNORE_ACTIONS = new, edit, create, update, destroy" in result.output
    assert "BACK_MARK_LINK_ID = back_link" in result.output


def test_back_mark_inspect(app, runner) -> None:
    with app.app_context():
        cookie = app.session_interface.get_signing_serializer(app).dumps(
            {"prev_url": "/inbox", "prev_label": "Inbox", "filter_prev_url": "/items/5"}
        )

    result = runner.invoke(args=["back-mark-inspect", cookie])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "prev_url: /inbox",
        "prev_label: Inbox",
        "back_url: -",
        "back_label: -",
        "filter_prev_url: /items/5",
        "filter_back_url: -",
    ]


def test_back_mark_inspect_session_from_client(client, runner) -> None:
    client.get("/inbox")
    cookie = client.get_cookie("session")

    result = runner.invoke(args=["back-mark-inspect", cookie.value])

    assert result.exit_code == 0
    assert "prev_label: Inbox" in result.output
    assert "filter_prev_url: http://localhost/inbox" in result.output


def test_back_mark_inspect_bad_cookie(runner) -> None:
    result = runner.invoke(args=["back-mark-inspect", "not-a-cookie"])

    assert result.exit_code == 1
    assert "Invalid session cookie" in result.output
