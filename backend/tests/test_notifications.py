import pytest

from app.schemas.notification import NotificationDraft


def make_draft(party_id: str = "p1") -> NotificationDraft:
    return NotificationDraft(type="watchPartyInvite", message="invited", watch_party_id=party_id)


@pytest.mark.asyncio
async def test_notify_returns_created_record(notifications):
    notification = await notifications.notify("bob", make_draft())

    assert notification.id
    assert notification.user_id == "bob"
    assert notification.type == "watchPartyInvite"
    assert notification.watch_party_id == "p1"


@pytest.mark.asyncio
async def test_notify_propagates_store_errors(notifications, notification_repo):
    notification_repo.fail_for.add("bob")

    with pytest.raises(RuntimeError):
        await notifications.notify("bob", make_draft())


@pytest.mark.asyncio
async def test_notifications_are_returned_newest_first(notifications):
    await notifications.notify("bob", make_draft("p1"))
    await notifications.notify("bob", make_draft("p2"))
    await notifications.notify("carol", make_draft("p3"))

    received = await notifications.get_notifications("bob")

    assert [n.watch_party_id for n in received] == ["p2", "p1"]


@pytest.mark.asyncio
async def test_dispatch_all_reports_each_outcome(notifications, notification_repo):
    notification_repo.fail_for.add("carol")
    draft = make_draft()

    outcomes = await notifications.dispatch_all([("bob", draft), ("carol", draft), ("dave", draft)])

    assert [o.user_id for o in outcomes] == ["bob", "carol", "dave"]
    assert [o.delivered for o in outcomes] == [True, False, True]
    assert isinstance(outcomes[1].error, RuntimeError)
    assert outcomes[0].notification.user_id == "bob"


@pytest.mark.asyncio
async def test_dispatch_all_with_nothing_to_send(notifications):
    assert await notifications.dispatch_all([]) == []
