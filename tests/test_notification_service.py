import asyncio
import threading
from datetime import datetime

from trailer_rental_api.app.schemas.notification import (
    Notification,
    NotificationPriority,
    NotificationType,
)
from trailer_rental_api.app.services.notification_service import NotificationService


def make_notification(notification_id, customer_id="CUST002", timestamp=None):
    return Notification(
        id=notification_id,
        customer_id=customer_id,
        type=NotificationType.BOOKING_REMINDER,
        title="Return Reminder",
        message="Please return your trailer by 18:00.",
        timestamp=timestamp or datetime(2024, 6, 1, 12, 0),
        priority=NotificationPriority.LOW,
    )


def test_reset_seeds_two_notifications(data_dir):
    notifications = asyncio.run(NotificationService.reset_data())

    assert [n.id for n in notifications] == ["NOTIF001", "NOTIF002"]
    assert notifications[1].type is NotificationType.BOOKING_REMINDER
    assert not any(n.is_read for n in notifications)


def test_create_returns_notification_unchanged(seeded):
    notification = make_notification("NOTIF-X")

    stored = asyncio.run(NotificationService.create_notification(notification))

    assert stored == notification
    all_notifications = asyncio.run(NotificationService.get_all_notifications())
    assert [n.id for n in all_notifications] == ["NOTIF001", "NOTIF002", "NOTIF-X"]


def test_customer_notifications_newest_first(seeded):
    asyncio.run(NotificationService.create_notification(make_notification("A", timestamp=datetime(2024, 1, 1))))
    asyncio.run(NotificationService.create_notification(make_notification("B", timestamp=datetime(2024, 3, 1))))
    asyncio.run(NotificationService.create_notification(make_notification("C", timestamp=datetime(2024, 2, 1))))

    own = asyncio.run(NotificationService.get_customer_notifications("CUST002"))
    demo = asyncio.run(NotificationService.get_customer_notifications("CUST001"))

    assert [n.id for n in own] == ["B", "C", "A"]
    assert [n.id for n in demo] == ["NOTIF002", "NOTIF001"]


def test_mark_as_read(seeded):
    updated = asyncio.run(NotificationService.mark_as_read("NOTIF002"))

    assert updated.is_read
    by_id = {n.id: n for n in asyncio.run(NotificationService.get_all_notifications())}
    assert by_id["NOTIF002"].is_read
    assert not by_id["NOTIF001"].is_read


def test_mark_unknown_notification_is_silent(seeded):
    assert asyncio.run(NotificationService.mark_as_read("NOTIF404")) is None
    assert not any(n.is_read for n in asyncio.run(NotificationService.get_all_notifications()))


def test_build_notification_generates_unique_ids():
    ids = {
        NotificationService.build_notification(
            "CUST001", NotificationType.LATE_FEE, "t", "m", NotificationPriority.HIGH
        ).id
        for _ in range(200)
    }
    assert len(ids) == 200
    assert all(i.startswith("NOTIF") for i in ids)


def test_concurrent_creates_do_not_lose_updates(data_dir):
    def create(index):
        asyncio.run(NotificationService.create_notification(make_notification(f"N{index}")))

    threads = [threading.Thread(target=create, args=(i,)) for i in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    stored = asyncio.run(NotificationService.get_all_notifications())
    assert sorted(n.id for n in stored) == sorted(f"N{i}" for i in range(20))


def test_customer_notifications_sort_mixed_utc_and_local_timestamps(seeded):
    asyncio.run(
        NotificationService.create_notification(
            Notification.model_validate(
                {
                    "Id": "NOTIF-UTC",
                    "CustomerId": "CUST001",
                    "Type": "BookingReminder",
                    "Timestamp": "2099-01-01T10:00:00Z",
                    "Priority": "Low",
                }
            )
        )
    )

    notifications = asyncio.run(NotificationService.get_customer_notifications("CUST001"))

    assert [n.id for n in notifications] == ["NOTIF-UTC", "NOTIF002", "NOTIF001"]
    assert notifications[0].timestamp.tzinfo is None
