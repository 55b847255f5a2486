from datetime import date
import pytest
from core.clock import FixedClock
from maintenance.models import MaintenanceSchedule
from notifications.services import compute_due_notifications, DueNotificationComputer, NotificationService
from tests.conftest import local_dt


def _schedule(id=1, **kwargs):
    kwargs.setdefault('title', 'Pump check')
    kwargs.setdefault('notify_before_days', 7)
    return MaintenanceSchedule(id=id, **kwargs)


def test_notice_window_starts_lead_time_days_before_due():
    schedule = _schedule(next_due_at=local_dt(2025, 3, 1, 10, 0))
    
    assert compute_due_notifications(date(2025, 2, 21), [schedule], set()) == []
    due = compute_due_notifications(date(2025, 2, 22), [schedule], set())
    assert [n.schedule_id for n in due] == [1]
    assert due[0].next_due_date == date(2025, 3, 1)
    assert due[0].overdue is False


def test_zero_lead_time_notifies_only_from_due_date():
    schedule = _schedule(next_due_at=local_dt(2025, 3, 1, 10, 0), notify_before_days=0)
    
    assert compute_due_notifications(date(2025, 2, 28), [schedule], set()) == []
    assert len(compute_due_notifications(date(2025, 3, 1), [schedule], set())) == 1


def test_overdue_schedule_stays_due():
    schedule = _schedule(next_due_at=local_dt(2025, 3, 1, 10, 0))
    
    due = compute_due_notifications(date(2026, 1, 1), [schedule], set())
    assert len(due) == 1
    assert due[0].overdue is True


def test_schedule_without_next_due_is_never_due():
    schedule = _schedule(next_due_at=None)
    
    assert compute_due_notifications(date(2030, 1, 1), [schedule], set()) == []


def test_skip_suppresses_only_matching_due_date():
    schedule = _schedule(next_due_at=local_dt(2025, 3, 1, 10, 0))
    
    assert compute_due_notifications(date(2025, 2, 25), [schedule], {(1, date(2025, 3, 1))}) == []
    assert len(compute_due_notifications(date(2025, 2, 25), [schedule], {(1, date(2024, 12, 1))})) == 1


def test_message_and_display_fields():
    schedule = _schedule(
        id=5, next_due_at=local_dt(2025, 3, 1, 10, 0),
        description='Check the rooftop pump', cycle_months=6
    )
    
    notification = compute_due_notifications(date(2025, 2, 25), [schedule], set())[0]
    assert notification.title == 'Pump check'
    assert notification.message == 'Pump check is due on 2025-03-01 (7d notice) Check the rooftop pump'
    assert notification.action_url == '/maintenance?scheduleId=5'
    assert notification.notify_at == local_dt(2025, 2, 22)
    assert notification.cycle_months == 6
    assert notification.asset_group_name is None


def test_blank_title_falls_back_to_default():
    schedule = _schedule(next_due_at=local_dt(2025, 3, 1), title='', notify_before_days=0)
    
    notification = compute_due_notifications(date(2025, 3, 1), [schedule], set())[0]
    assert notification.title == 'Maintenance due soon'
    assert notification.message == 'Maintenance due soon is due on 2025-03-01'


def test_results_sorted_by_notice_start():
    late = _schedule(id=1, next_due_at=local_dt(2025, 3, 10), notify_before_days=0)
    early = _schedule(id=2, next_due_at=local_dt(2025, 3, 5), notify_before_days=10)
    
    due = compute_due_notifications(date(2025, 3, 20), [late, early], set())
    assert [n.schedule_id for n in due] == [2, 1]


@pytest.mark.django_db
def test_computer_reads_store_and_ledger(make_schedule, asset_group):
    pending = make_schedule(
        next_due_at=local_dt(2025, 3, 1, 10, 0), notify_before_days=7,
        scope=0, asset_group=asset_group
    )
    skipped = make_schedule(next_due_at=local_dt(2025, 3, 1, 10, 0), notify_before_days=7)
    make_schedule(next_due_at=None)
    make_schedule(next_due_at=local_dt(2025, 6, 1), notify_before_days=7)
    
    service = NotificationService(clock=FixedClock(date(2025, 2, 25)))
    service.skip(skipped.id, date(2025, 3, 1))
    
    due = service.get_due_notifications()
    assert [n.schedule_id for n in due] == [pending.id]
    assert due[0].asset_group_name == 'Air conditioner'


@pytest.mark.django_db
def test_computer_is_idempotent(make_schedule):
    make_schedule(next_due_at=local_dt(2025, 3, 1), notify_before_days=3)
    make_schedule(next_due_at=local_dt(2025, 2, 1), notify_before_days=0)
    
    computer = DueNotificationComputer(clock=FixedClock(date(2025, 3, 1)))
    assert computer.compute() == computer.compute()
