from io import StringIO
import pytest
from django.apps import apps
from django.core.management import call_command
from django.core.management.base import CommandError
from tests.conftest import local_dt

pytestmark = pytest.mark.django_db


def test_scan_lists_due_and_overdue(make_schedule):
    make_schedule(title='Roof drain', next_due_at=local_dt(2025, 3, 1), notify_before_days=7)
    make_schedule(title='Generator test', next_due_at=local_dt(2025, 1, 1))
    make_schedule(title='Fire alarm', next_due_at=local_dt(2025, 6, 1))
    out = StringIO()
    
    call_command('scan_due_maintenance', '--date', '2025-02-25', stdout=out)
    
    output = out.getvalue()
    assert 'MAINTENANCE DUE SCAN - 2025-02-25' in output
    assert 'Roof drain is due on 2025-03-01 (7d notice)' in output
    assert 'Generator test is due on 2025-01-01' in output
    assert 'Fire alarm' not in output
    assert 'Due: 2' in output
    assert 'Overdue: 1' in output


def test_scan_rejects_bad_date():
    with pytest.raises(CommandError):
        call_command('scan_due_maintenance', '--date', '25/02/2025', stdout=StringIO())


@pytest.fixture
def started(monkeypatch):
    calls = []
    monkeypatch.setattr('common.scheduler.start_scheduler', lambda: calls.append(True))
    return calls


def test_scheduler_not_started_outside_autoreloader_child(monkeypatch, settings, started):
    settings.ENABLE_BACKGROUND_SCHEDULER = True
    monkeypatch.delenv('RUN_MAIN', raising=False)
    monkeypatch.setattr('sys.argv', ['gunicorn', 'propcare.wsgi'])
    
    apps.get_app_config('common').ready()
    
    assert started == []


def test_scheduler_started_in_runserver_child(monkeypatch, settings, started):
    settings.ENABLE_BACKGROUND_SCHEDULER = True
    monkeypatch.setenv('RUN_MAIN', 'true')
    monkeypatch.setattr('sys.argv', ['manage.py', 'runserver'])
    
    apps.get_app_config('common').ready()
    
    assert started == [True]


def test_scheduler_disabled_by_setting(monkeypatch, settings, started):
    settings.ENABLE_BACKGROUND_SCHEDULER = False
    monkeypatch.setenv('RUN_MAIN', 'true')
    monkeypatch.setattr('sys.argv', ['manage.py', 'runserver'])
    
    apps.get_app_config('common').ready()
    
    assert started == []
