from datetime import datetime
import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient
from asset_groups.models import AssetGroup
from core.constants import ScheduleScope
from maintenance.models import MaintenanceSchedule


def local_dt(*args):
    """Aware datetime on the project's local wall clock"""
    return timezone.make_aware(datetime(*args))


@pytest.fixture
def asset_group(db):
    return AssetGroup.objects.create(name='Air conditioner')


@pytest.fixture
def make_schedule(db):
    def _make(**kwargs):
        kwargs.setdefault('scope', ScheduleScope.BUILDING)
        kwargs.setdefault('title', 'Water tank cleaning')
        return MaintenanceSchedule.objects.create(**kwargs)
    return _make


@pytest.fixture
def staff_user(db):
    return get_user_model().objects.create_user(username='admin', password='password', is_staff=True)


@pytest.fixture
def api_client(staff_user):
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client
