from datetime import timedelta
import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient
from maintenance.models import MaintenanceSchedule, MaintenanceNotificationSkip

pytestmark = pytest.mark.django_db


def test_unauthenticated_requests_are_rejected():
    response = APIClient().get('/api/schedules/')
    assert response.status_code == 401


@pytest.fixture
def viewer_client(db):
    user = get_user_model().objects.create_user(username='viewer', password='password')
    client = APIClient()
    client.force_authenticate(user=user)
    return client


def test_non_staff_can_read_but_not_write(viewer_client, make_schedule):
    assert viewer_client.get('/api/schedules/').status_code == 200
    assert viewer_client.post('/api/schedules/', {'title': 'x'}, format='json').status_code == 403


def test_non_staff_cannot_skip(viewer_client, make_schedule):
    schedule = make_schedule(next_due_at=timezone.now())
    due_date = timezone.localdate(schedule.next_due_at).isoformat()
    
    assert viewer_client.get('/api/notifications/due/').status_code == 200
    response = viewer_client.delete(f'/api/notifications/schedule/{schedule.id}/due/{due_date}/skip/')
    
    assert response.status_code == 403
    assert MaintenanceNotificationSkip.objects.count() == 0


def test_create_and_get_schedule(api_client, asset_group):
    response = api_client.post('/api/schedules/', {
        'scope': 0,
        'asset_group_id': asset_group.id,
        'cycle_months': 6,
        'notify_before_days': 7,
        'title': 'AC filter cleaning',
        'next_due_at': '2025-03-01T10:00:00+07:00',
    }, format='json')
    
    assert response.status_code == 201
    body = response.json()
    assert body['asset_group_name'] == 'Air conditioner'
    assert body['next_due_date'] == '2025-03-01'
    assert body['is_recurring'] is True
    
    detail = api_client.get(f"/api/schedules/{body['id']}/")
    assert detail.status_code == 200
    assert detail.json()['title'] == 'AC filter cleaning'


def test_create_rejects_negative_cycle(api_client):
    response = api_client.post('/api/schedules/', {'title': 'x', 'cycle_months': -1}, format='json')
    assert response.status_code == 400
    assert MaintenanceSchedule.objects.count() == 0


def test_create_with_unknown_asset_group(api_client):
    response = api_client.post('/api/schedules/', {'scope': 0, 'asset_group_id': 999}, format='json')
    assert response.status_code == 404
    assert response.json()['code'] == 'NOT_FOUND'


def test_list_includes_asset_group_dropdown(api_client, make_schedule, asset_group):
    make_schedule()
    make_schedule()
    
    body = api_client.get('/api/schedules/').json()
    assert len(body['result']) == 2
    assert body['asset_group_dropdown'] == [{'id': asset_group.id, 'name': 'Air conditioner'}]


def test_update_missing_schedule_returns_404(api_client):
    response = api_client.put('/api/schedules/404/', {'title': 'x'}, format='json')
    assert response.status_code == 404


def test_update_replaces_fields(api_client, make_schedule):
    schedule = make_schedule(cycle_months=3, description='old')
    
    response = api_client.put(f'/api/schedules/{schedule.id}/', {'title': 'New title'}, format='json')
    
    assert response.status_code == 200
    schedule.refresh_from_db()
    assert schedule.title == 'New title'
    assert schedule.cycle_months is None
    assert schedule.description == ''


def test_partial_update_not_allowed(api_client, make_schedule):
    schedule = make_schedule(title='Old title')
    
    response = api_client.patch(f'/api/schedules/{schedule.id}/', {'title': 'New title'}, format='json')
    
    assert response.status_code == 405
    schedule.refresh_from_db()
    assert schedule.title == 'Old title'


def test_building_scope_with_asset_group_returns_400(api_client, asset_group):
    response = api_client.post('/api/schedules/', {
        'scope': 1, 'asset_group_id': asset_group.id, 'title': 'Water tank cleaning'
    }, format='json')
    
    assert response.status_code == 400
    assert response.json()['code'] == 'ASSET_GROUP_NOT_ALLOWED'


def test_get_missing_schedule_returns_404(api_client):
    assert api_client.get('/api/schedules/404/').status_code == 404


def test_delete_schedule(api_client, make_schedule):
    schedule = make_schedule(next_due_at=timezone.now())
    MaintenanceNotificationSkip.objects.create(schedule=schedule, due_date=timezone.localdate())
    
    assert api_client.delete(f'/api/schedules/{schedule.id}/').status_code == 204
    assert api_client.delete(f'/api/schedules/{schedule.id}/').status_code == 404
    assert MaintenanceNotificationSkip.objects.count() == 0


def test_mark_done(api_client, make_schedule):
    schedule = make_schedule(cycle_months=2, next_due_at=timezone.now() - timedelta(days=3))
    
    response = api_client.patch(f'/api/schedules/{schedule.id}/done/')
    
    assert response.status_code == 200
    schedule.refresh_from_db()
    assert schedule.last_done_at is not None
    assert schedule.next_due_at > timezone.now() + timedelta(days=50)


def test_upcoming_uses_default_window(api_client, make_schedule):
    soon = make_schedule(next_due_at=timezone.now() + timedelta(days=3))
    make_schedule(next_due_at=timezone.now() + timedelta(days=10))
    
    body = api_client.get('/api/schedules/upcoming/').json()
    assert [s['id'] for s in body['result']] == [soon.id]
    assert 'asset_group_dropdown' in body
    
    body = api_client.get('/api/schedules/upcoming/', {'days': 30}).json()
    assert len(body['result']) == 2


def test_upcoming_rejects_bad_days(api_client):
    assert api_client.get('/api/schedules/upcoming/', {'days': 'soon'}).status_code == 400
    assert api_client.get('/api/schedules/upcoming/', {'days': -2}).status_code == 400


def test_due_notifications_and_skip(api_client, make_schedule):
    due_at = timezone.now() + timedelta(days=2)
    schedule = make_schedule(next_due_at=due_at, notify_before_days=5)
    make_schedule(next_due_at=timezone.now() + timedelta(days=30), notify_before_days=5)
    due_date = timezone.localdate(due_at).isoformat()
    
    body = api_client.get('/api/notifications/due/').json()
    assert [n['schedule_id'] for n in body] == [schedule.id]
    assert body[0]['next_due_date'] == due_date
    assert body[0]['action_url'] == f'/maintenance?scheduleId={schedule.id}'
    
    url = f'/api/notifications/schedule/{schedule.id}/due/{due_date}/skip/'
    assert api_client.delete(url).status_code == 204
    assert api_client.delete(url).status_code == 204
    assert MaintenanceNotificationSkip.objects.count() == 1
    assert api_client.get('/api/notifications/due/').json() == []


def test_skip_rejects_bad_date(api_client, make_schedule):
    schedule = make_schedule()
    response = api_client.delete(f'/api/notifications/schedule/{schedule.id}/due/not-a-date/skip/')
    assert response.status_code == 400
    assert response.json()['code'] == 'INVALID_DATE'


def test_skip_unknown_schedule(api_client):
    assert api_client.delete('/api/notifications/schedule/404/due/2025-03-01/skip/').status_code == 404


def test_asset_group_dropdown(api_client, asset_group):
    response = api_client.get('/api/asset-groups/dropdown/')
    assert response.status_code == 200
    assert response.json() == [{'id': asset_group.id, 'name': 'Air conditioner'}]


def test_health_check(client):
    response = client.get('/health/')
    assert response.status_code == 200
    assert response.json()['status'] == 'healthy'
    assert 'X-Request-ID' in response
