"""
Health check endpoints.

- /health/        liveness (process is up)
- /health/ready/  readiness (database and cache reachable)
- /health/deep/   readiness plus schedule table statistics
"""

import time
import logging
from django.http import JsonResponse
from django.db import connection, DatabaseError
from django.core.cache import cache
from django.urls import path
from django.views.decorators.http import require_GET
from django.views.decorators.csrf import csrf_exempt

logger = logging.getLogger(__name__)


def _check_database():
    """Round-trip a trivial query; returns latency in ms"""
    start = time.time()
    with connection.cursor() as cursor:
        cursor.execute('SELECT 1')
        cursor.fetchone()
    return round((time.time() - start) * 1000, 2)


def _check_cache():
    """Write then read a probe key; returns latency in ms or None on mismatch"""
    start = time.time()
    cache.set('health_check_probe', 'ok', 10)
    ok = cache.get('health_check_probe') == 'ok'
    cache.delete('health_check_probe')
    return round((time.time() - start) * 1000, 2) if ok else None


def _run_checks():
    checks = {
        'database': {'status': False, 'latency_ms': None},
        'cache': {'status': False, 'latency_ms': None},
    }
    errors = []
    
    try:
        checks['database'] = {'status': True, 'latency_ms': _check_database()}
    except DatabaseError as e:
        errors.append(f'Database: {e}')
        logger.error(f'Health check - Database error: {e}')
    
    latency = _check_cache()
    if latency is None:
        errors.append('Cache: Failed to read/write')
    else:
        checks['cache'] = {'status': True, 'latency_ms': latency}
    
    return checks, errors


@csrf_exempt
@require_GET
def health_check(request):
    """
    Basic health check - returns 200 if app is running.
    Used by load balancers and container orchestration.
    """
    return JsonResponse({
        'status': 'healthy',
        'timestamp': time.time(),
    })


@csrf_exempt
@require_GET
def readiness_check(request):
    """Readiness check - database and cache connectivity"""
    checks, errors = _run_checks()
    ready = all(check['status'] for check in checks.values())
    
    return JsonResponse({
        'status': 'ready' if ready else 'not_ready',
        'timestamp': time.time(),
        'checks': checks,
        'errors': errors or None,
    }, status=200 if ready else 503)


@csrf_exempt
@require_GET
def deep_health_check(request):
    """Readiness plus counts from the maintenance tables (verifies the schema)"""
    from maintenance.models import MaintenanceSchedule, MaintenanceNotificationSkip
    from asset_groups.models import AssetGroup
    
    checks, errors = _run_checks()
    healthy = all(check['status'] for check in checks.values())
    
    if checks['database']['status']:
        try:
            checks['models'] = {
                'status': True,
                'details': {
                    'asset_groups': AssetGroup.objects.count(),
                    'schedules': MaintenanceSchedule.objects.count(),
                    'pending_schedules': MaintenanceSchedule.objects.filter(next_due_at__isnull=False).count(),
                    'notification_skips': MaintenanceNotificationSkip.objects.count(),
                },
            }
        except DatabaseError as e:
            checks['models'] = {'status': False, 'details': {}}
            errors.append(f'Models: {e}')
            logger.error(f'Deep health check - Model error: {e}')
    
    return JsonResponse({
        'status': 'healthy' if healthy else 'unhealthy',
        'timestamp': time.time(),
        'checks': checks,
        'errors': errors or None,
    }, status=200 if healthy else 503)


def get_health_urls():
    """
    Returns URL patterns for health endpoints.
    Add to your urls.py:
        from common.health import get_health_urls
        urlpatterns += get_health_urls()
    """
    return [
        path('health/', health_check, name='health_check'),
        path('health/ready/', readiness_check, name='readiness_check'),
        path('health/deep/', deep_health_check, name='deep_health_check'),
    ]
