"""
DRF exception handler for application exceptions
"""
import logging
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler
from core.exceptions import (
    BaseApplicationException, ValidationError, NotFoundError,
    PermissionDeniedError, BusinessLogicError,
)

logger = logging.getLogger(__name__)

STATUS_BY_EXCEPTION = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (BusinessLogicError, status.HTTP_409_CONFLICT),
]


def application_exception_handler(exc, context):
    """
    Map BaseApplicationException subclasses to JSON error responses.
    Anything else goes to DRF's default handler.
    """
    if not isinstance(exc, BaseApplicationException):
        return exception_handler(exc, context)
    
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for exc_class, code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_class):
            status_code = code
            break
    
    request = context.get('request')
    request_id = getattr(request, 'request_id', 'N/A')
    if status_code >= 500:
        logger.error(f"[{request_id}] {type(exc).__name__}: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"[{request_id}] {type(exc).__name__}: {exc.message}")
    
    return Response(
        {'detail': exc.message, 'code': exc.code, 'details': exc.details},
        status=status_code
    )
