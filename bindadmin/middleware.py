from rest_framework.views import exception_handler

from bindadmin.exceptions import PushError, PushFailed, ZoneFileError


def custom_exception_handler(excp, context):
    # Call REST framework's default exception handler first,
    # to get the standard error response.
    if isinstance(excp, (PushError, ZoneFileError)):
        excp = PushFailed(detail=str(excp))
    return exception_handler(excp, context)
