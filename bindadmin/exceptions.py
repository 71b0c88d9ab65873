from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.exceptions import APIException


class ZoneFileError(Exception):
    """The generated configuration of a zone is not valid."""


class PushError(Exception):
    """Transferring the generated configuration to a server failed."""


class UnprocessableEntity(APIException):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = _('Changes attempted to this entity are not permitted.')


class PushFailed(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = _('Could not push the configuration to the servers.')
    default_code = 'push_failed'
