from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


class Registry:
    """
    Key/value lookup of the zone defaults.

    Starts from `settings.BINDADMIN_DEFAULTS`; `overrides` win over them.
    """

    def __init__(self, overrides=None):
        self._values = dict(settings.BINDADMIN_DEFAULTS)
        self._values.update(overrides or {})

    @classmethod
    def load(cls):
        """Build a registry with the Setting rows edited in the admin."""
        from bindadmin.models import Setting
        return cls({setting.key: setting.value for setting in Setting.objects.all()})

    def get(self, key):
        try:
            return self._values[key]
        except KeyError:
            raise ImproperlyConfigured('Missing zone setting {!r}'.format(key))

    def __contains__(self, key):
        return key in self._values
