from collections import OrderedDict
from logging import getLogger

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models, transaction

from bindadmin import activity
from bindadmin.serial import generate_serial_number
from bindadmin.validators import (validate_domain, validate_hostname,
                                  validate_record_name, validate_serial,
                                  validate_directory)


logger = getLogger(__name__)

SERVER_TYPES = OrderedDict([
    ("master", "master"),
    ("slave", "slave"),
])

RECORD_TYPES = ['A', 'AAAA', 'CNAME', 'MX', 'NS', 'PTR', 'SRV', 'TXT']
RECORD_TYPE_CHOICES = [(rtype, rtype) for rtype in RECORD_TYPES]
PRIORITY_RECORD_TYPES = {'MX', 'SRV'}

TIMER_FIELDS = ('refresh', 'retry', 'expire', 'negative_ttl', 'default_ttl')
TIMER_SETTINGS = tuple('zone_default_' + field for field in TIMER_FIELDS)


class Server(models.Model):
    hostname = models.CharField(max_length=255, unique=True, validators=[validate_hostname])
    ip_address = models.GenericIPAddressField(unique=True, verbose_name='IP Address')
    type = models.CharField(max_length=10, choices=list(SERVER_TYPES.items()),
                            default=SERVER_TYPES['master'])
    ns_record = models.BooleanField(
        default=True, help_text='Publish this server as a NS record of the master zones')
    push_updates = models.BooleanField(
        default=True, help_text='Push the generated configuration to this server')
    directory = models.CharField(
        max_length=255, validators=[validate_directory],
        help_text='Directory holding the zone files on the server')
    template = models.CharField(
        max_length=255, blank=True, default='',
        help_text='named.conf on the server that includes the generated zone statements')
    script = models.CharField(
        max_length=255, blank=True, default='',
        help_text='Command reloading BIND once the files are in place')
    active = models.BooleanField(default=True)

    class Meta:
        ordering = ('hostname',)

    def save(self, *args, **kwargs):
        self.hostname = self.hostname.lower()
        return super().save(*args, **kwargs)

    def is_master(self):
        return self.type == SERVER_TYPES['master']

    def __str__(self):
        return '{} ({})'.format(self.hostname, self.ip_address)


class Zone(models.Model):
    """
    A DNS zone served by the BIND servers.

    A zone without `master_server` is a master zone: its records live here and
    its zone file is generated by the push. Otherwise it's a slave zone that
    mirrors `master_server`.

    `has_modifications` tells whether the configuration pushed to the servers
    is stale. Edits made while the flag is set accumulate under the same
    serial, see `raise_serial_number`.

    See https://www.ietf.org/rfc/rfc1035.txt
    """
    domain = models.CharField(max_length=255, unique=True, validators=[validate_domain])
    serial = models.PositiveBigIntegerField(
        default=generate_serial_number, editable=False, validators=[validate_serial])
    master_server = models.GenericIPAddressField(
        null=True, blank=True, default=None,
        help_text='Leave empty for master zones')
    custom_settings = models.BooleanField(
        default=False, help_text='Use the timers below instead of the defaults')
    refresh = models.PositiveIntegerField(null=True, blank=True)
    retry = models.PositiveIntegerField(null=True, blank=True)
    expire = models.PositiveIntegerField(null=True, blank=True)
    negative_ttl = models.PositiveIntegerField(null=True, blank=True)
    default_ttl = models.PositiveIntegerField(null=True, blank=True)
    has_modifications = models.BooleanField(default=True, editable=False)
    deleted = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['domain']

    def clean(self):
        self.domain = self.domain.lower()
        if self.pk is not None and not self.is_master_zone() and self.records.exists():
            raise ValidationError({
                'master_server': 'Remove the records before turning the zone into a slave zone.'})
        if self.custom_settings:
            errors = {
                field: 'This field is required when using custom settings.'
                for field in TIMER_FIELDS if getattr(self, field) is None
            }
            if errors:
                raise ValidationError(errors)
        super().clean()

    def save(self, *args, **kwargs):
        self.domain = self.domain.lower()
        return super().save(*args, **kwargs)

    def _persist(self, *fields):
        if self.pk is None:
            self.save()
        else:
            self.save(update_fields=fields)

    def has_pending_changes(self):
        return self.has_modifications

    def set_pending_changes(self, value=True):
        """Marks / unmarks pending changes. Only writes when the flag changes."""
        if self.has_pending_changes() != value:
            self.has_modifications = value
            self._persist('has_modifications')
        return self.has_modifications

    def raise_serial_number(self, force=False):
        """
        Raise the serial number, if needed, and return it.

        A zone with pending changes keeps its serial: the secondaries haven't
        seen the previous one yet. Pass `force` to raise it anyway.
        """
        current_serial = self.serial
        if self.has_pending_changes() and not force:
            return current_serial

        now_serial = generate_serial_number()
        if current_serial >= now_serial:
            self.serial = current_serial + 1
        else:
            self.serial = now_serial

        self.has_modifications = True
        self._persist('serial', 'has_modifications', 'updated_at')
        logger.debug('raised serial of %s to %s', self.domain, self.serial)
        return self.serial

    def is_master_zone(self):
        return self.master_server is None

    def get_type_of_zone(self):
        return 'master' if self.is_master_zone() else 'slave'

    @transaction.atomic
    def soft_delete(self):
        self.deleted = True
        self.has_modifications = True
        self.save(update_fields=['deleted', 'has_modifications'])
        activity.log_activity(activity.DELETED, self)

    @transaction.atomic
    def restore(self):
        self.deleted = False
        self.has_modifications = True
        self.save(update_fields=['deleted', 'has_modifications'])
        activity.log_activity(activity.RESTORED, self)

    @classmethod
    def active(cls):
        return cls.objects.filter(deleted=False)

    @classmethod
    def with_pending_changes(cls):
        return cls.active().filter(has_modifications=True)

    @classmethod
    def only_master_zones(cls):
        return cls.active().filter(master_server=None)

    def __str__(self):
        return self.domain


class Record(models.Model):
    zone = models.ForeignKey(Zone, on_delete=models.CASCADE, related_name='records')
    name = models.CharField(max_length=255, validators=[validate_record_name])
    type = models.CharField(max_length=10, choices=RECORD_TYPE_CHOICES)
    ttl = models.PositiveIntegerField(null=True, blank=True)
    priority = models.PositiveIntegerField(null=True, blank=True)
    data = models.CharField(max_length=255)

    class Meta:
        ordering = ('name', 'type', 'priority', 'data')

    def clean(self):
        errors = {}
        if self.zone_id is not None and not self.zone.is_master_zone():
            errors['zone'] = 'Records can only be added to master zones.'
        if self.type in PRIORITY_RECORD_TYPES and self.priority is None:
            errors['priority'] = 'Priority is required for {} records.'.format(self.type)
        if self.type not in PRIORITY_RECORD_TYPES and self.priority is not None:
            errors['priority'] = 'Priority is only allowed for MX and SRV records.'
        if errors:
            raise ValidationError(errors)
        super().clean()

    def __str__(self):
        return '{} {} {}'.format(self.name, self.type, self.data)


class Setting(models.Model):
    key = models.CharField(max_length=64, unique=True)
    value = models.CharField(max_length=255)

    class Meta:
        ordering = ('key',)

    def clean(self):
        if self.key not in settings.BINDADMIN_DEFAULTS:
            raise ValidationError({'key': 'Unknown setting {!r}.'.format(self.key)})
        if self.key in TIMER_SETTINGS:
            error = ValidationError({'value': 'Enter a positive number of seconds.'})
            try:
                value = int(self.value)
            except ValueError:
                raise error
            if value <= 0:
                raise error
            self.value = str(value)
        super().clean()

    def __str__(self):
        return '{} = {}'.format(self.key, self.value)


class ActivityLog(models.Model):
    event = models.CharField(max_length=16)
    domain = models.CharField(max_length=255)
    description = models.TextField()
    zone = models.ForeignKey(Zone, on_delete=models.SET_NULL, null=True, blank=True,
                             related_name='activity')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ('-created_at', '-id')

    def __str__(self):
        return self.description
