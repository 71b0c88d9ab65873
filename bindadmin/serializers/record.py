from contextlib import contextmanager

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from rest_framework import serializers
from rest_framework.exceptions import ValidationError
from rest_framework.reverse import reverse

from bindadmin.models import Record

RECORD_FIELDS = ['name', 'type', 'ttl', 'priority', 'data']


@contextmanager
def interpret_validation_error():
    try:
        yield
    except DjangoValidationError as error:
        raise ValidationError(error.message_dict)


class RecordSerializer(serializers.ModelSerializer):
    fqdn = serializers.SerializerMethodField()
    url = serializers.SerializerMethodField()

    class Meta:
        model = Record
        fields = ['id', 'url', 'fqdn'] + RECORD_FIELDS

    def get_fqdn(self, obj):
        domain = obj.zone.domain
        if obj.name == '@':
            return domain
        return '{}.{}'.format(obj.name, domain)

    def get_url(self, obj):
        return reverse('record-detail', request=self.context.get('request'),
                       kwargs={'zone_id': obj.zone_id, 'record_id': obj.pk})

    def validate(self, data):
        values = {}
        if self.instance is not None:
            values = {field: getattr(self.instance, field) for field in RECORD_FIELDS}
        values.update(data)
        record = Record(zone=self.context['zone'], **values)
        with interpret_validation_error():
            record.clean()
        return data

    @transaction.atomic
    def create(self, validated_data):
        zone = self.context['zone']
        record = Record.objects.create(zone=zone, **validated_data)
        zone.raise_serial_number()
        return record

    @transaction.atomic
    def update(self, record, validated_data):
        for attr, value in validated_data.items():
            setattr(record, attr, value)
        record.save()
        self.context['zone'].raise_serial_number()
        return record
