from django.db import transaction
from rest_framework import serializers
from rest_framework.reverse import reverse

from bindadmin.models import Zone, TIMER_FIELDS
from bindadmin.registry import Registry
from bindadmin.soa import SOAFormatter, TimerResolver


class ZoneListSerializer(serializers.HyperlinkedModelSerializer):
    type = serializers.SerializerMethodField()

    class Meta:
        model = Zone
        fields = ['domain', 'url', 'id', 'serial', 'master_server', 'type',
                  'has_modifications']
        read_only_fields = ['serial', 'has_modifications']

    def get_type(self, obj):
        return obj.get_type_of_zone()

    @transaction.atomic
    def create(self, validated_data):
        return Zone.objects.create(**validated_data)

    def validate_domain(self, value):
        value = value.lower()
        if Zone.objects.filter(domain=value).exists():
            raise serializers.ValidationError('A zone with this domain already exists.')
        return value

    def validate_master_server(self, value):
        return value or None


class ZoneDetailSerializer(serializers.HyperlinkedModelSerializer):
    type = serializers.SerializerMethodField()
    timers = serializers.SerializerMethodField()
    soa = serializers.SerializerMethodField()
    records_url = serializers.SerializerMethodField()

    class Meta:
        model = Zone
        fields = ['domain', 'url', 'id', 'serial', 'master_server', 'type', 'has_modifications',
                  'custom_settings', 'refresh', 'retry', 'expire', 'negative_ttl',
                  'default_ttl', 'timers', 'soa', 'records_url']
        read_only_fields = ['domain', 'serial', 'has_modifications']

    def _get_config(self):
        config = self.context.get('config')
        if config is None:
            config = self.context['config'] = Registry.load()
        return config

    def get_type(self, obj):
        return obj.get_type_of_zone()

    def get_timers(self, obj):
        return TimerResolver(obj, self._get_config()).as_dict()

    def get_soa(self, obj):
        return SOAFormatter(obj, self._get_config()).get_soa_record()

    def get_records_url(self, obj):
        if not obj.is_master_zone():
            return None
        request = self.context.get('request')
        return reverse('record-create', request=request,
                       kwargs={
                           'zone_id': obj.pk
                       })

    def validate_master_server(self, value):
        return value or None

    def validate(self, data):
        if (self.instance is not None and data.get('master_server') is not None
                and self.instance.records.exists()):
            raise serializers.ValidationError({
                'master_server': ['Remove the records before turning the zone into a slave zone.']
            })
        custom_settings = data.get('custom_settings',
                                   getattr(self.instance, 'custom_settings', False))
        if custom_settings:
            errors = {
                field: ['This field is required when using custom settings.']
                for field in TIMER_FIELDS
                if data.get(field, getattr(self.instance, field, None)) is None
            }
            if errors:
                raise serializers.ValidationError(errors)
        return data

    @transaction.atomic
    def update(self, zone, validated_data):
        for attr, value in validated_data.items():
            setattr(zone, attr, value)
        zone.save()
        zone.raise_serial_number()
        return zone
