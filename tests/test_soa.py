# pylint: disable=redefined-outer-name
import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from bindadmin.models import Zone
from bindadmin.registry import Registry
from bindadmin.soa import SOAFormatter, TimerResolver
from tests.fixtures import config  # noqa: F401

PAD = ' ' * 41


def custom_zone(**kwargs):
    timers = dict(refresh=3600, retry=600, expire=604800, negative_ttl=300, default_ttl=900)
    timers.update(kwargs)
    return Zone(domain='example.com', serial=2024030500, custom_settings=True, **timers)


def test_default_timers_ignore_zone_values(config):
    zone = custom_zone(custom_settings=False)
    timers = TimerResolver(zone, config)
    assert timers.get_refresh() == 86400
    assert timers.get_retry() == 7200
    assert timers.get_expire() == 3628800
    assert timers.get_negative_ttl() == 7200
    assert timers.get_default_ttl() == 172800


def test_custom_timers(config):
    timers = TimerResolver(custom_zone(), config)
    assert timers.as_dict() == {
        'refresh': 3600,
        'retry': 600,
        'expire': 604800,
        'negative_ttl': 300,
        'default_ttl': 900,
    }


def test_custom_zone_missing_a_timer_uses_default(config):
    timers = TimerResolver(custom_zone(retry=None), config)
    assert timers.get_retry() == 7200
    assert timers.get_refresh() == 3600


def test_timer_values_from_settings_rows_are_converted():
    config = Registry({'zone_default_refresh': '1800'})
    zone = Zone(domain='example.com')
    assert TimerResolver(zone, config).get_refresh() == 1800


def test_soa_record_layout(config):
    zone = Zone(domain='example.com', serial=2024030500)
    expected = (
        '@               ' + ' IN\tSOA\tdns1.example.com. hostmaster.example.com. (\n' +
        PAD + '2024030500 ; Serial (aaaammddvv)\n' +
        PAD + '86400      ; Refresh\n' +
        PAD + '7200       ; Retry\n' +
        PAD + '3628800    ; Expire\n' +
        PAD + '7200       ; Negative TTL\n' +
        ')'
    )
    assert SOAFormatter(zone, config).get_soa_record() == expected


def test_soa_record_with_custom_timers(config):
    soa = SOAFormatter(custom_zone(), config).get_soa_record()
    assert soa.splitlines()[2] == PAD + '3600       ; Refresh'
    assert soa.splitlines()[5] == PAD + '300        ; Negative TTL'


def test_hostmaster_email_uses_dots(config):
    formatter = SOAFormatter(Zone(domain='example.com'), config)
    assert formatter.get_hostmaster_email() == 'hostmaster.example.com'
    assert formatter.get_primary_name_server() == 'dns1.example.com'


@override_settings(BINDADMIN_DEFAULTS={'zone_default_mname': 'ns.example.org'})
def test_registry_defaults_come_from_settings():
    config = Registry({'zone_default_rname': 'admin@example.org'})
    assert config.get('zone_default_mname') == 'ns.example.org'
    assert config.get('zone_default_rname') == 'admin@example.org'
    with pytest.raises(ImproperlyConfigured):
        config.get('zone_default_refresh')


@pytest.mark.django_db
def test_registry_load_uses_setting_rows():
    from bindadmin.models import Setting
    Setting.objects.create(key='zone_default_mname', value='ns9.example.com')
    config = Registry.load()
    assert config.get('zone_default_mname') == 'ns9.example.com'
    assert 'zone_default_retry' in config
