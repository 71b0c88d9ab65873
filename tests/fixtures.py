# pylint: disable=no-member,unused-argument,protected-access,redefined-outer-name
import datetime

import pytest
from django.contrib.auth import get_user_model
from django_dynamic_fixture import G
from mock import patch
from rest_framework.test import APIClient

from bindadmin.exceptions import PushError
from bindadmin.push import LocalDirectoryTransport
from bindadmin.registry import Registry
from factories.bindadmin.server_factory import ServerFactory
from factories.bindadmin.zone_factory import RecordFactory, ZoneFactory

TODAY = datetime.date(2024, 3, 5)
TODAY_SERIAL = 2024030500

CONFIG = {
    'zone_default_mname': 'dns1.example.com',
    'zone_default_rname': 'hostmaster@example.com',
    'zone_default_refresh': 86400,
    'zone_default_retry': 7200,
    'zone_default_expire': 3628800,
    'zone_default_negative_ttl': 7200,
    'zone_default_default_ttl': 172800,
}


class RecordingTransport:
    """Keeps the pushed files in memory, {(hostname, filename): content}"""

    def __init__(self, fail_on=None):
        self.files = {}
        self._fail_on = fail_on

    def put(self, server, filename, content):
        if self._fail_on == server.hostname:
            raise PushError('{} is unreachable'.format(server.hostname))
        self.files[(server.hostname, filename)] = content


@pytest.fixture
def today():
    with patch('bindadmin.serial.timezone.localdate', return_value=TODAY):
        yield TODAY


@pytest.fixture
def config():
    return Registry(CONFIG)


@pytest.fixture
def api_client(db):
    user = G(get_user_model())
    client = APIClient(format='json')
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def zone(db, today):
    """A pushed master zone with a couple of records."""
    zone = ZoneFactory(domain='example.com')
    RecordFactory(zone=zone, name='www', type='A', data='192.0.2.10')
    RecordFactory(zone=zone, name='@', type='MX', priority=10, data='mail.example.com.')
    zone.set_pending_changes(False)
    return zone


@pytest.fixture
def servers(db):
    return [
        ServerFactory(hostname='dns1.example.com', ip_address='192.0.2.1', type='master'),
        ServerFactory(hostname='dns2.example.com', ip_address='192.0.2.2', type='slave'),
    ]


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def local_transport(tmp_path):
    return LocalDirectoryTransport(str(tmp_path))
