# pylint: disable=no-member,unused-argument,redefined-outer-name
import pytest
from mock import patch

from bindadmin import models as m
from bindadmin.exceptions import PushError
from bindadmin.push import LocalDirectoryTransport
from tests.fixtures import api_client, servers, today, zone  # noqa: F401


@pytest.mark.django_db
def test_health_check(client):
    response = client.get('/_health')
    assert response.status_code == 200
    assert response.json() == {'status': 'ok'}


@pytest.mark.django_db
def test_push(api_client, zone, servers, settings, tmp_path):
    settings.BINDADMIN_PUSH_DIR = str(tmp_path)
    zone.raise_serial_number()

    response = api_client.post('/push')

    assert response.status_code == 200, response.data
    assert response.data == {'pushed': ['example.com']}
    assert not m.Zone.objects.get(pk=zone.pk).has_pending_changes()
    assert (tmp_path / 'dns1.example.com' / 'example.com').exists()


@pytest.mark.django_db
def test_push_failure(api_client, zone, servers):
    zone.raise_serial_number()

    with patch.object(LocalDirectoryTransport, 'put', side_effect=PushError('disk full')):
        response = api_client.post('/push')

    assert response.status_code == 503
    assert response.data == {'detail': 'disk full'}
    assert m.Zone.objects.get(pk=zone.pk).has_pending_changes()
