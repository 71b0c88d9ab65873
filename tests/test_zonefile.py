# pylint: disable=no-member,unused-argument,redefined-outer-name
import pytest

from bindadmin import zonefile
from bindadmin.exceptions import ZoneFileError
from factories.bindadmin.server_factory import ServerFactory
from factories.bindadmin.zone_factory import RecordFactory, SlaveZoneFactory, ZoneFactory
from tests.fixtures import config, servers, today, zone  # noqa: F401


@pytest.mark.django_db
def test_render_zone_file(zone, servers, config):
    text = zonefile.render_zone_file(zone, config, servers)
    lines = text.splitlines()

    assert lines[0] == '$ORIGIN example.com.'
    assert lines[1] == '$TTL 172800'
    assert lines[2].startswith('@                IN\tSOA\tdns1.example.com. hostmaster.example.com. (')  # noqa: E501
    assert '2024030500 ; Serial (aaaammddvv)' in text
    assert '@                         IN\tNS\tdns1.example.com.' in lines
    assert '@                         IN\tNS\tdns2.example.com.' in lines
    assert '@                         IN\tMX\t10 mail.example.com.' in lines
    assert 'www                       IN\tA\t192.0.2.10' in lines
    assert text.endswith('\n')

    zonefile.validate_zone_file(zone, text)


@pytest.mark.django_db
def test_render_zone_file_record_ttl_and_txt_quoting(zone, servers, config):
    RecordFactory(zone=zone, name='txt', type='TXT', ttl=300, data='v=spf1 -all')
    RecordFactory(zone=zone, name='quoted', type='TXT', data='"already quoted"')

    text = zonefile.render_zone_file(zone, config, servers)

    assert 'txt              300      IN\tTXT\t"v=spf1 -all"' in text.splitlines()
    assert 'quoted                    IN\tTXT\t"already quoted"' in text.splitlines()
    zonefile.validate_zone_file(zone, text)


@pytest.mark.django_db
def test_zone_file_uses_custom_default_ttl(today, config):
    zone = ZoneFactory(domain='custom.com', custom_settings=True, refresh=3600, retry=600,
                       expire=604800, negative_ttl=300, default_ttl=900)
    text = zonefile.render_zone_file(zone, config, [ServerFactory()])
    assert text.splitlines()[1] == '$TTL 900'


@pytest.mark.django_db
def test_invalid_record_fails_validation(zone, servers, config):
    RecordFactory(zone=zone, name='bad', type='A', data='not-an-address')
    text = zonefile.render_zone_file(zone, config, servers)
    with pytest.raises(ZoneFileError) as excp:
        zonefile.validate_zone_file(zone, text)
    assert str(excp.value).startswith('example.com: ')


@pytest.mark.django_db
def test_zone_without_name_servers_fails_validation(zone, config):
    text = zonefile.render_zone_file(zone, config, [])
    with pytest.raises(ZoneFileError):
        zonefile.validate_zone_file(zone, text)


@pytest.mark.django_db
def test_slave_zones_have_no_zone_file(config):
    with pytest.raises(ZoneFileError):
        zonefile.render_zone_file(SlaveZoneFactory(), config)


@pytest.mark.django_db
def test_master_server_config(zone, servers):
    slave_zone = SlaveZoneFactory(domain='mirror.org', master_server='198.51.100.53')
    master, _ = servers

    conf = zonefile.render_server_config(master, [zone, slave_zone], [master],
                                         zone_dir='/var/named')

    assert conf.startswith('// Generated by bindadmin for dns1.example.com.')
    assert ('zone "example.com" {\n'
            '    type master;\n'
            '    file "/var/named/example.com";\n'
            '};') in conf
    assert ('zone "mirror.org" {\n'
            '    type slave;\n'
            '    file "/var/named/mirror.org";\n'
            '    masters { 198.51.100.53; };\n'
            '};') in conf


@pytest.mark.django_db
def test_slave_server_config(zone, servers):
    master, slave = servers

    conf = zonefile.render_server_config(slave, [zone], [master], zone_dir='/var/named')

    assert ('zone "example.com" {\n'
            '    type slave;\n'
            '    file "/var/named/example.com";\n'
            '    masters { 192.0.2.1; };\n'
            '};') in conf


@pytest.mark.django_db
def test_slave_server_needs_a_master(zone, servers):
    _, slave = servers
    with pytest.raises(ZoneFileError):
        zonefile.render_server_config(slave, [zone], [])


@pytest.mark.django_db
def test_server_config_uses_server_directory(zone):
    server = ServerFactory(hostname='ns1.example.org', directory='/var/lib/bind',
                           template='/etc/bind/named.conf.local')

    conf = zonefile.render_server_config(server, [zone], [server])

    assert conf.startswith('// Generated by bindadmin for ns1.example.org. Do not edit.\n'
                           '// Included from /etc/bind/named.conf.local.\n')
    assert '    file "/var/lib/bind/example.com";\n' in conf
