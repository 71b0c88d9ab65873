"""
BIND configuration generated for the servers: zone files for the master zones
and the `zone` statements of named.conf.
"""
import posixpath

import dns.exception
import dns.zone

from bindadmin.exceptions import ZoneFileError
from bindadmin.soa import SOAFormatter


RECORD_FORMAT = "%-16s %-8s IN\t%s\t%s"
CONFIG_FILENAME = 'named.conf'


def quote_txt(data):
    if data.startswith('"'):
        return data
    return '"{}"'.format(data.replace('"', '\\"'))


def format_record(record):
    data = record.data
    if record.type == 'TXT':
        data = quote_txt(data)
    if record.priority is not None:
        data = '{} {}'.format(record.priority, data)
    ttl = '' if record.ttl is None else str(record.ttl)
    return RECORD_FORMAT % (record.name, ttl, record.type, data)


def zone_filename(zone):
    return zone.domain


def render_zone_file(zone, config, name_servers=()):
    if not zone.is_master_zone():
        raise ZoneFileError('{} is a slave zone, it has no zone file'.format(zone.domain))

    soa = SOAFormatter(zone, config)
    lines = [
        '$ORIGIN {}.'.format(zone.domain),
        '$TTL {}'.format(soa.timers.get_default_ttl()),
        soa.get_soa_record(),
        '',
        '; Name servers',
    ]
    for server in name_servers:
        lines.append(RECORD_FORMAT % ('@', '', 'NS', server.hostname + '.'))

    lines.append('')
    lines.append('; Records')
    for record in zone.records.all():
        lines.append(format_record(record))

    return '\n'.join(lines) + '\n'


def validate_zone_file(zone, text):
    """Parse `text` the way BIND would load it, raising ZoneFileError on failure."""
    try:
        dns.zone.from_text(text, origin=zone.domain + '.', relativize=True)
    except dns.exception.DNSException as e:
        raise ZoneFileError('{}: {}'.format(zone.domain, e))


def _zone_statement(domain, zone_type, path, masters=None):
    lines = ['zone "{}" {{'.format(domain),
             '    type {};'.format(zone_type),
             '    file "{}";'.format(path)]
    if masters:
        lines.append('    masters {{ {}; }};'.format('; '.join(masters)))
    lines.append('};')
    return '\n'.join(lines)


def render_server_config(server, zones, master_servers=(), zone_dir=None):
    """
    The zone statements of named.conf for `server`.

    Master servers load master zones from their zone file; everything else is
    a slave zone, fed either by the zone's own master or by `master_servers`.
    Zone files live in `zone_dir`, the server's directory by default.
    """
    if zone_dir is None:
        zone_dir = server.directory
    master_ips = [master.ip_address for master in master_servers]

    statements = []
    for zone in zones:
        path = posixpath.join(zone_dir, zone_filename(zone))
        if not zone.is_master_zone():
            statements.append(
                _zone_statement(zone.domain, 'slave', path, [zone.master_server]))
        elif server.is_master():
            statements.append(_zone_statement(zone.domain, 'master', path))
        else:
            if not master_ips:
                raise ZoneFileError(
                    'No active master server to transfer {} from'.format(zone.domain))
            statements.append(_zone_statement(zone.domain, 'slave', path, master_ips))

    header = '// Generated by bindadmin for {}. Do not edit.'.format(server.hostname)
    if server.template:
        header += '\n// Included from {}.'.format(server.template)
    return '\n\n'.join([header] + statements) + '\n'
