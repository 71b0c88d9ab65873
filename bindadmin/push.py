import os
from logging import getLogger

from django.conf import settings
from django.db import transaction

from bindadmin import zonefile
from bindadmin.exceptions import PushError
from bindadmin.models import TIMER_FIELDS, Server, Zone
from bindadmin.registry import Registry


logger = getLogger(__name__)


class Transport:
    """Delivers generated files to a BIND server."""

    def put(self, server, filename, content):
        raise NotImplementedError


class LocalDirectoryTransport(Transport):
    """Writes the files under `<base_dir>/<server hostname>/`."""

    def __init__(self, base_dir=None):
        self.base_dir = base_dir or settings.BINDADMIN_PUSH_DIR

    def put(self, server, filename, content):
        server_dir = os.path.join(self.base_dir, server.hostname)
        path = os.path.join(server_dir, filename)
        try:
            os.makedirs(server_dir, exist_ok=True)
            with open(path, 'w') as f:
                f.write(content)
        except OSError as e:
            raise PushError('Could not write {}: {}'.format(path, e))
        logger.debug('wrote %s', path)


def build_files(servers, zones, stale_zones, config):
    """Render every file of every server, {server: [(filename, content)]}."""
    name_servers = [server for server in servers if server.ns_record]
    master_servers = [server for server in servers if server.is_master()]

    zone_files = []
    for zone in stale_zones:
        if not zone.is_master_zone():
            continue
        text = zonefile.render_zone_file(zone, config, name_servers)
        zonefile.validate_zone_file(zone, text)
        zone_files.append((zonefile.zone_filename(zone), text))

    files = {}
    for server in servers:
        if not server.push_updates:
            continue
        server_files = [(zonefile.CONFIG_FILENAME,
                         zonefile.render_server_config(server, zones, master_servers))]
        if server.is_master():
            server_files.extend(zone_files)
        files[server] = server_files
    return files


def push_updates(transport=None, config=None):
    """
    Push the configuration of the zones with pending changes.

    Everything is rendered and validated before the first file leaves, and
    the zones are marked clean only when all servers got their files.
    Returns the pushed zones.
    """
    stale_zones = list(Zone.with_pending_changes().prefetch_related('records'))
    # deleted zones only need to leave named.conf
    removed_zones = list(Zone.objects.filter(deleted=True, has_modifications=True))
    if not stale_zones and not removed_zones:
        logger.info('No zones with pending changes')
        return []

    if transport is None:
        transport = LocalDirectoryTransport()
    if config is None:
        config = Registry.load()

    servers = list(Server.objects.filter(active=True))
    zones = list(Zone.active())
    files = build_files(servers, zones, stale_zones, config)
    if not files:
        logger.warning('No servers to push the pending changes to')
        return []

    pushed_zones = stale_zones + removed_zones
    snapshots = {zone.pk: zone_snapshot(zone) for zone in pushed_zones}

    for server, server_files in files.items():
        for filename, content in server_files:
            transport.put(server, filename, content)
        logger.info('pushed %d files to %s', len(server_files), server.hostname)
        if server.script:
            logger.info('%s needs `%s` to load the changes', server.hostname, server.script)

    mark_pushed(snapshots)
    return pushed_zones


SNAPSHOT_FIELDS = ('domain', 'serial', 'master_server', 'custom_settings', 'deleted',
                   *TIMER_FIELDS)


def zone_snapshot(zone):
    """What the push rendered for `zone`: its own fields and its records."""
    records = tuple(
        (record.pk, record.name, record.type, record.ttl, record.priority, record.data)
        for record in zone.records.all())
    return tuple(getattr(zone, field) for field in SNAPSHOT_FIELDS) + (records,)


@transaction.atomic
def mark_pushed(snapshots):
    """
    Clear the pending changes of the pushed zones.

    A zone edited after it was rendered stays dirty, so the next push sends
    the edit.
    """
    current = (Zone.objects.select_for_update()
               .filter(pk__in=snapshots)
               .prefetch_related('records'))
    for zone in current:
        if zone_snapshot(zone) != snapshots[zone.pk]:
            logger.info('%s changed during the push, keeping it dirty', zone.domain)
            continue
        zone.set_pending_changes(False)
