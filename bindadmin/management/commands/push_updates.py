import logging

from django.core.management.base import BaseCommand

from bindadmin import push
from bindadmin.models import Zone


logger = logging.getLogger('bindadmin.cli')


class Command(BaseCommand):
    help = 'Push the configuration of the zones with pending changes'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            dest='dry_run',
            default=False,
            help='Only print which zones would be pushed',
        )
        parser.add_argument(
            '--push-dir',
            dest='push_dir',
            default=None,
            help='Write the generated files under this directory',
        )

    def handle(self, *args, **options):
        if options['dry_run']:
            for zone in Zone.with_pending_changes():
                self.stdout.write('{} {}'.format(zone.domain, zone.serial))
            return

        transport = push.LocalDirectoryTransport(options['push_dir'])
        zones = push.push_updates(transport=transport)
        for zone in zones:
            self.stdout.write('pushed {} {}'.format(zone.domain, zone.serial))
        logger.info("done")
