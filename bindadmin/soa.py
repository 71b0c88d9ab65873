"""Effective zone timers and the SOA record of a zone."""


class TimerResolver:
    """
    Returns the timers of a zone.

    Zones with `custom_settings` use their own values, the others use the
    `zone_default_*` keys of `config`. A custom zone missing a value falls
    back to the default as well.
    """

    def __init__(self, zone, config):
        self.zone = zone
        self.config = config

    def _resolve(self, field):
        if self.zone.custom_settings:
            value = getattr(self.zone, field)
            if value is not None:
                return int(value)
        return int(self.config.get('zone_default_' + field))

    def get_refresh(self):
        return self._resolve('refresh')

    def get_retry(self):
        return self._resolve('retry')

    def get_expire(self):
        return self._resolve('expire')

    def get_negative_ttl(self):
        return self._resolve('negative_ttl')

    def get_default_ttl(self):
        return self._resolve('default_ttl')

    def as_dict(self):
        return {
            'refresh': self.get_refresh(),
            'retry': self.get_retry(),
            'expire': self.get_expire(),
            'negative_ttl': self.get_negative_ttl(),
            'default_ttl': self.get_default_ttl(),
        }


class SOAFormatter:
    def __init__(self, zone, config):
        self.zone = zone
        self.config = config
        self.timers = TimerResolver(zone, config)

    def get_primary_name_server(self):
        return self.config.get('zone_default_mname')

    def get_hostmaster_email(self):
        # RNAME encodes the mailbox with a dot, RFC 1035 section 8
        return self.config.get('zone_default_rname').replace('@', '.')

    def get_soa_record(self):
        """
        The SOA stanza of the zone file. Column widths are kept byte for byte,
        other tools diff the generated files.
        """
        content = "%-16s IN\tSOA\t%s. %s. (\n" % (
            '@', self.get_primary_name_server(), self.get_hostmaster_email())
        content += "%40s %-10d ; Serial (aaaammddvv)\n" % (' ', self.zone.serial)
        content += "%40s %-10d ; Refresh\n" % (' ', self.timers.get_refresh())
        content += "%40s %-10d ; Retry\n" % (' ', self.timers.get_retry())
        content += "%40s %-10d ; Expire\n" % (' ', self.timers.get_expire())
        content += "%40s %-10d ; Negative TTL\n" % (' ', self.timers.get_negative_ttl())
        content += ")"
        return content
