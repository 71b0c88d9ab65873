"""
SOA serial numbers in the usual YYYYMMDDnn format.

The two trailing digits count the edits made on the same day, so a zone can
be changed up to 100 times per day. Further edits keep incrementing and spill
into what looks like the next day's numbers; the serial still grows, which is
all secondaries care about.
"""
from django.utils import timezone

MAX_SERIAL = 2 ** 32 - 1


def generate_serial_number(today=None):
    """Return the first serial of `today` (defaults to the local date)."""
    if today is None:
        today = timezone.localdate()
    return int(today.strftime('%Y%m%d') + '00')
