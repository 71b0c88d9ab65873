import re

from django.core.validators import RegexValidator, MaxValueValidator

from bindadmin.serial import MAX_SERIAL


validate_hostname = RegexValidator(
    regex=(r'^(?=[a-z0-9\-\.]{1,253}$)([a-z0-9](([a-z0-9\-]){,61}[a-z0-9])?\.)'
           r'*([a-z0-9](([a-z0-9\-]){,61}[a-z0-9])?)$'),
    message='Invalid hostname',
    code='invalid_hostname',
    flags=re.IGNORECASE,
)

# Zone names are stored without the trailing dot.
validate_domain = RegexValidator(
    regex=(r'^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?(?:\.(?!-)[a-z0-9-]{1,63}(?<!-))'
           r'*\.(?!-)(?:[a-z-]{2,63}|xn--[a-z0-9]{1,59})(?<!-)$'),
    message='Invalid domain',
    code='invalid_domain',
    flags=re.IGNORECASE,
)

# Record owner names, relative to the zone origin. '@' is the apex.
validate_record_name = RegexValidator(
    regex=r'^(@|\*|(\*\.)?[a-z0-9_](?:[a-z0-9_-]{0,61}[a-z0-9])?(?:\.[a-z0-9_](?:[a-z0-9_-]{0,61}[a-z0-9])?)*)$',  # noqa
    message='Invalid record name',
    code='invalid_record_name',
    flags=re.IGNORECASE,
)

validate_serial = MaxValueValidator(MAX_SERIAL)

# Absolute path on the BIND server, without quotes or whitespace.
validate_directory = RegexValidator(
    regex=r'^/[^\s"]*$',
    message='Invalid directory, use an absolute path',
    code='invalid_directory',
)
