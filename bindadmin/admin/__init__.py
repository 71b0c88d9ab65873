from .zone import ZoneAdmin  # noqa: F401
from .server import ServerAdmin  # noqa: F401
from .setting import SettingAdmin  # noqa: F401
from .activity import ActivityLogAdmin  # noqa: F401
