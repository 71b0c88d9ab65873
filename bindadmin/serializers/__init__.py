from .record import RecordSerializer  # noqa: F401
from .zone import ZoneListSerializer, ZoneDetailSerializer  # noqa: F401
from .server import ServerSerializer  # noqa: F401
