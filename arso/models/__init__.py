from .earthquake import Potres
from .station import Postaja, StationFailure, StationScan
from .status import StatusResponse

__all__ = [
    "Potres",
    "Postaja",
    "StationFailure",
    "StationScan",
    "StatusResponse",
]
