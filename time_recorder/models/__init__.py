from .credentials import Credentials
from .status import MessageResponse, StatusResponse

__all__ = ["Credentials", "MessageResponse", "StatusResponse"]
