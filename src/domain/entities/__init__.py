from .repair import Repair
from .requests import RegistrationRequest, UpdateRequest

__all__ = [
    "Repair",
    "RegistrationRequest",
    "UpdateRequest",
]
