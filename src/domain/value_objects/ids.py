from typing import NewType

RepairId = NewType("RepairId", int)
PhoneNumber = NewType("PhoneNumber", int)
