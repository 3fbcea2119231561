from enum import Enum


class TargetStatus(Enum):
    """Tracking state reported for a radar target."""
    LOST = 'LOST'
    UNRELIABLE_DATA = 'UNRELIABLE_DATA'
    TRACKED = 'TRACKED'


class IFF(Enum):
    """Identification friend-or-foe classification."""
    FRIEND = 'FRIEND'
    FOE = 'FOE'
    UNKNOWN = 'UNKNOWN'


class TargetType(Enum):
    """Target category. MR-231-3 sentences never carry it, so only UNKNOWN is produced."""
    SURFACE = 'SURFACE'
    AIR = 'AIR'
    UNKNOWN = 'UNKNOWN'
