# Import all models so they're available when you import from models
from .enums import IFF, TargetStatus, TargetType
from .messages import (
    InvalidMessage,
    RadarSystemDataMessage,
    SearadarStationMessage,
    TrackedTargetMessage,
)

# Make everything available at package level
__all__ = [
    'IFF',
    'TargetStatus',
    'TargetType',
    'SearadarStationMessage',
    'TrackedTargetMessage',
    'RadarSystemDataMessage',
    'InvalidMessage'
]
