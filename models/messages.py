from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum

from .enums import IFF, TargetStatus, TargetType


@dataclass(frozen=True)
class SearadarStationMessage:
    """Base for every record produced by the converter."""

    received_at: datetime

    @property
    def message_type(self):
        return type(self).__name__

    def to_dict(self):
        """Convert message to a JSON-friendly dictionary."""
        data = {'message_type': self.message_type}
        for key, value in asdict(self).items():
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, datetime):
                value = value.isoformat()
            data[key] = value
        return data


@dataclass(frozen=True)
class TrackedTargetMessage(SearadarStationMessage):
    """TTM: a single radar contact report."""

    target_number: int
    distance: float
    bearing: float
    course: float
    speed: float
    status: TargetStatus
    iff: IFF
    target_type: TargetType

    def __repr__(self):
        return (f'<TrackedTargetMessage {self.target_number}: {self.distance} @ {self.bearing}, '
                f'{self.status.value}/{self.iff.value}>')


@dataclass(frozen=True)
class RadarSystemDataMessage(SearadarStationMessage):
    """RSD: radar display and range configuration."""

    initial_distance: float
    initial_bearing: float
    moving_circle_of_distance: float
    bearing: float
    distance_from_ship: float
    bearing2: float
    distance_scale: float
    distance_unit: str
    display_orientation: str
    working_mode: str

    def __repr__(self):
        return (f'<RadarSystemDataMessage scale={self.distance_scale}{self.distance_unit} '
                f'orientation={self.display_orientation} mode={self.working_mode}>')


@dataclass(frozen=True)
class InvalidMessage(SearadarStationMessage):
    """Sentence that parsed but failed a data check."""

    info_msg: str

    def __repr__(self):
        return f'<InvalidMessage {self.info_msg}>'
