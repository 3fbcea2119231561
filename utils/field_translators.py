from models import (
    IFF,
    RadarSystemDataMessage,
    TargetStatus,
    TargetType,
    TrackedTargetMessage,
)
from .errors import FormatError
from .sentence_grammar import RSD_GRAMMAR, TTM_GRAMMAR

# Code letter lookup tables; unknown letters fall back to the default
STATUS_CODES = {
    'L': TargetStatus.LOST,
    'Q': TargetStatus.UNRELIABLE_DATA,
    'T': TargetStatus.TRACKED,
}
DEFAULT_STATUS = TargetStatus.UNRELIABLE_DATA

IFF_CODES = {
    'b': IFF.FRIEND,
    'p': IFF.FOE,
    'd': IFF.UNKNOWN,
}
DEFAULT_IFF = IFF.UNKNOWN

# No sentence field carries the target type
DEFAULT_TARGET_TYPE = TargetType.UNKNOWN

TTM_POSITIONS = {
    name: TTM_GRAMMAR.position_of(name)
    for name in ('target_number', 'distance', 'bearing', 'speed', 'course', 'iff', 'status')
}

RSD_FLOAT_FIELDS = (
    'initial_distance',
    'initial_bearing',
    'moving_circle_of_distance',
    'bearing',
    'distance_from_ship',
    'bearing2',
    'distance_scale',
)
RSD_CODE_FIELDS = ('distance_unit', 'display_orientation', 'working_mode')
RSD_POSITIONS = {
    name: RSD_GRAMMAR.position_of(name)
    for name in RSD_FLOAT_FIELDS + RSD_CODE_FIELDS
}


def status_from_code(code):
    return STATUS_CODES.get(code, DEFAULT_STATUS)


def iff_from_code(code):
    return IFF_CODES.get(code, DEFAULT_IFF)


def _number(raw, position, convert):
    # The grammar should have rejected both failures already
    try:
        value = raw[position]
    except IndexError as e:
        raise FormatError(
            f"Matched {raw.sentence_type} has no field {position}",
            sentence_type=raw.sentence_type,
            fields=list(raw.fields)
        ) from e

    try:
        return convert(value)
    except ValueError as e:
        raise FormatError(
            f"Field {position} of matched {raw.sentence_type} is not numeric: {value!r}",
            sentence_type=raw.sentence_type,
            fields=list(raw.fields)
        ) from e


def translate_ttm(raw, received_at):
    """Build a TrackedTargetMessage from a grammar-matched TTM sentence."""
    pos = TTM_POSITIONS

    return TrackedTargetMessage(
        received_at=received_at,
        target_number=_number(raw, pos['target_number'], int),
        distance=_number(raw, pos['distance'], float),
        bearing=_number(raw, pos['bearing'], float),
        course=_number(raw, pos['course'], float),
        speed=_number(raw, pos['speed'], float),
        status=status_from_code(raw[pos['status']]),
        iff=iff_from_code(raw[pos['iff']]),
        target_type=DEFAULT_TARGET_TYPE
    )


def translate_rsd(raw, received_at):
    """Build a RadarSystemDataMessage from a grammar-matched RSD sentence."""
    values = {name: _number(raw, RSD_POSITIONS[name], float) for name in RSD_FLOAT_FIELDS}
    values.update({name: raw[RSD_POSITIONS[name]] for name in RSD_CODE_FIELDS})

    return RadarSystemDataMessage(received_at=received_at, **values)
