# Utils package for MR-231-3 sentence conversion

from .errors import FormatError
from .mr231_converter import Mr2313Converter, SUPPORTED_SENTENCE_TYPES, convert
from .nmea_parser import NMEAParser, RawSentence
from .rsd_validator import DISTANCE_SCALES, check_rsd

__all__ = [
    'FormatError',
    'Mr2313Converter',
    'SUPPORTED_SENTENCE_TYPES',
    'convert',
    'NMEAParser',
    'RawSentence',
    'DISTANCE_SCALES',
    'check_rsd'
]
