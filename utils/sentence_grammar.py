"""Fixed positional grammars for the MR-231-3 TTM and RSD sentences.

Each grammar is an ordered schema of data fields. A field is described by
its name and a syntactic class; the class is an anchored regular expression
that the raw field text must match in full. Matching is all-or-nothing:
arity is checked first, then every field, and no values are extracted from
a sentence that fails any position.
"""
import re
from dataclasses import dataclass

from .errors import FormatError


@dataclass(frozen=True)
class FieldClass:
    """Named syntactic class of a single field."""

    name: str
    pattern: re.Pattern

    def matches(self, value):
        return self.pattern.fullmatch(value) is not None


TWO_DIGIT_INT = FieldClass('two-digit integer', re.compile(r'\d{2}', re.ASCII))
DISTANCE_2_2 = FieldClass('distance 00.00', re.compile(r'\d{2}\.\d{2}', re.ASCII))
ANGLE_3_1 = FieldClass('angle 000.0', re.compile(r'\d{3}\.\d', re.ASCII))
RATE_2_1 = FieldClass('rate 00.0', re.compile(r'\d{2}\.\d', re.ASCII))
DECIMAL = FieldClass('decimal', re.compile(r'\d+\.\d+', re.ASCII))
TRUE_REFERENCE = FieldClass("reference 'T'", re.compile(r'T'))
IFF_CODE = FieldClass('IFF code [bpd]', re.compile(r'[bpd]'))
STATUS_CODE = FieldClass('status code [LQT]', re.compile(r'[LQT]'))
ANY_LETTER = FieldClass('single letter', re.compile(r'[A-Za-z]'))
VALIDITY_CODE = FieldClass('validity code [AP]', re.compile(r'[AP]'))
DISTANCE_UNIT_CODE = FieldClass('distance unit [KN]', re.compile(r'[KN]'))
ORIENTATION_CODE = FieldClass('display orientation [CHN]', re.compile(r'[CHN]'))
WORKING_MODE_CODE = FieldClass('working mode [SP]', re.compile(r'[SP]'))
OPTIONAL_DIGITS = FieldClass('digits', re.compile(r'\d*', re.ASCII))
HEX4 = FieldClass('4-hex checksum', re.compile(r'[0-9A-Fa-f]{4}'))
ANYTHING = FieldClass('any', re.compile(r'.*'))


@dataclass(frozen=True)
class FieldSpec:
    name: str
    field_class: FieldClass


class SentenceGrammar:
    """Positional schema for one sentence type."""

    def __init__(self, sentence_type, schema):
        self.sentence_type = sentence_type
        self.schema = tuple(schema)

    @property
    def arity(self):
        return len(self.schema)

    def position_of(self, name):
        """Return the 1-based data position of a named field."""
        for position, spec in enumerate(self.schema, start=1):
            if spec.name == name:
                return position
        raise KeyError(name)

    def violations(self, raw):
        """Return a list of (position, field name, value) that do not fit the schema.

        An arity mismatch is reported as a single entry at position 0.
        """
        data = raw.data_fields
        if len(data) != self.arity:
            return [(0, 'arity', f'{len(data)} fields, expected {self.arity}')]

        return [
            (position, spec.name, value)
            for position, (spec, value) in enumerate(zip(self.schema, data), start=1)
            if not spec.field_class.matches(value)
        ]

    def match(self, raw):
        """Validate the complete field list or raise FormatError."""
        if raw.sentence_type != self.sentence_type:
            raise FormatError(
                f"Expected {self.sentence_type} sentence, got {raw.sentence_type!r}",
                sentence_type=raw.sentence_type,
                fields=list(raw.fields)
            )

        problems = self.violations(raw)
        if problems:
            position, name, value = problems[0]
            raise FormatError(
                f"Invalid {self.sentence_type} format at field {position} ({name}={value!r}): "
                f"{list(raw.fields)}",
                sentence_type=self.sentence_type,
                fields=list(raw.fields)
            )
        return raw

    def __repr__(self):
        return f'<SentenceGrammar {self.sentence_type}: {self.arity} fields>'


def ttm_grammar(strict=True):
    """Build the TTM grammar. Relaxed mode accepts any letter for IFF and status."""
    iff_class = IFF_CODE if strict else ANY_LETTER
    status_class = STATUS_CODE if strict else ANY_LETTER

    return SentenceGrammar('TTM', [
        FieldSpec('target_number', TWO_DIGIT_INT),
        FieldSpec('distance', DISTANCE_2_2),
        FieldSpec('bearing', ANGLE_3_1),
        FieldSpec('bearing_reference', TRUE_REFERENCE),
        FieldSpec('speed', RATE_2_1),
        FieldSpec('course', ANGLE_3_1),
        FieldSpec('course_reference', TRUE_REFERENCE),
        FieldSpec('aux_distance', DECIMAL),
        FieldSpec('aux_bearing', DECIMAL),
        FieldSpec('aux_rate', DECIMAL),
        FieldSpec('aux_rate2', DECIMAL),
        FieldSpec('iff', iff_class),
        FieldSpec('status', status_class),
        FieldSpec('reserved', OPTIONAL_DIGITS),
        FieldSpec('validity', VALIDITY_CODE),
        FieldSpec('checksum', HEX4),
    ])


RSD_GRAMMAR = SentenceGrammar('RSD', [
    FieldSpec('initial_distance', DECIMAL),
    FieldSpec('initial_bearing', DECIMAL),
    FieldSpec('moving_circle_of_distance', DECIMAL),
    FieldSpec('bearing', DECIMAL),
    FieldSpec('unused_5', ANYTHING),
    FieldSpec('unused_6', ANYTHING),
    FieldSpec('unused_7', ANYTHING),
    FieldSpec('unused_8', ANYTHING),
    FieldSpec('distance_from_ship', DECIMAL),
    FieldSpec('bearing2', DECIMAL),
    FieldSpec('distance_scale', DECIMAL),
    FieldSpec('distance_unit', DISTANCE_UNIT_CODE),
    FieldSpec('display_orientation', ORIENTATION_CODE),
    FieldSpec('working_mode', WORKING_MODE_CODE),
    FieldSpec('reserved', OPTIONAL_DIGITS),
    FieldSpec('checksum', HEX4),
])

TTM_GRAMMAR = ttm_grammar(strict=True)
RELAXED_TTM_GRAMMAR = ttm_grammar(strict=False)
