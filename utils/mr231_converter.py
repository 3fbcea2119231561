from datetime import datetime, UTC

from .nmea_parser import NMEAParser
from .field_translators import translate_rsd, translate_ttm
from .rsd_validator import check_rsd
from .sentence_grammar import RELAXED_TTM_GRAMMAR, RSD_GRAMMAR, TTM_GRAMMAR

SUPPORTED_SENTENCE_TYPES = ('TTM', 'RSD')


def utc_now():
    return datetime.now(UTC)


class Mr2313Converter:
    """Converts MR-231-3 radar sentences into station messages."""

    def __init__(self, strict=True, clock=utc_now):
        self.strict = strict
        self.clock = clock
        self.ttm_grammar = TTM_GRAMMAR if strict else RELAXED_TTM_GRAMMAR
        self.rsd_grammar = RSD_GRAMMAR

    def convert(self, line, received_at=None):
        """Convert one line into a list of zero or one messages.

        Raises FormatError for malformed framing or a grammar mismatch.
        Sentence types other than TTM and RSD produce an empty list.
        """
        raw = NMEAParser.split_sentence(line)
        messages = []

        if raw.sentence_type == 'TTM':
            self.ttm_grammar.match(raw)
            messages.append(translate_ttm(raw, self._received_at(received_at)))

        elif raw.sentence_type == 'RSD':
            self.rsd_grammar.match(raw)
            rsd = translate_rsd(raw, self._received_at(received_at))
            invalid_message = check_rsd(rsd)
            messages.append(invalid_message if invalid_message is not None else rsd)

        return messages

    def convert_lines(self, lines):
        """Convert several lines in order. The first FormatError aborts the batch."""
        messages = []
        for line in lines:
            messages.extend(self.convert(line))
        return messages

    def _received_at(self, received_at):
        return received_at if received_at is not None else self.clock()


_default_converter = Mr2313Converter()


def convert(line):
    """Convert one line with the default strict converter.

    Lines with IFF or status letters outside b/p/d and L/Q/T raise FormatError
    here; use Mr2313Converter(strict=False) to accept them with default codes.
    """
    return _default_converter.convert(line)
