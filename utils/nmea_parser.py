from dataclasses import dataclass

from .errors import FormatError

# "$" plus a 2-character talker id ("$RA") precede the sentence type tag
PREFIX_LENGTH = 3
CHECKSUM_DELIMITER = '*'
FIELD_DELIMITER = ','


@dataclass(frozen=True)
class RawSentence:
    """Comma-split sentence body. ``fields[0]`` is the type tag, data starts at 1."""

    sentence_type: str
    fields: tuple
    checksum: str = ''

    def __len__(self):
        return len(self.fields)

    def __getitem__(self, index):
        return self.fields[index]

    @property
    def data_fields(self):
        return self.fields[1:]


class NMEAParser:
    """Handles splitting of MR-231-3 sentence framing."""

    @staticmethod
    def split_sentence(line):
        """Strip framing and split the sentence body into fields."""
        star = line.find(CHECKSUM_DELIMITER)
        if star == -1:
            raise FormatError(f"Missing checksum delimiter '*': {line!r}")
        if star < PREFIX_LENGTH:
            raise FormatError(f"Sentence shorter than its {PREFIX_LENGTH}-character prefix: {line!r}")

        body = line[PREFIX_LENGTH:star].strip()
        fields = tuple(body.split(FIELD_DELIMITER))
        # The checksum is kept as-is; it is never verified
        checksum = line[star + 1:star + 3]

        return RawSentence(sentence_type=fields[0], fields=fields, checksum=checksum)
