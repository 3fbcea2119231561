class FormatError(ValueError):
    """Raised when a line is malformed or does not fit its sentence grammar."""

    def __init__(self, message, sentence_type=None, fields=None):
        super().__init__(message)
        self.sentence_type = sentence_type
        self.fields = fields
