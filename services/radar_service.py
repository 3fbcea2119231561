import threading

from utils import FormatError, Mr2313Converter, SUPPORTED_SENTENCE_TYPES
from models import InvalidMessage, RadarSystemDataMessage, TargetStatus, TrackedTargetMessage


class RadarService:
    """Service class for feeding radar sentences through the converter."""

    _instance = None

    def __init__(self, app):
        """Initialize radar service with Flask app configuration."""
        self.app = app
        self.converter = Mr2313Converter(strict=app.config.get('STRICT_CODE_LETTERS', True))
        self.max_lines = app.config.get('MAX_LINES_PER_PAYLOAD', 1000)
        self.log_messages = app.config.get('LOG_PARSED_MESSAGES', False)

        self.targets = {}  # Latest TTM per target number
        self.radar_state = None  # Latest valid RSD
        self.last_invalid = None  # Latest InvalidMessage info
        self.counters = self._empty_counters()
        self.lock = threading.Lock()  # Guards counters and latest state

        # Store instance for singleton access
        RadarService._instance = self

    @classmethod
    def get_instance(cls):
        """Get the current radar service instance."""
        return cls._instance

    @staticmethod
    def _empty_counters():
        return {
            'lines': 0,
            'ttm': 0,
            'rsd': 0,
            'invalid': 0,
            'format_errors': 0,
            'skipped': 0
        }

    def process_payload(self, payload):
        """Process a multi-line payload, one sentence per line."""
        lines = [line for line in payload.strip().splitlines() if line.strip()]
        if len(lines) > self.max_lines:
            raise ValueError(f"Payload has {len(lines)} lines, limit is {self.max_lines}")

        messages = []
        for line in lines:
            messages.extend(self.process_line(line))
        return messages

    def process_line(self, raw_line):
        """Process a single radar sentence line. Format errors are logged and dropped."""
        line = raw_line.strip()
        if not line:
            return []

        try:
            return self.convert_line(line)
        except FormatError as e:
            print(f"⚠️ Format error: {e}")
            print(f"Line was: {line}")
            return []

    def convert_line(self, raw_line):
        """Convert a line and let FormatError propagate to the caller."""
        line = raw_line.strip()
        with self.lock:
            self.counters['lines'] += 1
            try:
                messages = self.converter.convert(line)
            except FormatError:
                self.counters['format_errors'] += 1
                raise

            if not messages:
                self.counters['skipped'] += 1
            for message in messages:
                self._record(message)
        return messages

    def _record(self, message):
        """Update counters and latest state for a converted message."""
        if isinstance(message, TrackedTargetMessage):
            self.counters['ttm'] += 1
            self.targets[message.target_number] = message.to_dict()
            status_indicator = "🎯" if message.status is TargetStatus.TRACKED else "📍"
            if self.log_messages:
                print(f"{status_indicator} Target {message.target_number}: "
                      f"{message.distance:.2f} @ {message.bearing:.1f}° "
                      f"({message.status.value}, {message.iff.value})")

        elif isinstance(message, RadarSystemDataMessage):
            self.counters['rsd'] += 1
            self.radar_state = message.to_dict()
            if self.log_messages:
                print(f"📡 Radar scale {message.distance_scale}{message.distance_unit}, "
                      f"orientation {message.display_orientation}, mode {message.working_mode}")

        elif isinstance(message, InvalidMessage):
            self.counters['invalid'] += 1
            self.last_invalid = message.to_dict()
            print(f"❌ {message.info_msg}")

    def get_targets(self):
        """Get latest target reports keyed by target number."""
        with self.lock:
            return {str(number): data for number, data in sorted(self.targets.items())}

    def get_radar_state(self):
        """Get the latest radar system data."""
        return self.radar_state

    def reset(self):
        """Clear all counters and state."""
        with self.lock:
            self.targets = {}
            self.radar_state = None
            self.last_invalid = None
            self.counters = self._empty_counters()
        print("🧹 Radar service state cleared")

    def get_stats(self):
        """Get service statistics."""
        with self.lock:
            counters = dict(self.counters)
            targets_count = len(self.targets)
            last_invalid = self.last_invalid

        return {
            **counters,
            'targets_count': targets_count,
            'last_invalid': last_invalid,
            'strict_code_letters': self.converter.strict,
            'supported_sentence_types': list(SUPPORTED_SENTENCE_TYPES)
        }
