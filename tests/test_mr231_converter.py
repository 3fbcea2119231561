from datetime import datetime, timedelta, UTC

import pytest

from models import (
    IFF,
    InvalidMessage,
    RadarSystemDataMessage,
    TargetStatus,
    TargetType,
    TrackedTargetMessage,
)
from utils import FormatError, Mr2313Converter, convert
from tests.sentences import RSD_LINE, TTM_LINE, rsd_line, ttm_line


class CountingClock:
    """Clock stub returning increasing timestamps."""

    def __init__(self, start):
        self.now = start
        self.calls = 0

    def __call__(self):
        self.calls += 1
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def converter(received_at):
    return Mr2313Converter(clock=lambda: received_at)


class TestDispatch:

    def test_ttm_line(self, converter, received_at):
        messages = converter.convert(TTM_LINE)

        assert len(messages) == 1
        ttm = messages[0]
        assert isinstance(ttm, TrackedTargetMessage)
        assert ttm.target_number == 66
        assert ttm.received_at == received_at

    def test_rsd_line(self, converter):
        messages = converter.convert(RSD_LINE)

        assert len(messages) == 1
        assert isinstance(messages[0], RadarSystemDataMessage)
        assert messages[0].distance_scale == 96.0

    @pytest.mark.parametrize("scale", ['0.125', '0.25', '0.5', '1.5', '3.0',
                                       '6.0', '12.0', '24.0', '48.0', '96.0'])
    def test_permitted_scale_is_preserved(self, converter, scale):
        [rsd] = converter.convert(rsd_line(distance_scale=scale))
        assert isinstance(rsd, RadarSystemDataMessage)
        assert rsd.distance_scale == float(scale)

    def test_wrong_scale_gives_only_invalid_message(self, converter, received_at):
        messages = converter.convert(rsd_line(distance_scale='2.0'))

        assert len(messages) == 1
        assert isinstance(messages[0], InvalidMessage)
        assert "2.0" in messages[0].info_msg
        assert not any(isinstance(m, RadarSystemDataMessage) for m in messages)

    @pytest.mark.parametrize("line", [
        "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47",
        "$RAVHW,,T,,M,10.0,N,,K*00",
        "$RATLL,01,5603.370,N,03015.962,E,TGT1,,T,*3A",
        "$RAttm,66,28.71*00",
        "$RA*00",
    ])
    def test_unrecognised_type_gives_empty_result(self, converter, line):
        assert converter.convert(line) == []

    def test_unrecognised_type_is_not_grammar_checked(self, converter):
        assert converter.convert("$RAXDR,garbage,,,*ZZ") == []


class TestFormatErrors:

    @pytest.mark.parametrize("line", [
        TTM_LINE.replace('*', ''),
        ttm_line(checksum='1F3'),
        ttm_line(target_number='AB'),
        TTM_LINE.replace(',1F3A', ''),
        rsd_line(distance_unit='M'),
        rsd_line(distance_scale='96'),
        RSD_LINE.replace(',1A2B', ',1A2B,7'),
    ])
    def test_malformed_line_raises(self, converter, line):
        with pytest.raises(FormatError):
            converter.convert(line)

    def test_error_identifies_sentence(self, converter):
        with pytest.raises(FormatError) as exc_info:
            converter.convert(rsd_line(working_mode='X'))
        assert exc_info.value.sentence_type == 'RSD'
        assert exc_info.value.fields[0] == 'RSD'
        assert 'working_mode' in str(exc_info.value)

    def test_format_error_is_a_value_error(self, converter):
        with pytest.raises(ValueError):
            converter.convert("garbage")

    def test_strict_converter_rejects_unknown_codes(self, converter):
        with pytest.raises(FormatError):
            converter.convert(ttm_line(iff='T'))


class TestRelaxedConverter:

    def test_unknown_codes_use_defaults(self, received_at):
        converter = Mr2313Converter(strict=False, clock=lambda: received_at)
        line = "$RATTM,12,01.50,045.0,T,10.0,090.0,T,05.0,05.0,1.0,1.0,T,Q,,A,1F3A*5C"

        [ttm] = converter.convert(line)

        assert ttm.target_number == 12
        assert ttm.distance == 1.50
        assert ttm.bearing == 45.0
        assert ttm.speed == 10.0
        assert ttm.course == 90.0
        assert ttm.status is TargetStatus.UNRELIABLE_DATA
        assert ttm.iff is IFF.UNKNOWN
        assert ttm.target_type is TargetType.UNKNOWN

    def test_unknown_status_defaults_to_unreliable(self, received_at):
        converter = Mr2313Converter(strict=False, clock=lambda: received_at)
        [ttm] = converter.convert(ttm_line(status='Z', iff='p'))

        assert ttm.status is TargetStatus.UNRELIABLE_DATA
        assert ttm.iff is IFF.FOE


class TestTimestamps:

    def test_clock_read_once_per_recognised_line(self, received_at):
        clock = CountingClock(received_at)
        converter = Mr2313Converter(clock=clock)

        converter.convert(TTM_LINE)
        converter.convert(RSD_LINE)
        converter.convert("$RAVHW,,T*00")

        assert clock.calls == 2

    def test_explicit_received_at_skips_clock(self, received_at):
        clock = CountingClock(received_at)
        converter = Mr2313Converter(clock=clock)
        stamp = datetime(2020, 1, 1, tzinfo=UTC)

        [ttm] = converter.convert(TTM_LINE, received_at=stamp)

        assert ttm.received_at == stamp
        assert clock.calls == 0

    def test_invalid_message_carries_receipt_time(self, converter, received_at):
        [invalid] = converter.convert(rsd_line(distance_scale='7.0'))
        assert invalid.received_at == received_at

    def test_default_clock_is_timezone_aware(self):
        [ttm] = convert(TTM_LINE)
        assert ttm.received_at.tzinfo is not None


class TestIdempotence:

    @pytest.mark.parametrize("line", [TTM_LINE, RSD_LINE, rsd_line(distance_scale='2.0')])
    def test_same_line_gives_equal_records_apart_from_timestamp(self, line, received_at):
        converter = Mr2313Converter(clock=CountingClock(received_at))

        [first] = converter.convert(line)
        [second] = converter.convert(line)

        assert first.received_at != second.received_at
        first_data = first.to_dict()
        second_data = second.to_dict()
        first_data.pop('received_at')
        second_data.pop('received_at')
        assert first_data == second_data

    def test_fixed_time_gives_equal_records(self, converter):
        assert converter.convert(TTM_LINE) == converter.convert(TTM_LINE)


class TestConvertLines:

    def test_messages_in_input_order(self, converter):
        messages = converter.convert_lines([RSD_LINE, "$RAVHW,,T*00", TTM_LINE])
        assert [type(m) for m in messages] == [RadarSystemDataMessage, TrackedTargetMessage]

    def test_format_error_aborts_batch(self, converter):
        with pytest.raises(FormatError):
            converter.convert_lines([TTM_LINE, "broken"])


def test_module_level_convert_is_strict():
    with pytest.raises(FormatError):
        convert(ttm_line(status='Z'))


@pytest.mark.parametrize("line", [
    ttm_line(target_number='٦٦'),
    ttm_line(distance='２８.７１'),
    rsd_line(distance_scale='９６.０'),
])
def test_non_ascii_digits_raise_format_error(converter, line):
    with pytest.raises(FormatError):
        converter.convert(line)
