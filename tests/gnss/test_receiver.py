"""Tests for the GNSSReceiver polling decoder."""

import pytest

from navfix.config import ReceiverConfig
from navfix.epoch import DateTimeFields
from navfix.gnss import GNSSReceiver
from navfix.nmea import FixSnapshot

from tests.gnss.fakes import FakeByteSource, FakeClock

RMC = b"$GPRMC,194533.00,A,5155.32591,N,00234.41370,W,0.159,,160415,,,A*6D\r\n"
RMC_VOID = b"$GPRMC,194534.00,V,,,,,,,,,,N*53\r\n"
GGA = b"$GPGGA,194533.00,5155.32591,N,00234.41370,W,1,10,1.24,63.1,M,48.6,M,,*73\r\n"
VTG = b"$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B\r\n"
UNKNOWN = b"$GPXXX,1,2,3*00\r\n"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# ---------------------------------------------------------------------------
# Decoding through feed()
# ---------------------------------------------------------------------------


class TestGNSSReceiverDecoding:
    def test_end_to_end_rmc(self):
        gnss = GNSSReceiver()
        assert gnss.feed(RMC) == 1
        assert gnss.is_locked() is True
        assert gnss.latitude == pytest.approx(51.9221, abs=1e-4)
        assert gnss.longitude == pytest.approx(-2.5736, abs=1e-4)
        assert gnss.speed(knots=True) == pytest.approx(0.159)
        assert (gnss.day, gnss.month, gnss.year) == (16, 4, 2015)
        assert (gnss.hour, gnss.minute, gnss.second) == (19, 45, 33)
        assert gnss.utc_datetime == DateTimeFields(2015, 4, 16, 19, 45, 33)

    def test_timestamp(self):
        gnss = GNSSReceiver()
        gnss.feed(RMC)
        assert gnss.timestamp == 1429213533

    def test_gga_fields(self):
        gnss = GNSSReceiver()
        gnss.feed(GGA)
        assert gnss.satellites == 10
        assert gnss.hdop == pytest.approx(1.24)
        assert gnss.altitude == pytest.approx(63.1)
        assert gnss.altitude_units == "M"
        assert gnss.ellipsoid_height == pytest.approx(48.6)
        assert gnss.ellipsoid_height_units == "M"

    def test_vtg_fields(self):
        gnss = GNSSReceiver()
        gnss.feed(VTG)
        assert gnss.bearing() == pytest.approx(54.7)
        assert gnss.bearing(magnetic=True) == pytest.approx(34.4)
        assert gnss.speed() == pytest.approx(10.2)
        assert gnss.speed(knots=True) == pytest.approx(5.5)

    def test_magnetic_variation(self):
        gnss = GNSSReceiver()
        gnss.feed(b"$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A\r\n")
        assert gnss.magnetic_variation == pytest.approx(3.1)
        assert gnss.magnetic_variation_direction == "W"

    def test_framing_resync_after_garbage(self):
        gnss = GNSSReceiver()
        assert gnss.feed(b"garbage" + GGA) == 1
        assert gnss.satellites == 10

    def test_sentences_split_across_feeds(self):
        gnss = GNSSReceiver()
        stream = RMC + GGA + VTG
        matched = sum(gnss.feed(stream[i : i + 7]) for i in range(0, len(stream), 7))
        assert matched == 3
        assert gnss.speed() == pytest.approx(10.2)

    def test_void_rmc_clears_lock_and_keeps_position(self):
        gnss = GNSSReceiver()
        gnss.feed(RMC)
        gnss.feed(RMC_VOID)
        assert gnss.is_locked() is False
        assert gnss.latitude == pytest.approx(51.9221, abs=1e-4)
        assert gnss.second == 34

    def test_unknown_tag_leaves_state_unchanged(self):
        gnss = GNSSReceiver()
        gnss.feed(GGA)
        gnss.is_updated()
        before = gnss.snapshot()
        assert gnss.feed(UNKNOWN) == 0
        assert gnss.snapshot() == before
        assert gnss.is_updated() is False

    def test_truncated_gga_is_partial_update(self):
        gnss = GNSSReceiver()
        gnss.feed(b"$GPGGA,120000,4807.038,N,01131.000,E,1,08,0.9,545.4,F,47.0,F,,*00\r\n")
        gnss.is_updated()
        gnss.feed(b"$GPGGA,194533.00,5155.32591,N,00234.41370,W,0,10,1.24,63.1\r\n")
        assert gnss.is_updated() is True
        assert gnss.is_locked() is False
        assert gnss.latitude == pytest.approx(51.9221, abs=1e-4)
        assert gnss.satellites == 10
        assert gnss.altitude == pytest.approx(63.1)
        assert gnss.altitude_units == "F"
        assert gnss.ellipsoid_height == pytest.approx(47.0)

    def test_other_talkers_need_configuration(self):
        sentence = b"$GNGGA" + GGA[6:]
        assert GNSSReceiver().feed(sentence) == 0
        gnss = GNSSReceiver(config=ReceiverConfig(talker_ids=("GP", "GN")))
        assert gnss.feed(sentence) == 1

    def test_overlong_sentence_is_truncated(self):
        gnss = GNSSReceiver(config=ReceiverConfig(buffer_capacity=40))
        gnss.feed(GGA)
        # 39 payload bytes end inside the longitude field
        assert gnss.latitude == pytest.approx(51.9221, abs=1e-4)
        assert gnss.satellites == 0

    def test_snapshot_is_a_copy(self):
        gnss = GNSSReceiver()
        snapshot = gnss.snapshot()
        snapshot.latitude = 10.0
        assert gnss.latitude == 0.0

    def test_reset(self):
        gnss = GNSSReceiver()
        gnss.feed(RMC + b"$GPGGA,1234")
        gnss.reset()
        assert gnss.snapshot() == FixSnapshot()
        assert gnss.feed(b"56\r\n") == 0


# ---------------------------------------------------------------------------
# Updated flag
# ---------------------------------------------------------------------------


class TestGNSSReceiverUpdatedFlag:
    def test_initially_not_updated(self):
        assert GNSSReceiver().is_updated() is False

    def test_consumed_once(self):
        gnss = GNSSReceiver()
        gnss.feed(VTG)
        assert gnss.is_updated() is True
        assert gnss.is_updated() is False

    def test_multiple_sentences_give_one_pending_update(self):
        gnss = GNSSReceiver()
        gnss.feed(RMC + GGA + VTG)
        assert gnss.is_updated() is True
        assert gnss.is_updated() is False


# ---------------------------------------------------------------------------
# Local time
# ---------------------------------------------------------------------------


class TestGNSSReceiverLocalTime:
    def test_no_date_before_rmc(self):
        gnss = GNSSReceiver()
        gnss.feed(GGA)
        assert gnss.timestamp is None
        assert gnss.local_datetime is None
        assert gnss.day_of_week is None

    def test_offset_from_config(self):
        gnss = GNSSReceiver(config=ReceiverConfig(utc_offset_hours=9))
        gnss.feed(RMC)
        assert gnss.local_datetime == DateTimeFields(2015, 4, 17, 4, 45, 33)
        assert gnss.utc_datetime == DateTimeFields(2015, 4, 16, 19, 45, 33)
        assert gnss.day_of_week == 5  # Friday

    def test_setting_offset_rederives_local_time(self):
        gnss = GNSSReceiver()
        gnss.feed(RMC)
        gnss.utc_offset_hours = -5
        assert gnss.utc_offset_hours == -5
        assert (gnss.day, gnss.hour) == (16, 14)

    def test_invalid_offset_raises(self):
        gnss = GNSSReceiver()
        with pytest.raises(ValueError, match="utc_offset_hours"):
            gnss.utc_offset_hours = 40

    def test_gga_time_applies_to_last_rmc_date(self):
        gnss = GNSSReceiver(config=ReceiverConfig(utc_offset_hours=1))
        gnss.feed(RMC)
        gnss.feed(b"$GPGGA,235959.00,5155.32591,N,00234.41370,W,1,10,1.24,63.1,M,48.6,M,,*00\r\n")
        assert gnss.local_datetime == DateTimeFields(2015, 4, 17, 0, 59, 59)

    def test_negative_offset_crosses_into_previous_century(self):
        gnss = GNSSReceiver(config=ReceiverConfig(utc_offset_hours=-5))
        gnss.feed(b"$GPRMC,010000.00,A,5155.32591,N,00234.41370,W,0.0,,010100,,,A*00\r\n")
        assert gnss.local_datetime == DateTimeFields(1999, 12, 31, 20, 0, 0)
        assert gnss.year == 1999
        assert gnss.snapshot().local_year_two_digit == -1
        assert gnss.utc_datetime == DateTimeFields(2000, 1, 1, 1, 0, 0)
        assert gnss.day_of_week == 5  # Friday

    def test_vtg_keeps_local_time(self):
        gnss = GNSSReceiver()
        gnss.feed(RMC)
        before = gnss.local_datetime
        gnss.feed(VTG)
        assert gnss.local_datetime == before


# ---------------------------------------------------------------------------
# Polling a byte source
# ---------------------------------------------------------------------------


class TestGNSSReceiverProcess:
    def test_process_without_source_raises(self):
        with pytest.raises(RuntimeError, match="byte source"):
            GNSSReceiver().process()

    def test_drains_all_available_bytes(self):
        source = FakeByteSource(RMC[:30], RMC[30:], GGA)
        gnss = GNSSReceiver(source)
        assert gnss.process() == len(RMC) + len(GGA)
        assert source.chunks == []
        assert gnss.satellites == 10
        assert gnss.year == 2015

    def test_returns_zero_when_idle(self):
        assert GNSSReceiver(FakeByteSource()).process() == 0

    def test_source_errors_propagate(self):
        source = FakeByteSource(RMC)
        source.closed = True
        with pytest.raises(OSError):
            GNSSReceiver(source).process()


# ---------------------------------------------------------------------------
# Update handler
# ---------------------------------------------------------------------------


class TestGNSSReceiverUpdateHandler:
    def _receiver(self, clock: FakeClock, *chunks: bytes) -> tuple[GNSSReceiver, FakeByteSource, list[int]]:
        source = FakeByteSource(*chunks)
        config = ReceiverConfig(quiescence_seconds=0.5)
        gnss = GNSSReceiver(source, config, clock=clock)
        calls: list[int] = []
        gnss.set_update_handler(lambda: calls.append(1))
        return gnss, source, calls

    def test_waits_for_quiet_line(self, clock):
        gnss, _, calls = self._receiver(clock, RMC)
        gnss.process()
        assert calls == []
        clock.advance(0.5)
        gnss.process()
        assert calls == [1]

    def test_fires_once_per_idle_period(self, clock):
        gnss, source, calls = self._receiver(clock, RMC + GGA + VTG)
        gnss.process()
        clock.advance(1.0)
        gnss.process()
        gnss.process()
        assert calls == [1]
        source.push(GGA)
        gnss.process()
        clock.advance(1.0)
        gnss.process()
        assert calls == [1, 1]

    def test_new_bytes_postpone_notification(self, clock):
        gnss, source, calls = self._receiver(clock, RMC)
        gnss.process()
        clock.advance(0.3)
        source.push(b"$GPGGA,19")
        gnss.process()
        clock.advance(0.3)
        gnss.process()
        assert calls == []
        clock.advance(0.3)
        gnss.process()
        assert calls == [1]

    def test_unknown_sentences_do_not_notify(self, clock):
        gnss, _, calls = self._receiver(clock, UNKNOWN)
        gnss.process()
        clock.advance(1.0)
        gnss.process()
        assert calls == []

    def test_removing_handler_cancels_pending_call(self, clock):
        gnss, _, calls = self._receiver(clock, RMC)
        gnss.process()
        gnss.set_update_handler(None)
        clock.advance(1.0)
        gnss.process()
        assert calls == []

    def test_replacing_handler(self, clock):
        gnss, source, calls = self._receiver(clock, RMC)
        replacement: list[int] = []
        gnss.set_update_handler(lambda: replacement.append(1))
        gnss.process()
        clock.advance(1.0)
        gnss.process()
        assert calls == []
        assert replacement == [1]

    def test_feed_then_poll(self, clock):
        gnss, _, calls = self._receiver(clock)
        gnss.feed(VTG)
        assert gnss.poll_update_handler() is False
        clock.advance(1.0)
        assert gnss.poll_update_handler() is True
        assert calls == [1]

    def test_updated_flag_set_before_handler_fires(self, clock):
        gnss, _, calls = self._receiver(clock, RMC)
        gnss.process()
        assert gnss.is_updated() is True
        assert calls == []
