from __future__ import annotations

import unittest
from datetime import datetime

from _fakes import CountingNotifier, FakeClock, RecordingDisplay

try:
    import typer
    from clocktools import alarm
    from clocktools.cancel import CancellationToken
except ModuleNotFoundError as exc:  # pragma: no cover - env-dependent
    typer = None  # type: ignore[assignment]
    alarm = None  # type: ignore[assignment]
    _IMPORT_ERROR = exc
else:
    _IMPORT_ERROR = None


@unittest.skipIf(alarm is None, f"Missing dependency: {_IMPORT_ERROR}")
class AlarmTimeParsingTests(unittest.TestCase):
    def test_plain_seconds(self) -> None:
        self.assertEqual(alarm.parse_alarm_time("25"), 25)
        self.assertEqual(alarm.parse_alarm_time("0"), 0)

    def test_clock_time_later_today(self) -> None:
        now = datetime(2026, 10, 19, 13, 45, 30)
        self.assertEqual(alarm.parse_alarm_time("14:00", now=now), 14 * 60 + 30)

    def test_midnight_is_within_a_day(self) -> None:
        now = datetime(2026, 10, 19, 13, 45, 30)
        seconds = alarm.parse_alarm_time("00:00", now=now)
        self.assertGreater(seconds, 0)
        self.assertLessEqual(seconds, 24 * 3600)

    def test_past_time_wraps_to_tomorrow(self) -> None:
        now = datetime(2026, 10, 19, 23, 50)
        self.assertEqual(alarm.parse_alarm_time("00:10", now=now), 20 * 60)

    def test_current_minute_fires_immediately(self) -> None:
        now = datetime(2026, 10, 19, 7, 30)
        self.assertEqual(alarm.parse_alarm_time("07:30", now=now), 0)

    def test_single_digit_fields(self) -> None:
        now = datetime(2026, 10, 19, 6, 0)
        self.assertEqual(alarm.parse_alarm_time("7:5", now=now), 65 * 60)

    def test_rejects_invalid_formats(self) -> None:
        for value in ("abc", "", "-5", "1.5", "24:00", "12:60", "1:2:3", "12:"):
            with self.subTest(value=value):
                with self.assertRaises(typer.BadParameter):
                    alarm.parse_alarm_time(value)


@unittest.skipIf(alarm is None, f"Missing dependency: {_IMPORT_ERROR}")
class RunAlarmTests(unittest.TestCase):
    def test_fires_beeps_and_waits_for_acknowledgment(self) -> None:
        token = CancellationToken()
        display = RecordingDisplay()
        notifier = CountingNotifier(token=token)   # acknowledge as soon as it rings

        fired = alarm.run_alarm(2, display, token, notifier, interval=0, ack_interval=0.01, clock=FakeClock(step=1))

        self.assertTrue(fired)
        self.assertEqual(notifier.beeps, 1)
        self.assertEqual(display.frames, [("00:00:01", None), ("00:00:00", alarm.ALARM_MESSAGE)])

    def test_cancel_during_countdown_does_not_fire(self) -> None:
        token = CancellationToken()
        display = RecordingDisplay(token=token, stop_after=1)
        notifier = CountingNotifier()

        fired = alarm.run_alarm(600, display, token, notifier, interval=0, clock=FakeClock(step=1))

        self.assertFalse(fired)
        self.assertEqual(notifier.beeps, 0)
        self.assertNotIn(alarm.ALARM_MESSAGE, display.labels)


if __name__ == "__main__":
    unittest.main()
