from __future__ import annotations

import io
import unittest
from unittest import mock

try:
    from rich.console import Console
    from clocktools import notify
except ModuleNotFoundError as exc:  # pragma: no cover - env-dependent
    Console = None  # type: ignore[assignment]
    notify = None  # type: ignore[assignment]
    _IMPORT_ERROR = exc
else:
    _IMPORT_ERROR = None


@unittest.skipIf(notify is None, f"Missing dependency: {_IMPORT_ERROR}")
class NotifierTests(unittest.TestCase):
    @mock.patch.dict("os.environ", {"TERM": "xterm"})
    def test_terminal_bell_writes_bel(self) -> None:
        console = Console(file=io.StringIO(), force_terminal=True)
        notify.TerminalBell(console).beep()
        self.assertIn("\a", console.file.getvalue())

    def test_terminal_bell_ignores_output_errors(self) -> None:
        console = mock.Mock()
        console.bell.side_effect = OSError("terminal went away")
        notify.TerminalBell(console).beep()
        console.bell.assert_called_once_with()

    def test_windows_beep_is_best_effort(self) -> None:
        with mock.patch.dict("sys.modules", {"winsound": None}):
            notify.WindowsBeep().beep()

    def test_windows_beep_plays_tone(self) -> None:
        fake = mock.Mock()
        with mock.patch.dict("sys.modules", {"winsound": fake}):
            notify.WindowsBeep(frequency=440, duration_ms=200).beep()
        fake.Beep.assert_called_once_with(440, 200)

    def test_default_notifier_by_platform(self) -> None:
        self.assertIsInstance(notify.default_notifier(platform="win32"), notify.WindowsBeep)
        self.assertIsInstance(notify.default_notifier(platform="linux"), notify.TerminalBell)
        self.assertIsInstance(notify.default_notifier(platform="darwin"), notify.TerminalBell)


if __name__ == "__main__":
    unittest.main()
