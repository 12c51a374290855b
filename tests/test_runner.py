"""
Tests for the one-shot runner.
"""

from datetime import date
from pathlib import Path
from unittest.mock import patch

from logalerts.config import Config
from logalerts.core import Alert, Notifier
from logalerts.notifiers import ConsoleNotifier, EmailNotifier
from logalerts.runner import LogAlertsRunner, read_matching_lines

TODAY = date(2024, 1, 5)


class RecordingNotifier(Notifier):
    """Notifier that keeps the alerts it receives."""

    def __init__(self, config: dict | None = None, result: bool = True) -> None:
        super().__init__(config or {})
        self.result = result
        self.alerts: list[Alert] = []

    def notify(self, alert: Alert) -> bool:
        self.alerts.append(alert)
        return self.result


class ExplodingNotifier(Notifier):
    """Notifier that always raises."""

    def notify(self, alert: Alert) -> bool:
        raise RuntimeError("notifier down")


def make_config(*logs: dict) -> Config:
    return Config.model_validate({
        "logs": list(logs),
        "notifiers": [{"type": "console"}],
    })


class TestReadMatchingLines:
    """Tests for read_matching_lines."""

    def test_renders_filter_for_today(self, sample_log: Path) -> None:
        """Test that the date template selects today's entries."""
        config = make_config({"path": str(sample_log), "filter_line_by": r"^${month}\s+${day}\b"})

        lines = read_matching_lines(config.logs[0], TODAY)

        assert lines == ["Jan 5 error\n", "Jan 5 warn\n"]

    def test_releases_handle(self, sample_log: Path) -> None:
        """Test that the source is closed after reading."""
        config = make_config({"path": str(sample_log)})

        with patch("logalerts.runner.LogSource.close", autospec=True) as mock_close:
            read_matching_lines(config.logs[0])

        mock_close.assert_called_once()


class TestLogAlertsRunner:
    """Tests for LogAlertsRunner."""

    def test_builds_notifiers_from_config(self) -> None:
        """Test that the email section and extra notifiers are created."""
        config = Config.model_validate({
            "logs": [{"path": "/tmp/a.log"}],
            "email": {"recipients": ["ops@example.com"]},
            "notifiers": [{"type": "console"}],
        })

        runner = LogAlertsRunner(config)

        assert [type(n) for n in runner.notifiers] == [EmailNotifier, ConsoleNotifier]

    def test_run_sends_matched_lines(self, sample_log: Path) -> None:
        """Test the full read and notify pass."""
        config = make_config({"path": str(sample_log), "filter_line_by": r"Jan\s+5"})
        notifier = RecordingNotifier()
        runner = LogAlertsRunner(config, notifiers=[notifier])

        report = runner.run()

        assert len(notifier.alerts) == 1
        alert = notifier.alerts[0]
        assert alert.log_name == "sample.log"
        assert alert.log_path == str(sample_log)
        assert alert.lines == ["Jan 5 error\n", "Jan 5 warn\n"]
        assert alert.context["filter"] == r"Jan\s+5"
        assert report.results[0].notified == 1
        assert report.matched_lines == 2

    def test_no_alert_without_matches(self, sample_log: Path) -> None:
        """Test that nothing is sent when no line matches."""
        config = make_config({"path": str(sample_log), "filter_line_by": "Dec"})
        notifier = RecordingNotifier()

        report = LogAlertsRunner(config, notifiers=[notifier]).run()

        assert notifier.alerts == []
        assert report.results[0].ok
        assert report.results[0].lines == []

    def test_missing_file_is_skipped(self, sample_log: Path, tmp_path: Path) -> None:
        """Test that a missing log does not stop the other logs."""
        config = make_config(
            {"path": str(tmp_path / "missing.log")},
            {"path": str(sample_log)},
        )
        notifier = RecordingNotifier()

        report = LogAlertsRunner(config, notifiers=[notifier]).run()

        assert len(report.results) == 2
        assert report.failed == [report.results[0]]
        assert "does not exist" in (report.results[0].error or "")
        assert len(notifier.alerts) == 1
        assert notifier.alerts[0].log_path == str(sample_log)

    def test_invalid_filter_is_skipped(self, sample_log: Path) -> None:
        """Test that a bad pattern is reported and the run continues."""
        config = make_config(
            {"path": str(sample_log), "filter_line_by": "Jan["},
            {"path": str(sample_log), "filter_line_by": "Feb"},
        )
        notifier = RecordingNotifier()

        report = LogAlertsRunner(config, notifiers=[notifier]).run()

        assert not report.results[0].ok
        assert "Invalid filter pattern" in (report.results[0].error or "")
        assert [a.lines for a in notifier.alerts] == [["Feb 1 ok\n"]]

    def test_dry_run_sends_nothing(self, sample_log: Path) -> None:
        """Test that a dry run reads but does not notify."""
        config = make_config({"path": str(sample_log)})
        notifier = RecordingNotifier()

        report = LogAlertsRunner(config, notifiers=[notifier]).run(dry_run=True)

        assert notifier.alerts == []
        assert len(report.results[0].lines) == 3

    def test_failing_notifier_does_not_stop_others(self, sample_log: Path) -> None:
        """Test that one broken notifier does not block delivery."""
        config = make_config({"path": str(sample_log)})
        recording = RecordingNotifier()
        runner = LogAlertsRunner(
            config,
            notifiers=[ExplodingNotifier({}), RecordingNotifier(result=False), recording],
        )

        report = runner.run()

        assert len(recording.alerts) == 1
        assert report.results[0].notified == 1

    def test_from_file(self, sample_log: Path, tmp_path: Path) -> None:
        """Test building a runner from YAML."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(f"""
logs:
  - path: "{sample_log}"
notifiers:
  - type: "console"
""")

        runner = LogAlertsRunner.from_file(str(config_file))

        assert len(runner.config.logs) == 1
        assert isinstance(runner.notifiers[0], ConsoleNotifier)
