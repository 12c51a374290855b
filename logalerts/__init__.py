"""
Log Alerts - Email notifications for matching log lines.

This package reads system log files, keeps the lines matching an
optional per-file filter pattern and sends them to a configured list
of recipients.
"""

__version__ = "0.1.0"
