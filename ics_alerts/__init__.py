"""Add reminder alarms to iCalendar feeds.

:mod:`ics_alerts.alerts` holds the calendar rewrite and
:mod:`ics_alerts.lambda_api.handler` serves it over a function URL. Settings
(alarm trigger, action, logging) live in :mod:`ics_alerts.config`, which is
re-exported here as ``config``.
"""

from . import config as config_module

config = config_module

__all__ = ["config", "config_module"]
