"""
AWS Lambda entry-point for the ICS alert webhook (Python runtime).
Handler: ics_alerts.lambda_api.handler.alert_handler

``InfraStack`` does not deploy this module: it ships the prebuilt
``provided.al2`` binary from ``lambdas/ics-alerts`` with handler
``alertHandler``. Wire this handler into a Python-runtime function to serve
the same webhook without the binary.
"""

from __future__ import annotations

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import LambdaFunctionUrlEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from ics_alerts import config_module
from ics_alerts.alerts import add_alerts
from ics_alerts.logging_setup import setup_logging

setup_logging()

logger = Logger(service="ics-alerts", level=config_module.config.log_level)

CALENDAR_CONTENT_TYPE = "text/calendar; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


def _response(status_code: int, body: str = "", headers=None) -> dict:
    return {
        "statusCode": status_code,
        "headers": headers or {},
        "body": body,
        "isBase64Encoded": False,
        "cookies": [],
    }


@logger.inject_lambda_context()
@event_source(data_class=LambdaFunctionUrlEvent)
def alert_handler(event: LambdaFunctionUrlEvent, context: LambdaContext) -> dict:
    """Return the posted calendar with an alarm added to each event."""

    if not event.body:
        return _response(200)

    try:
        ics = event.decoded_body
    except ValueError:
        # binascii.Error and UnicodeDecodeError both land here
        logger.warning("Rejecting request with undecodable body", extra={"path": event.raw_path})
        return _response(400, "request body is not base64-encoded UTF-8 text", {"Content-Type": TEXT_CONTENT_TYPE})

    cfg = config_module.config
    result = add_alerts(ics, trigger=cfg.alert_trigger, action=cfg.alert_action)
    logger.info("Added alerts to calendar", extra={"bytes": len(ics), "trigger": cfg.alert_trigger})
    return _response(200, result, {"Content-Type": CALENDAR_CONTENT_TYPE})


lambda_handler = alert_handler
