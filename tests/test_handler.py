import base64

import pytest

from ics_alerts.config import reload_config
from ics_alerts.lambda_api import handler

ICS = "BEGIN:VCALENDAR\r\nBEGIN:VEVENT\r\nSUMMARY:Standup\r\nEND:VEVENT\r\nEND:VCALENDAR\r\n"


def _event(body=None, encoded=False):
    return {
        "version": "2.0",
        "rawPath": "/",
        "rawQueryString": "",
        "headers": {"content-type": "text/calendar"},
        "requestContext": {"http": {"method": "POST", "path": "/"}},
        "body": body,
        "isBase64Encoded": encoded,
    }


def test_empty_request_returns_blank_ok(lambda_context):
    resp = handler.alert_handler(_event(), lambda_context)
    assert resp == {
        "statusCode": 200,
        "headers": {},
        "body": "",
        "isBase64Encoded": False,
        "cookies": [],
    }


def test_plain_body_gets_alerts(lambda_context):
    resp = handler.alert_handler(_event(ICS), lambda_context)
    assert resp["statusCode"] == 200
    assert resp["headers"]["Content-Type"] == handler.CALENDAR_CONTENT_TYPE
    assert "SUMMARY:Standup\nBEGIN:VALARM\nTRIGGER:-PT5M\nACTION:DISPLAY\nEND:VALARM\nEND:VEVENT" in resp["body"]


def test_base64_body_is_decoded(lambda_context):
    encoded = base64.b64encode(ICS.encode("utf-8")).decode("ascii")
    resp = handler.alert_handler(_event(encoded, encoded=True), lambda_context)
    assert resp["statusCode"] == 200
    assert resp["body"].count("BEGIN:VALARM") == 1


def test_configured_trigger_is_used(monkeypatch, lambda_context):
    monkeypatch.setenv("ALERT_TRIGGER", "-PT1H")
    monkeypatch.setenv("ALERT_ACTION", "AUDIO")
    reload_config()
    resp = handler.alert_handler(_event(ICS), lambda_context)
    assert "TRIGGER:-PT1H\nACTION:AUDIO" in resp["body"]


@pytest.mark.parametrize("body", ["not base64!!", base64.b64encode(b"\xff\xfe").decode("ascii")])
def test_unreadable_body_rejected(body, monkeypatch, lambda_context):
    warnings = []
    monkeypatch.setattr(handler.logger, "warning", lambda msg, *args, **kwargs: warnings.append(msg))
    resp = handler.alert_handler(_event(body, encoded=True), lambda_context)
    assert resp["statusCode"] == 400
    assert resp["headers"]["Content-Type"] == handler.TEXT_CONTENT_TYPE
    assert warnings == ["Rejecting request with undecodable body"]


def test_lambda_handler_alias():
    assert handler.lambda_handler is handler.alert_handler
