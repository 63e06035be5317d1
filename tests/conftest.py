import os
import types
import uuid

import pytest

for _name in ("ALERT_TRIGGER", "ALERT_ACTION", "LOG_CONFIG", "LOG_LEVEL", "APP_ENV"):
    os.environ.pop(_name, None)

from aws_cdk import App
from aws_cdk.assertions import Template

from ics_alerts.config import reload_config
from stacks.infra_stack import InfraStack


@pytest.fixture(autouse=True)
def fresh_config():
    """Reload configuration around each test so env overrides don't leak."""
    reload_config()
    yield
    reload_config()


@pytest.fixture
def code_dir(tmp_path):
    """Directory standing in for the prebuilt ``bootstrap`` asset."""
    asset = tmp_path / "ics-alerts"
    asset.mkdir()
    (asset / "bootstrap").write_bytes(b"\x7fELF-placeholder")
    return asset


@pytest.fixture
def infra_stack(code_dir):
    return InfraStack(App(), "InfraStack", code_path=code_dir)


@pytest.fixture
def template(infra_stack):
    return Template.from_stack(infra_stack)


@pytest.fixture
def lambda_context():
    """A small stand-in for the LambdaContext object."""
    return types.SimpleNamespace(
        function_name="ics-alerts",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:eu-west-2:000000000000:function:ics-alerts",
        aws_request_id="req-" + uuid.uuid4().hex,
        get_remaining_time_in_millis=lambda: 30000,
    )
