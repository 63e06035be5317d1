#!/usr/bin/env python3
import os

import aws_cdk as cdk

from stacks.infra_stack import InfraStack


def stack_env():
    """Return a pinned environment when the CDK CLI supplies one."""

    account = os.getenv("CDK_DEFAULT_ACCOUNT")
    region = os.getenv("CDK_DEFAULT_REGION")
    if account and region:
        return cdk.Environment(account=account, region=region)
    return None


def resolve_code_path(app: cdk.App):
    """Asset directory from context, then ``ALERT_CODE_PATH``; None means the stack default."""

    return (
        app.node.try_get_context("alert_code_path")
        or os.getenv("ALERT_CODE_PATH")
        or None
    )


app = cdk.App()
code_path = resolve_code_path(app)

InfraStack(app, "InfraStack", code_path=code_path, env=stack_env())
app.synth()
