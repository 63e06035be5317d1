from pathlib import Path
from typing import Optional, Union

from aws_cdk import (
    CfnOutput,
    Stack,
)
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_logs as logs
from constructs import Construct


def default_code_path() -> Path:
    """Directory holding the prebuilt ``bootstrap`` binary for the alert handler."""

    return Path(__file__).resolve().parents[2] / "lambdas" / "ics-alerts"


class InfraStack(Stack):
    """CDK stack that deploys the ICS alert Lambda behind a public function URL."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        code_path: Optional[Union[str, Path]] = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        asset_path = Path(code_path) if code_path else default_code_path()

        self.log_group = logs.LogGroup(
            self,
            "AlertHandlerLogGroup",
            retention=logs.RetentionDays.ONE_WEEK,
        )

        self.alert_fn = _lambda.Function(
            self,
            "AlertHandler",
            runtime=_lambda.Runtime.PROVIDED_AL2,
            architecture=_lambda.Architecture.ARM_64,
            handler="alertHandler",
            code=_lambda.Code.from_asset(str(asset_path)),
            memory_size=256,
            log_group=self.log_group,
        )

        # Public webhook: anyone holding the URL may invoke the function
        self.fn_url = _lambda.CfnUrl(
            self,
            "alertFnUrl",
            target_function_arn=self.alert_fn.function_arn,
            auth_type="NONE",
            cors=_lambda.CfnUrl.CorsProperty(allow_origins=["*"]),
        )

        self.fn_url_permission = _lambda.CfnPermission(
            self,
            "fnUrlPermission",
            function_name=self.alert_fn.function_name,
            principal="*",
            action="lambda:InvokeFunctionUrl",
            function_url_auth_type="NONE",
        )

        self.func_url_output = CfnOutput(
            self,
            "funcUrl",
            value=self.fn_url.attr_function_url,
        )
