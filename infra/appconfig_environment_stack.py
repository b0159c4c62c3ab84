"""AppConfig Environment CDK Stack.

This stack creates:
- The AppConfig application (or imports an existing one by id)
- One AppConfig environment per configured entry
- Monitor roles for alarms configured without an explicit role
- Stack outputs with each environment's id and ARN
"""

import logging
from typing import Any, Dict, List, Union

from aws_cdk import CfnOutput, Stack, Tags
from aws_cdk import (
    aws_cloudwatch as cloudwatch,
)
from aws_cdk import (
    aws_iam as iam,
)
from constructs import Construct

from appconfigenv import Application, ApplicationBase, Environment, Monitor
from appconfigenv.config import Config, EnvironmentConfig

logger = logging.getLogger(__name__)


class AppConfigEnvironmentStack(Stack):
    """CDK Stack declaring AppConfig environments from configuration."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        # `config` may be a plain dict or a loaded Config model
        config: Union[Dict[str, Any], Config],
        **kwargs
    ) -> None:
        """Initialize the AppConfig Environment Stack.

        Args:
            scope: CDK scope
            construct_id: Stack identifier
            config: Configuration from the config loader
            **kwargs: Additional stack arguments
        """
        super().__init__(scope, construct_id, **kwargs)

        if isinstance(config, Config):
            self.config = config
        else:
            self.config = Config(**config)

        self.application = self._create_or_import_application()
        self.environments: List[Environment] = [
            self._create_environment(env_config) for env_config in self.config.environments
        ]

        self._apply_tags()

    def _create_or_import_application(self) -> ApplicationBase:
        app_config = self.config.application
        if app_config.application_id:
            logger.info(f"Importing existing AppConfig application {app_config.application_id}")
            return Application.from_application_id(self, "Application", app_config.application_id)

        return Application(
            self, "Application",
            name=app_config.name,
            description=app_config.description,
        )

    def _create_environment(self, env_config: EnvironmentConfig) -> Environment:
        """Create one environment and output its identifiers."""
        monitors = []
        for index, monitor_config in enumerate(env_config.monitors):
            alarm = cloudwatch.Alarm.from_alarm_arn(
                self, f"{env_config.id}Alarm{index}", monitor_config.alarm_arn
            )
            alarm_role = None
            if monitor_config.alarm_role_arn:
                alarm_role = iam.Role.from_role_arn(
                    self, f"{env_config.id}AlarmRole{index}", monitor_config.alarm_role_arn
                )
            monitors.append(Monitor(alarm=alarm, alarm_role=alarm_role))

        environment = self.application.add_environment(
            env_config.id,
            name=env_config.name,
            description=env_config.description,
            monitors=monitors,
        )

        CfnOutput(
            self, f"{env_config.id}EnvironmentId",
            value=environment.environment_id,
            description=f"AppConfig environment id for {env_config.id}",
        )
        CfnOutput(
            self, f"{env_config.id}EnvironmentArn",
            value=environment.environment_arn,
            description=f"AppConfig environment ARN for {env_config.id}",
        )
        return environment

    def _apply_tags(self) -> None:
        """Apply consistent tags to all resources."""
        tags = {
            "Application": self.config.app_name,
            "Stage": self.config.stage,
            "ManagedBy": "CDK"
        }

        for key, value in tags.items():
            Tags.of(self).add(key, value)
