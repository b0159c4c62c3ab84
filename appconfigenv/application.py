"""AWS AppConfig application constructs.

An application owns the environments declared for it. Environments call
``add_existing_environment`` once their ARN is resolved so the application
can enumerate them.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from aws_cdk import Resource
from aws_cdk import (
    aws_appconfig as appconfig,
)
from constructs import Construct

from .builder import MAX_NAME_LENGTH, NAME_SEPARATOR, Monitor
from .context import ScopeContext, resolve_context
from .environment import Environment, EnvironmentBase

logger = logging.getLogger(__name__)


class ApplicationBase(Resource):
    """Environment bookkeeping shared by declared and imported applications."""

    application_id: str
    application_arn: str
    name: Optional[str] = None
    description: Optional[str] = None

    def __init__(self, scope: Construct, construct_id: str, **kwargs: Any) -> None:
        super().__init__(scope, construct_id, **kwargs)
        self._environments: List[EnvironmentBase] = []

    @property
    def environments(self) -> Tuple[EnvironmentBase, ...]:
        return tuple(self._environments)

    def add_existing_environment(self, environment: EnvironmentBase) -> None:
        """Record an environment that belongs to this application."""
        self._environments.append(environment)
        logger.debug(f"Registered environment {environment.node.path} with application {self.node.path}")

    def add_environment(
        self,
        construct_id: str,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        monitors: Optional[Sequence[Monitor]] = None,
    ) -> Environment:
        """Declare a new environment bound to this application.

        The environment is created beside the application, under the same
        parent scope.
        """
        return Environment(
            self.node.scope, construct_id,
            application=self,
            name=name,
            description=description,
            monitors=monitors,
        )


class ImportedApplication(ApplicationBase):
    """An existing application referenced by id."""

    def __init__(self, scope: Construct, construct_id: str, application_id: str, application_arn: str):
        super().__init__(scope, construct_id, environment_from_arn=application_arn)
        self.application_id = application_id
        self.application_arn = application_arn


class Application(ApplicationBase):
    """An AWS AppConfig application (AWS::AppConfig::Application)."""

    @classmethod
    def from_application_id(
        cls,
        scope: Construct,
        construct_id: str,
        application_id: str,
        *,
        context: Optional[ScopeContext] = None,
    ) -> ImportedApplication:
        application_arn = resolve_context(scope, context).format_arn(application_id)
        return ImportedApplication(scope, construct_id, application_id, application_arn)

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        context: Optional[ScopeContext] = None,
    ) -> None:
        super().__init__(scope, construct_id, physical_name=name)
        context = resolve_context(self, context)

        self.name = name or context.unique_name(
            self, max_length=MAX_NAME_LENGTH, separator=NAME_SEPARATOR
        )
        self.description = description

        resource = appconfig.CfnApplication(
            self, "Resource",
            name=self.name,
            description=description,
        )
        self.application_id = resource.ref
        self.application_arn = context.format_arn(self.application_id)
