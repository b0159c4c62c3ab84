"""AWS AppConfig environment constructs.

``Environment`` declares a new AWS::AppConfig::Environment. Existing
environments are imported with ``Environment.from_environment_arn`` or
``Environment.from_environment_attributes``, which return the lighter
``EnvironmentImportedByArn`` / ``EnvironmentImportedByAttributes`` variants.

Every variant holds an ``ExtensibleBase`` bound to its ARN and forwards the
extension hooks (``on``, ``on_deployment_baking``, ...) to it.
"""

import logging
from typing import Any, Optional, Protocol, Sequence, Tuple

from aws_cdk import Resource
from aws_cdk import (
    aws_appconfig as appconfig,
)
from constructs import Construct

from .builder import EnvironmentDefinition, Monitor, build_definition
from .context import ScopeContext, resolve_context
from .identity import EnvironmentIdentity, identity_from_arn, identity_from_ids

logger = logging.getLogger(__name__)


class IApplication(Protocol):
    """Parent application an environment is declared under."""

    application_id: str

    def add_existing_environment(self, environment: "EnvironmentBase") -> None:
        """Record an environment that belongs to this application."""
        ...


class EnvironmentBase(Resource):
    """Identity accessors and extension hooks shared by all environment variants."""

    application: Optional[IApplication] = None
    application_id: str
    environment_id: str
    environment_arn: str
    name: Optional[str] = None
    description: Optional[str] = None
    monitors: Optional[Tuple[Monitor, ...]] = None

    _extensible: appconfig.ExtensibleBase

    def _attach_extensible(self) -> None:
        self._extensible = appconfig.ExtensibleBase(self, self.environment_arn, self.name)

    def on(
        self,
        action_point: appconfig.ActionPoint,
        event_destination: appconfig.IEventDestination,
        **options: Any,
    ) -> None:
        """Add an extension for the action point and associate it with this environment.

        Args:
            action_point: The action point which triggers the event
            event_destination: Destination invoked at the action point
            **options: Extension options (extension_name, description,
                latest_version_number, parameters)
        """
        self._extensible.on(action_point, event_destination, **options)

    def pre_create_hosted_configuration_version(
        self, event_destination: appconfig.IEventDestination, **options: Any
    ) -> None:
        self.on(appconfig.ActionPoint.PRE_CREATE_HOSTED_CONFIGURATION_VERSION, event_destination, **options)

    def pre_start_deployment(self, event_destination: appconfig.IEventDestination, **options: Any) -> None:
        self.on(appconfig.ActionPoint.PRE_START_DEPLOYMENT, event_destination, **options)

    def on_deployment_start(self, event_destination: appconfig.IEventDestination, **options: Any) -> None:
        self.on(appconfig.ActionPoint.ON_DEPLOYMENT_START, event_destination, **options)

    def on_deployment_step(self, event_destination: appconfig.IEventDestination, **options: Any) -> None:
        self.on(appconfig.ActionPoint.ON_DEPLOYMENT_STEP, event_destination, **options)

    def on_deployment_baking(self, event_destination: appconfig.IEventDestination, **options: Any) -> None:
        self.on(appconfig.ActionPoint.ON_DEPLOYMENT_BAKING, event_destination, **options)

    def on_deployment_complete(self, event_destination: appconfig.IEventDestination, **options: Any) -> None:
        self.on(appconfig.ActionPoint.ON_DEPLOYMENT_COMPLETE, event_destination, **options)

    def on_deployment_rolled_back(self, event_destination: appconfig.IEventDestination, **options: Any) -> None:
        self.on(appconfig.ActionPoint.ON_DEPLOYMENT_ROLLED_BACK, event_destination, **options)

    def add_extension(self, extension: appconfig.IExtension) -> None:
        """Associate an existing extension with this environment."""
        self._extensible.add_extension(extension)

    @property
    def identity(self) -> EnvironmentIdentity:
        return EnvironmentIdentity(
            application_id=self.application_id,
            environment_id=self.environment_id,
            environment_arn=self.environment_arn,
        )


class EnvironmentImportedByArn(EnvironmentBase):
    """An existing environment known only by its ARN."""

    def __init__(self, scope: Construct, construct_id: str, identity: EnvironmentIdentity):
        super().__init__(scope, construct_id, environment_from_arn=identity.environment_arn)
        self.application_id = identity.application_id
        self.environment_id = identity.environment_id
        self.environment_arn = identity.environment_arn
        self._attach_extensible()


class EnvironmentImportedByAttributes(EnvironmentBase):
    """An existing environment described by its application, id and optional metadata."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        identity: EnvironmentIdentity,
        *,
        application: IApplication,
        name: Optional[str] = None,
        description: Optional[str] = None,
        monitors: Optional[Sequence[Monitor]] = None,
    ):
        super().__init__(scope, construct_id, environment_from_arn=identity.environment_arn)
        self.application = application
        self.application_id = identity.application_id
        self.environment_id = identity.environment_id
        self.environment_arn = identity.environment_arn
        self.name = name
        self.description = description
        self.monitors = tuple(monitors) if monitors is not None else None
        self._attach_extensible()


class Environment(EnvironmentBase):
    """An AWS AppConfig environment.

    Declares AWS::AppConfig::Environment under the given application. A name
    is generated when none is given, and every monitor without an alarm role
    gets a generated role scoped to its alarm. Once the ARN is known the
    environment registers itself with ``application``.
    """

    @classmethod
    def from_environment_arn(
        cls,
        scope: Construct,
        construct_id: str,
        environment_arn: str,
        *,
        context: Optional[ScopeContext] = None,
    ) -> EnvironmentImportedByArn:
        """Import an environment from its ARN.

        Raises:
            MalformedIdentifierError: If the ARN has no
                ``<applicationId>/environment/<environmentId>`` resource name.
        """
        identity = identity_from_arn(resolve_context(scope, context), environment_arn)
        return EnvironmentImportedByArn(scope, construct_id, identity)

    @classmethod
    def from_environment_attributes(
        cls,
        scope: Construct,
        construct_id: str,
        *,
        application: IApplication,
        environment_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        monitors: Optional[Sequence[Monitor]] = None,
        context: Optional[ScopeContext] = None,
    ) -> EnvironmentImportedByAttributes:
        """Import an environment from its application and environment id."""
        identity = identity_from_ids(
            resolve_context(scope, context), application.application_id, environment_id
        )
        return EnvironmentImportedByAttributes(
            scope, construct_id, identity,
            application=application,
            name=name,
            description=description,
            monitors=monitors,
        )

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        application: IApplication,
        name: Optional[str] = None,
        description: Optional[str] = None,
        monitors: Optional[Sequence[Monitor]] = None,
        context: Optional[ScopeContext] = None,
    ) -> None:
        """Initialize the environment.

        Args:
            scope: CDK scope
            construct_id: Construct identifier
            application: Parent application exposing ``application_id`` and
                ``add_existing_environment``
            name: Environment name, generated when omitted
            description: Free-text description
            monitors: CloudWatch alarms watched during deployments
            context: Scope facts override, defaults to the enclosing stack
        """
        super().__init__(scope, construct_id, physical_name=name)
        context = resolve_context(self, context)

        self.application = application
        self.application_id = application.application_id
        self.description = description
        self.monitors = tuple(monitors) if monitors is not None else None

        self.definition: EnvironmentDefinition = build_definition(
            self, self.application_id,
            context=context,
            name=name,
            description=description,
            monitors=self.monitors,
        )
        self.name = self.definition.name

        monitors_property = [
            appconfig.CfnEnvironment.MonitorsProperty(
                alarm_arn=entry.alarm_arn, alarm_role_arn=entry.alarm_role_arn
            )
            for entry in self.definition.monitors
        ]
        resource = appconfig.CfnEnvironment(
            self, "Resource",
            application_id=self.definition.application_id,
            name=self.definition.name,
            description=self.definition.description,
            monitors=monitors_property or None,
        )
        self._cfn_environment = resource

        identity = identity_from_ids(context, self.application_id, resource.ref)
        self.environment_id = identity.environment_id
        self.environment_arn = identity.environment_arn
        self._attach_extensible()

        application.add_existing_environment(self)
        logger.info(
            f"Declared AppConfig environment {self.node.path} with {len(self.definition.monitors)} monitor(s)"
        )
