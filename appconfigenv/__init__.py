"""CDK constructs for AWS AppConfig environments and their alarm monitors."""

from .application import Application, ApplicationBase, ImportedApplication
from .builder import EnvironmentDefinition, Monitor, MonitorEntry, build_definition
from .context import ScopeContext
from .environment import (
    Environment,
    EnvironmentBase,
    EnvironmentImportedByArn,
    EnvironmentImportedByAttributes,
    IApplication,
)
from .errors import MalformedIdentifierError
from .identity import EnvironmentIdentity, identity_from_arn, identity_from_ids

__all__ = [
    "Application",
    "ApplicationBase",
    "Environment",
    "EnvironmentBase",
    "EnvironmentDefinition",
    "EnvironmentIdentity",
    "EnvironmentImportedByArn",
    "EnvironmentImportedByAttributes",
    "IApplication",
    "ImportedApplication",
    "MalformedIdentifierError",
    "Monitor",
    "MonitorEntry",
    "ScopeContext",
    "build_definition",
    "identity_from_arn",
    "identity_from_ids",
]
