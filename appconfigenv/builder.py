"""Build the AWS::AppConfig::Environment definition.

This module resolves the environment name and maps monitors to
(alarm ARN, alarm role ARN) pairs. Monitors without an explicit role get a
synthesized least-privilege role that can only describe their own alarm.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from aws_cdk import PhysicalName
from aws_cdk import (
    aws_cloudwatch as cloudwatch,
)
from aws_cdk import (
    aws_iam as iam,
)
from constructs import Construct

from .context import ScopeContext

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 64
NAME_SEPARATOR = "-"
APPCONFIG_PRINCIPAL = "appconfig.amazonaws.com"
DESCRIBE_ALARMS_ACTION = "cloudwatch:DescribeAlarms"
ALARM_POLICY_NAME = "AllowAppConfigMonitorAlarmPolicy"


@dataclass(frozen=True)
class Monitor:
    """A CloudWatch alarm that AppConfig watches during deployments.

    When ``alarm_role`` is omitted a role is generated for the alarm.
    """
    alarm: cloudwatch.IAlarm
    alarm_role: Optional[iam.IRole] = None


@dataclass(frozen=True)
class MonitorEntry:
    alarm_arn: str
    alarm_role_arn: str

    def to_cfn(self) -> Dict[str, str]:
        return {"AlarmArn": self.alarm_arn, "AlarmRoleArn": self.alarm_role_arn}


@dataclass(frozen=True)
class EnvironmentDefinition:
    """Resolved properties handed to the CfnEnvironment resource."""
    application_id: str
    name: str
    description: Optional[str] = None
    monitors: Tuple[MonitorEntry, ...] = field(default_factory=tuple)

    def cfn_monitors(self) -> List[Dict[str, str]]:
        return [entry.to_cfn() for entry in self.monitors]

    def to_cfn_properties(self) -> Dict[str, Any]:
        """Render the definition with CloudFormation property names."""
        props: Dict[str, Any] = {
            "ApplicationId": self.application_id,
            "Name": self.name,
        }
        if self.description is not None:
            props["Description"] = self.description
        if self.monitors:
            props["Monitors"] = self.cfn_monitors()
        return props


def resolve_name(owner: Construct, name: Optional[str], context: ScopeContext) -> str:
    """Use the explicit name, or generate one from the owner's construct path."""
    if name:
        return name
    generated = context.unique_name(
        owner, max_length=MAX_NAME_LENGTH, separator=NAME_SEPARATOR
    )
    logger.debug(f"Generated environment name {generated} for {owner.node.path}")
    return generated


def create_alarm_role(owner: Construct, alarm_arn: str, index: int) -> iam.IRole:
    """Create a role AppConfig can assume to read one alarm's state.

    The role lives under ``owner`` with id ``Role<index>``, so its identity
    follows the monitor's position in the list.
    """
    statement = iam.PolicyStatement(
        effect=iam.Effect.ALLOW,
        actions=[DESCRIBE_ALARMS_ACTION],
        resources=[alarm_arn],
    )
    document = iam.PolicyDocument(statements=[statement])
    role = iam.Role(
        owner, f"Role{index}",
        role_name=PhysicalName.GENERATE_IF_NEEDED,
        assumed_by=iam.ServicePrincipal(APPCONFIG_PRINCIPAL),
        inline_policies={ALARM_POLICY_NAME: document},
    )
    logger.info(f"Synthesized monitor role Role{index} under {owner.node.path}")
    return role


def map_monitors(owner: Construct, monitors: Optional[Sequence[Monitor]]) -> List[MonitorEntry]:
    """Map monitors to CloudFormation entries, preserving input order."""
    entries: List[MonitorEntry] = []
    for index, monitor in enumerate(monitors or []):
        alarm_arn = monitor.alarm.alarm_arn
        if monitor.alarm_role is not None:
            role_arn = monitor.alarm_role.role_arn
        else:
            role_arn = create_alarm_role(owner, alarm_arn, index).role_arn
        entries.append(MonitorEntry(alarm_arn=alarm_arn, alarm_role_arn=role_arn))
    return entries


def build_definition(
    owner: Construct,
    application_id: str,
    *,
    context: ScopeContext,
    name: Optional[str] = None,
    description: Optional[str] = None,
    monitors: Optional[Sequence[Monitor]] = None,
) -> EnvironmentDefinition:
    """Resolve name and monitors into an EnvironmentDefinition.

    Args:
        owner: Construct that will own the resource and any generated roles
        application_id: Id of the parent application
        context: Scope used for name generation
        name: Explicit environment name, generated when omitted
        description: Free-text description
        monitors: Alarms to watch, in order

    Returns:
        The definition ready to be emitted as AWS::AppConfig::Environment.
    """
    resolved_name = resolve_name(owner, name, context)
    entries = map_monitors(owner, monitors)
    return EnvironmentDefinition(
        application_id=application_id,
        name=resolved_name,
        description=description,
        monitors=tuple(entries),
    )
