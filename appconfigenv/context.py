"""Deployment-scope facts needed to name resources and format ARNs.

The constructs never reach for the enclosing stack directly. They ask a
``ScopeContext`` instead, which defaults to the stack that owns the scope and
can be swapped for a fake in tests.
"""

from typing import Optional

from aws_cdk import ArnComponents, ArnFormat, Names, Stack
from constructs import Construct

APPCONFIG_SERVICE = "appconfig"
APPLICATION_RESOURCE = "application"


class ScopeContext:
    """Partition/account/region and naming facts for one stack."""

    def __init__(self, stack: Stack):
        self.stack = stack

    @classmethod
    def of(cls, scope: Construct) -> "ScopeContext":
        return cls(Stack.of(scope))

    def format_arn(self, resource_name: str) -> str:
        """Format an AppConfig application-scoped ARN in this stack."""
        return self.stack.format_arn(
            service=APPCONFIG_SERVICE,
            resource=APPLICATION_RESOURCE,
            resource_name=resource_name,
        )

    def split_arn(self, arn: str) -> ArnComponents:
        return self.stack.split_arn(arn, ArnFormat.SLASH_RESOURCE_NAME)

    def unique_name(
        self,
        construct: Construct,
        max_length: int = 64,
        separator: str = "-",
    ) -> str:
        """Return a name derived from the construct path.

        The same path always yields the same name and siblings never collide,
        because the name embeds a hash of the full path.
        """
        return Names.unique_resource_name(
            construct, max_length=max_length, separator=separator
        )


def resolve_context(scope: Construct, context: Optional[ScopeContext] = None) -> ScopeContext:
    return context if context is not None else ScopeContext.of(scope)
