"""Identity resolution for AppConfig environments.

An environment is identified by the triple (application id, environment id,
environment ARN). The ARN uses a slash separated resource name:

    arn:<partition>:appconfig:<region>:<account>:application/<applicationId>/environment/<environmentId>

The triple is either parsed out of an existing ARN or formatted from the two
ids within the current stack.
"""

import logging
from dataclasses import dataclass

from .context import ScopeContext
from .errors import MalformedIdentifierError

logger = logging.getLogger(__name__)

ENVIRONMENT_SEGMENT = "environment"
EXPECTED_FORMAT = "${applicationId}/environment/${environmentId}"


@dataclass(frozen=True)
class EnvironmentIdentity:
    """Resolved identifiers of one environment."""
    application_id: str
    environment_id: str
    environment_arn: str


def environment_resource_name(application_id: str, environment_id: str) -> str:
    return f"{application_id}/{ENVIRONMENT_SEGMENT}/{environment_id}"


def identity_from_arn(context: ScopeContext, environment_arn: str) -> EnvironmentIdentity:
    """Parse the identity triple out of an environment ARN.

    Args:
        context: Scope used to split the ARN
        environment_arn: Full ARN of the environment

    Returns:
        The identity triple with the ARN passed through unchanged.

    Raises:
        MalformedIdentifierError: If the resource name is missing or does not
            split into ``[applicationId, "environment", environmentId]``.
    """
    parsed = context.split_arn(environment_arn)
    resource_name = parsed.resource_name
    if not resource_name:
        raise MalformedIdentifierError(
            f"Missing required {EXPECTED_FORMAT} from environment ARN: {environment_arn}",
            arn=environment_arn,
        )

    segments = resource_name.split("/")
    if len(segments) != 3 or not segments[0] or not segments[2]:
        raise MalformedIdentifierError(
            f"Missing required parameters for environment ARN: format should be {EXPECTED_FORMAT}",
            arn=environment_arn,
        )

    identity = EnvironmentIdentity(
        application_id=segments[0],
        environment_id=segments[2],
        environment_arn=environment_arn,
    )
    logger.debug(
        f"Parsed environment {identity.environment_id} of application {identity.application_id} from ARN"
    )
    return identity


def identity_from_ids(
    context: ScopeContext, application_id: str, environment_id: str
) -> EnvironmentIdentity:
    """Format the environment ARN for the given ids within the context's stack."""
    environment_arn = context.format_arn(
        environment_resource_name(application_id, environment_id)
    )
    return EnvironmentIdentity(
        application_id=application_id,
        environment_id=environment_id,
        environment_arn=environment_arn,
    )
