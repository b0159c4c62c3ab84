"""CDK App entry point for the AppConfig environment infrastructure."""

import logging
import os

from aws_cdk import App, Environment

from appconfigenv.config import configure_logging, is_aws_deploy_allowed, load_config
from infra.appconfig_environment_stack import AppConfigEnvironmentStack

logger = logging.getLogger(__name__)


def main():
    """Main CDK app entry point."""
    app = App(outdir=os.getenv("CDK_OUTDIR"))

    # Load configuration
    stage = os.getenv("STAGE", "dev")
    config = load_config(stage)
    configure_logging(config)

    # Safety check for AWS deployment
    if not is_aws_deploy_allowed():
        logger.warning("ALLOW_AWS_DEPLOY not set. This is a dry-run synthesis only.")
        logger.warning("Set ALLOW_AWS_DEPLOY=1 to enable actual AWS deployments.")

    env = Environment(
        account=config.aws.account or os.getenv("CDK_DEFAULT_ACCOUNT"),
        region=config.aws.region
    )

    AppConfigEnvironmentStack(
        app,
        f"AppConfigEnvironments-{config.stage}",
        config=config,
        env=env,
        description=f"AppConfig environments for {config.stage} stage"
    )

    app.synth()


if __name__ == "__main__":
    main()
