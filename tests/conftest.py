import sys
from pathlib import Path

# Add the repository root to sys.path so tests can import `appconfigenv` and `infra` directly.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aws_cdk import App, Stack

ALARM_ARN = "arn:aws:cloudwatch:us-east-1:123456789012:alarm:A1"
OTHER_ALARM_ARN = "arn:aws:cloudwatch:us-east-1:123456789012:alarm:A2"
ROLE_ARN = "arn:aws:iam::123456789012:role/MonitorRole"


@pytest.fixture
def app():
    """CDK App for testing."""
    return App()


@pytest.fixture
def stack(app):
    return Stack(app, "TestStack")
