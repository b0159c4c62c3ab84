import json

import pytest
from aws_cdk import App, assertions

from appconfigenv.config import Config
from infra.appconfig_environment_stack import AppConfigEnvironmentStack

from conftest import ALARM_ARN, OTHER_ALARM_ARN, ROLE_ARN


def minimal_config(application_id=None) -> dict:
    """Return a minimal config dict the stack expects."""
    return {
        "stage": "test",
        "app_name": "appconfig-environments",
        "aws": {"region": "us-east-1"},
        "application": {"name": "flags-test", "application_id": application_id},
        "environments": [
            {
                "id": "Prod",
                "name": "prod",
                "description": "Production",
                "monitors": [
                    {"alarm_arn": ALARM_ARN},
                    {"alarm_arn": OTHER_ALARM_ARN, "alarm_role_arn": ROLE_ARN},
                ],
            },
            {"id": "Dev"},
        ],
    }


@pytest.fixture
def template():
    stack = AppConfigEnvironmentStack(App(), "TestStack", config=minimal_config())
    return assertions.Template.from_stack(stack)


def test_environments_created_per_config_entry(template):
    template.resource_count_is("AWS::AppConfig::Application", 1)
    template.resource_count_is("AWS::AppConfig::Environment", 2)
    template.has_resource_properties("AWS::AppConfig::Application", {"Name": "flags-test"})


def test_only_unauthorized_monitors_get_roles(template):
    template.resource_count_is("AWS::IAM::Role", 1)
    template.has_resource_properties("AWS::AppConfig::Environment", {
        "Name": "prod",
        "Description": "Production",
        "Monitors": [
            {"AlarmArn": ALARM_ARN, "AlarmRoleArn": {"Fn::GetAtt": [assertions.Match.any_value(), "Arn"]}},
            {"AlarmArn": OTHER_ALARM_ARN, "AlarmRoleArn": ROLE_ARN},
        ],
    })


def test_outputs_environment_identifiers(template):
    outputs = template.to_json().get("Outputs", {})

    assert {"ProdEnvironmentId", "ProdEnvironmentArn", "DevEnvironmentId", "DevEnvironmentArn"} <= set(outputs)
    assert "application/" in json.dumps(outputs["ProdEnvironmentArn"]["Value"])


def test_resources_tagged(template):
    template.has_resource_properties("AWS::IAM::Role", {
        "Tags": assertions.Match.array_with([{"Key": "Stage", "Value": "test"}]),
    })


def test_existing_application_is_imported():
    config = Config(**minimal_config(application_id="abc1234"))
    stack = AppConfigEnvironmentStack(App(), "ImportStack", config=config)
    template = assertions.Template.from_stack(stack)

    template.resource_count_is("AWS::AppConfig::Application", 0)
    template.has_resource_properties("AWS::AppConfig::Environment", {"ApplicationId": "abc1234"})
    assert len(stack.application.environments) == 2
