from aws_cdk import assertions
from aws_cdk import aws_cloudwatch as cloudwatch
from constructs import Construct

from appconfigenv import Application, Environment, ImportedApplication, Monitor

from conftest import ALARM_ARN


def test_application_declares_resource(stack):
    application = Application(stack, "App", name="my-app", description="Feature flags")
    template = assertions.Template.from_stack(stack)

    template.has_resource_properties("AWS::AppConfig::Application", {
        "Name": "my-app",
        "Description": "Feature flags",
    })
    logical_id = stack.get_logical_id(application.node.default_child)
    assert stack.resolve(application.application_id) == {"Ref": logical_id}


def test_application_generates_name(stack):
    application = Application(stack, "App")

    assert application.name
    assert len(application.name) <= 64


def test_add_environment_binds_and_registers(stack):
    application = Application(stack, "App", name="my-app")
    alarm = cloudwatch.Alarm.from_alarm_arn(stack, "Alarm", ALARM_ARN)

    env = application.add_environment("Prod", name="prod", monitors=[Monitor(alarm=alarm)])
    template = assertions.Template.from_stack(stack)

    assert isinstance(env, Environment)
    assert env.application is application
    assert application.environments == (env,)
    app_id = stack.get_logical_id(application.node.default_child)
    template.has_resource_properties("AWS::AppConfig::Environment", {
        "ApplicationId": {"Ref": app_id},
        "Name": "prod",
    })


def test_environments_are_enumerated_in_declaration_order(stack):
    application = Application(stack, "App", name="my-app")

    dev = application.add_environment("Dev")
    prod = application.add_environment("Prod")

    assert application.environments == (dev, prod)


def test_from_application_id(stack):
    application = Application.from_application_id(stack, "Imported", "app1")

    assert isinstance(application, ImportedApplication)
    assert application.application_id == "app1"
    assert "application/app1" in str(stack.resolve(application.application_arn))
    assertions.Template.from_stack(stack).resource_count_is("AWS::AppConfig::Application", 0)


def test_add_environment_places_environment_beside_application(stack):
    team = Construct(stack, "Team")
    application = Application(team, "App", name="my-app")

    env = application.add_environment("Prod")

    assert env.node.scope is team
    assert env.node.path == "TestStack/Team/Prod"


def test_applications_under_sibling_scopes_can_reuse_environment_ids(stack):
    first = Application(Construct(stack, "TeamA"), "App", name="team-a")
    second = Application(Construct(stack, "TeamB"), "App", name="team-b")

    first.add_environment("Prod")
    second.add_environment("Prod")
    template = assertions.Template.from_stack(stack)

    template.resource_count_is("AWS::AppConfig::Environment", 2)
    assert len(first.environments) == 1
    assert len(second.environments) == 1
