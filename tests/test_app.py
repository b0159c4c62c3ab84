import json

from infra import app as cdk_app


def test_main_synthesizes_prod_stage(monkeypatch, tmp_path):
    overrides = ("AWS_REGION", "APPCONFIG_APPLICATION_ID", "APPCONFIG_APPLICATION_NAME", "LOG_LEVEL", "ALLOW_AWS_DEPLOY")
    for var in overrides:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("STAGE", "prod")
    monkeypatch.setenv("CDK_OUTDIR", str(tmp_path))

    cdk_app.main()

    template_files = list(tmp_path.glob("AppConfigEnvironments*.template.json"))
    assert len(template_files) == 1
    resources = json.loads(template_files[0].read_text())["Resources"]
    types = [r["Type"] for r in resources.values()]
    assert types.count("AWS::AppConfig::Environment") == 2
