"""Noxfile for the AppConfig environments project.

Provides automated sessions for:
- Testing with coverage
- Linting and formatting
- Type checking
- Security scanning
- CDK synthesis
- Package building
"""

import nox

# Python versions to test against
PYTHON_VERSIONS = ["3.11"]

# Common locations
PACKAGE_DIR = "appconfigenv"
INFRA_DIR = "infra"


@nox.session(python=PYTHON_VERSIONS)
def tests(session):
    """Run the test suite with coverage."""
    session.install(".[test]")

    session.run(
        "pytest",
        "--cov=" + PACKAGE_DIR,
        "--cov=" + INFRA_DIR,
        "--cov-report=term-missing",
        "--cov-fail-under=80",
        *session.posargs,
    )


@nox.session(python=PYTHON_VERSIONS)
def lint(session):
    """Run linting with ruff."""
    session.install("ruff")
    session.run("ruff", "check", PACKAGE_DIR, INFRA_DIR, "tests")


@nox.session(python=PYTHON_VERSIONS)
def format(session):
    """Format code with black and ruff."""
    session.install("black", "ruff")
    session.run("black", ".")
    session.run("ruff", "check", "--fix", ".")


@nox.session(python=PYTHON_VERSIONS)
def typecheck(session):
    """Run type checking with mypy."""
    session.install(".")
    session.install("mypy", "types-PyYAML")
    session.run("mypy", PACKAGE_DIR, INFRA_DIR)


@nox.session(python=PYTHON_VERSIONS)
def security(session):
    """Run bandit over the package and infra code."""
    session.install("bandit[toml]")
    session.run("bandit", "-r", PACKAGE_DIR, INFRA_DIR)


@nox.session(python=PYTHON_VERSIONS)
def synth(session):
    """Synthesize the stack for a stage (default dev) into cdk.out."""
    session.install(".")
    stage = session.posargs[0] if session.posargs else "dev"
    session.run(
        "python", "-m", "infra.app",
        env={"STAGE": stage, "CDK_OUTDIR": "cdk.out"},
    )


@nox.session(python=PYTHON_VERSIONS)
def package(session):
    """Build the package."""
    session.install("build")
    session.run("python", "-m", "build")


@nox.session
def clean(session):
    """Clean up build artifacts and cache files."""
    import shutil
    from pathlib import Path

    clean_dirs = [
        ".pytest_cache",
        ".coverage",
        "htmlcov",
        "dist",
        "build",
        "cdk.out",
        "*.egg-info",
        ".mypy_cache",
        ".ruff_cache",
        "__pycache__",
    ]

    for pattern in clean_dirs:
        for path in Path(".").glob(f"**/{pattern}"):
            if path.is_dir():
                session.log(f"Removing directory: {path}")
                shutil.rmtree(path)
            elif path.is_file():
                session.log(f"Removing file: {path}")
                path.unlink()


# Default session when running `nox` without arguments
nox.options.sessions = ["tests", "lint", "typecheck"]
