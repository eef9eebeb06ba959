"""Environment probes: CI detection and package manager detection."""

import os

CI_INDICATOR_VARIABLES = (
    "CI",
    "CONTINUOUS_INTEGRATION",
    "BUILD_NUMBER",
    "RUN_ID",
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "CIRCLECI",
    "TRAVIS",
    "JENKINS_URL",
    "BUILDKITE",
    "TF_BUILD",
    "CODEBUILD_BUILD_ID",
    "TEAMCITY_VERSION",
)

PACKAGE_MANAGERS = ("npm", "pnpm", "yarn", "bun")


def is_ci(environ=None) -> bool:
    """Return True when any standard CI indicator variable is set."""
    if environ is None:
        environ = os.environ
    for name in CI_INDICATOR_VARIABLES:
        value = environ.get(name, "")
        if value and value.lower() not in ("false", "0"):
            return True
    return False


def detect_package_manager(environ=None) -> str:
    """Guess the package manager from npm_config_user_agent, defaulting to npm."""
    if environ is None:
        environ = os.environ
    user_agent = environ.get("npm_config_user_agent", "")
    for manager in ("yarn", "pnpm", "bun"):
        if user_agent.startswith(manager):
            return manager
    return "npm"
