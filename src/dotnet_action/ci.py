from __future__ import annotations

from typing import Optional

from .constants import CI_VARIABLE
from .environment import EnvironmentResolver
from .models import CIContext

# (vendor, variable, expected value). None means "any non-empty value".
_VENDOR_MARKERS: tuple[tuple[str, str, Optional[str]], ...] = (
    ("github-actions", "GITHUB_ACTIONS", "true"),
    ("azure-pipelines", "TF_BUILD", "True"),
    ("gitlab-ci", "GITLAB_CI", None),
    ("jenkins", "JENKINS_URL", None),
    ("circleci", "CIRCLECI", "true"),
    ("travis-ci", "TRAVIS", "true"),
    ("appveyor", "APPVEYOR", None),
    ("buildkite", "BUILDKITE", "true"),
    ("teamcity", "TEAMCITY_VERSION", None),
    ("bitbucket-pipelines", "BITBUCKET_BUILD_NUMBER", None),
)


def detect_ci_vendor(env: EnvironmentResolver) -> Optional[str]:
    """Name the CI vendor whose marker variable is set, if any."""
    for vendor, variable, expected in _VENDOR_MARKERS:
        value = env.lookup(variable)
        if value is None:
            continue
        if expected is None or value.lower() == expected.lower():
            return vendor
    return None


def detect(env: EnvironmentResolver) -> bool:
    return detect_context(env).is_ci


def detect_context(env: EnvironmentResolver) -> CIContext:
    """
    Determine whether this run is under CI.

    A recognized vendor counts as CI. Otherwise only the exact string "true" in
    `CI` does; "True" or "1" do not.
    """
    vendor = detect_ci_vendor(env)
    is_ci = vendor is not None or env.raw(CI_VARIABLE) == "true"
    return CIContext(is_ci=is_ci, vendor=vendor)
