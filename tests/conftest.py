from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from dotnet_action.environment import EnvironmentResolver

_HOST_VARIABLES = (
    "CI",
    "GITHUB_ACTIONS",
    "TF_BUILD",
    "GITLAB_CI",
    "JENKINS_URL",
    "CIRCLECI",
    "TRAVIS",
    "APPVEYOR",
    "BUILDKITE",
    "TEAMCITY_VERSION",
    "BITBUCKET_BUILD_NUMBER",
    "GITHUB_OUTPUT",
    "GITHUB_STEP_SUMMARY",
)

_PLAIN_INPUTS = ("CONFIGURATION", "PROJECT", "NO_RESTORE", "NO_BUILD", "OUTPUT", "RUNTIME", "FILTER", "LOGGER")


@pytest.fixture(params=["asyncio"])
def anyio_backend(request):
    """Restrict anyio tests to asyncio only (trio is not installed)."""
    return request.param


@pytest.fixture
def make_env() -> Callable[..., EnvironmentResolver]:
    def _make(**variables: str) -> EnvironmentResolver:
        return EnvironmentResolver(variables)

    return _make


@pytest.fixture
def clean_ci_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip CI markers and action inputs from the process env (tests may run under CI)."""
    for name in list(os.environ):
        if name in _HOST_VARIABLES or name.startswith("INPUT_"):
            monkeypatch.delenv(name, raising=False)
    for name in _PLAIN_INPUTS:
        monkeypatch.delenv(name, raising=False)
