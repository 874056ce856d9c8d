"""Global test configuration and shared fixtures."""

from __future__ import annotations

pytest_plugins = ("pytester", "callspec.pytest_plugin")
