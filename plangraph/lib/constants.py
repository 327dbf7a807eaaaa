"""Shared constants for plangraph."""

import re

# Finding severities
SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

# Tags are kebab-case: "mvp", "phase-1", "2024-q1", "backend-api"
TAG_PATTERN = re.compile(r'^[a-z0-9]+(-[a-z0-9]+)*$')

# Exit codes
EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2

CONFIG_FILENAME = "plangraph.yaml"
