"""Global test fixtures."""

import os

import logfire

# Keep a developer's config file out of Config() built by tests
os.environ.pop("AM_CONFIG_FILE", None)

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)
