"""Shared test configuration for binstat tests."""

import hypothesis

# The first torch call in a process is slow enough to trip the default deadline
hypothesis.settings.register_profile("binstat", deadline=None)
hypothesis.settings.load_profile("binstat")
