"""Helpers shared by the test suites: site checks and test data."""
