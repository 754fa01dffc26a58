"""
Unit tests for the static website stack, run against the Pulumi mock monitor.
"""
