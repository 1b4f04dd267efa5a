"""
BDD scenarios for the health feature (pytest-bdd).
Steps live in step_defs/conftest.py.
"""

from pytest_bdd import scenarios

scenarios("../features/health.feature")
