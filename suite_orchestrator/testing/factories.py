"""Test factories for generating test data."""

from polyfactory.factories import DataclassFactory
from polyfactory.factories.pydantic_factory import ModelFactory

from suite_orchestrator.models.category import SuiteCategory
from suite_orchestrator.models.result import SuiteResult


class SuiteResultFactory(DataclassFactory[SuiteResult]):
    """Factory for SuiteResult."""

    __model__ = SuiteResult


class SuiteCategoryFactory(ModelFactory[SuiteCategory]):
    """Factory for SuiteCategory."""

    env_file = ".env.test"
    needs_env = False
