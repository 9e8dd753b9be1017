import pytest

from anaviz.contracts import (
    USER_ERROR_MESSAGE,
    ConfigurationError,
    ContractViolation,
    EstimationError,
    InvalidInputError,
    PipelineError,
    SourceError,
    ValidationError,
    assert_series,
    require,
)
from anaviz.core import Point

pytestmark = pytest.mark.unit


def test_require_passes_silently():
    require(True, "never raised")


def test_require_raises_contract_violation_by_default():
    with pytest.raises(ContractViolation, match="broken"):
        require(False, "broken")


def test_require_raises_requested_error_kind():
    with pytest.raises(ValidationError, match="must be numeric"):
        require(False, "must be numeric", ValidationError)


@pytest.mark.parametrize("error_cls", [
    ConfigurationError, ValidationError, InvalidInputError,
    EstimationError, SourceError, ContractViolation,
])
def test_every_error_kind_is_a_pipeline_error(error_cls):
    assert issubclass(error_cls, PipelineError)
    assert issubclass(error_cls, RuntimeError)


def test_user_error_message_text():
    assert USER_ERROR_MESSAGE == "An error occurred during the data processing pipeline."


class TestAssertSeries:

    def test_accepts_list_of_points(self):
        assert_series([Point(0.0, 1.0), Point(1, 2)])

    def test_accepts_empty_series(self):
        assert_series([])

    def test_rejects_non_list(self):
        """A generator or tuple is not a Series."""
        with pytest.raises(ContractViolation, match="expected list of Point"):
            assert_series((Point(0, 0),))

    def test_rejects_raw_numbers(self):
        """Analyzer returning validated input unchanged breaks the contract."""
        with pytest.raises(ContractViolation, match="element 0 is float"):
            assert_series([1.0, 2.0])

    def test_rejects_non_numeric_coordinates(self):
        with pytest.raises(ContractViolation, match="non-numeric coordinates"):
            assert_series([Point(0, 1), Point("a", 2)])
