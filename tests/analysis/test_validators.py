import numpy as np
import pytest

from anaviz.analysis import NumericValidator, PointValidator
from anaviz.contracts import ValidationError
from anaviz.core import Point

pytestmark = pytest.mark.unit


class TestNumericValidator:

    @pytest.mark.asyncio
    async def test_returns_input_unchanged(self):
        data = [1.2, 2.5, 3.7]

        result = await NumericValidator().validate_data(data)

        assert result is data
        assert data == [1.2, 2.5, 3.7]

    @pytest.mark.asyncio
    async def test_empty_sequence_is_valid(self):
        assert await NumericValidator().validate_data([]) == []

    @pytest.mark.asyncio
    async def test_accepts_numpy_array(self):
        data = np.array([1.0, 2.0])
        assert await NumericValidator().validate_data(data) is data

    @pytest.mark.asyncio
    async def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="data must be numeric"):
            await NumericValidator().validate_data(["a", "b"])

    @pytest.mark.asyncio
    async def test_rejects_numeric_strings(self):
        """No coercion: "1" is not a number."""
        with pytest.raises(ValidationError, match="element 1"):
            await NumericValidator().validate_data([1, "2"])

    @pytest.mark.asyncio
    async def test_rejects_booleans(self):
        with pytest.raises(ValidationError):
            await NumericValidator().validate_data([1, True])

    @pytest.mark.asyncio
    async def test_rejects_non_sequence(self):
        with pytest.raises(ValidationError, match="must be a sequence"):
            await NumericValidator().validate_data(42)


class TestPointValidator:

    @pytest.mark.asyncio
    async def test_accepts_mappings_and_points(self):
        data = [{"x": 1, "y": 5}, Point(2, 3), {"x": 0, "y": 0}]

        assert await PointValidator().validate_data(data) is data

    @pytest.mark.asyncio
    async def test_rejects_missing_y(self):
        with pytest.raises(ValidationError, match="missing x or y"):
            await PointValidator().validate_data([{"x": 1, "y": 5}, {"x": 2}])

    @pytest.mark.asyncio
    async def test_rejects_plain_numbers(self):
        with pytest.raises(ValidationError, match="element 0"):
            await PointValidator().validate_data([1.0, 2.0])
