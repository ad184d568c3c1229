from __future__ import annotations

import pytest
from pydantic import ValidationError

from gascontainer.models import GasContainerState, MassAdjustmentResponse, MassRequest


def test_state_serializes_with_camel_case_keys() -> None:
    state = GasContainerState(pressure=1.5, temperature=300.0, mass=2.0, is_destroyed=True)

    assert state.to_wire() == {"pressure": 1.5, "temperature": 300.0, "mass": 2.0, "isDestroyed": True}


def test_state_accepts_wire_and_field_names() -> None:
    from_wire = GasContainerState.model_validate({"isDestroyed": True, "pressure": 3})
    from_field = GasContainerState(is_destroyed=True, pressure=3)

    assert from_wire == from_field
    assert from_wire.mass == 0.0


def test_mass_request_requires_amount() -> None:
    with pytest.raises(ValidationError):
        MassRequest.model_validate({})


def test_models_are_frozen() -> None:
    reply = MassAdjustmentResponse(success=True, message="ok")

    with pytest.raises(ValidationError):
        reply.success = False  # type: ignore[misc]


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf")])
def test_mass_request_rejects_non_finite_amount(amount: float) -> None:
    with pytest.raises(ValidationError):
        MassRequest(amount=amount)


def test_mass_request_accepts_negative_and_zero_amounts() -> None:
    assert MassRequest(amount=-3.5).amount == -3.5
    assert MassRequest.model_validate({"amount": 0}).amount == 0.0
