import itertools

import pytest
from pydantic import ValidationError

from unitstat.models import (
    SystemdUnitActiveState,
    SystemdUnitLoadState,
    UnitStates,
    is_unit_unhealthy,
)


ALL_STATE_PAIRS = list(itertools.product(
    SystemdUnitActiveState,
    SystemdUnitLoadState,
))


def test_active_and_loaded_is_healthy():
    assert not is_unit_unhealthy(
        SystemdUnitActiveState.ACTIVE,
        SystemdUnitLoadState.LOADED,
    )


def test_loaded_but_not_active_is_unhealthy():
    assert is_unit_unhealthy(
        SystemdUnitActiveState.ACTIVATING,
        SystemdUnitLoadState.LOADED,
    )


def test_masked_is_never_unhealthy():
    assert not is_unit_unhealthy(
        SystemdUnitActiveState.FAILED,
        SystemdUnitLoadState.MASKED,
    )


def test_error_is_unhealthy_even_when_active():
    assert is_unit_unhealthy(
        SystemdUnitActiveState.ACTIVE,
        SystemdUnitLoadState.ERROR,
    )


@pytest.mark.parametrize('active_state, load_state', ALL_STATE_PAIRS)
def test_health_truth_table(active_state, load_state):
    unhealthy = is_unit_unhealthy(active_state, load_state)

    if load_state is SystemdUnitLoadState.LOADED:
        assert unhealthy == (active_state is not SystemdUnitActiveState.ACTIVE)
    elif load_state is SystemdUnitLoadState.MASKED:
        assert unhealthy is False
    else:
        assert unhealthy is True


@pytest.mark.parametrize('active_state, load_state', ALL_STATE_PAIRS)
def test_unit_states_derive_health(active_state, load_state):
    states = UnitStates.from_states(active_state, load_state)

    assert states.active_state is active_state
    assert states.load_state is load_state
    assert states.unhealthy == is_unit_unhealthy(active_state, load_state)


def test_unit_states_reject_contradicting_health():
    with pytest.raises(ValidationError, match='unhealthy must be False'):
        UnitStates(
            active_state=SystemdUnitActiveState.ACTIVE,
            load_state=SystemdUnitLoadState.LOADED,
            unhealthy=True,
        )


def test_unit_states_require_health():
    with pytest.raises(ValidationError):
        UnitStates(
            active_state=SystemdUnitActiveState.FAILED,
            load_state=SystemdUnitLoadState.LOADED,
        )


def test_unit_states_from_json_are_checked():
    valid = UnitStates.from_states(
        SystemdUnitActiveState.FAILED,
        SystemdUnitLoadState.LOADED,
    )

    assert UnitStates.model_validate_json(valid.model_dump_json()) == valid
    with pytest.raises(ValidationError):
        UnitStates.model_validate_json(
            '{"active_state": 4, "load_state": 1, "unhealthy": false}'
        )
