from unitstat.models.states import SystemdUnitActiveState, SystemdUnitLoadState


def is_unit_unhealthy(
    active_state: SystemdUnitActiveState,
    load_state: SystemdUnitLoadState,
) -> bool:
    """Decide whether a unit counts as unhealthy.

    Only loaded units are judged on their active state. Masked units are
    never unhealthy since an administrator masks a unit on purpose. Any
    other load state (unknown, error, not found) is unhealthy.
    """
    match load_state:
        case SystemdUnitLoadState.LOADED:
            return active_state is not SystemdUnitActiveState.ACTIVE
        case SystemdUnitLoadState.MASKED:
            return False
        case _:
            return True
