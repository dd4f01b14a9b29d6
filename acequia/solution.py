"""A canal strategy that balances water between regions until the task is solved."""

from __future__ import annotations

from .manager import AcequiaManager, Canal

DEFAULT_FLOW_RATE = 1.0


def _should_open(canal: Canal) -> bool:
    source = canal.source_region
    destination = canal.destination_region
    if destination.water_level < destination.water_need and canal.water_source.water_level > 0:
        return True
    return source.water_level > source.water_need


def solve_problems(manager: AcequiaManager) -> None:
    """Open and close canals each hour until solved or the time runs out.

    A canal is opened when its destination is short of its need and its
    water source still holds water, or when its source region has more
    than it needs. Open canals run at the default flow rate.
    """
    while not manager.is_solved and manager.hour < manager.simulation_max:
        for canal in manager.canals:
            is_open = _should_open(canal)
            canal.toggle_open(is_open)
            if is_open:
                canal.set_flow_rate(DEFAULT_FLOW_RATE)
        manager.next_hour()