"""Define methods for working with instruction schedules."""
from typing import Mapping, Optional

import pandas as pd

from airport_control.types import Action, Instruction, Plane, TailNumber

REQUIRED_COLUMNS = ("tail_number", "action")

_ACTION_ALIASES = {
    "land": Action.LAND,
    "landing": Action.LAND,
    "take_off": Action.TAKE_OFF,
    "take-off": Action.TAKE_OFF,
    "takeoff": Action.TAKE_OFF,
}


def parse_action(action) -> Action:
    """Parse an action name (or an Action) into an Action."""
    if isinstance(action, Action):
        return action

    try:
        return _ACTION_ALIASES[str(action).strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown action {action!r}") from None


def parse_instruction(
    schedule_row: Mapping, planes: Optional[dict[TailNumber, Plane]] = None
) -> Instruction:
    """
    Parse a row of the schedule into an Instruction object.

    Args:
        schedule_row: a mapping with the following items
            - tail_number
            - action ("land" or "take_off")
        planes: planes already seen, by tail number. A new plane is created (and
            added to this dict) the first time a tail number appears.
    """
    if planes is None:
        planes = {}

    if pd.isna(schedule_row["tail_number"]):
        raise ValueError(f"Missing tail number in schedule row {dict(schedule_row)}")

    tail_number = str(schedule_row["tail_number"])
    action = parse_action(schedule_row["action"])

    if tail_number not in planes:
        planes[tail_number] = Plane(tail_number=tail_number)

    return Instruction(plane=planes[tail_number], action=action)


def parse_schedule(schedule_df: pd.DataFrame) -> tuple[list[Instruction], list[Plane]]:
    """Parse a pandas dataframe for a schedule into a list of instructions.

    Args:
        schedule_df: A pandas dataframe with the following columns, one row per
            instruction in the order they are issued:
            tail_number: The tail number of the plane
            action: "land" or "take_off"

    Returns:
        a list of instructions, and
        a list of the planes they refer to, in order of first appearance
    """
    missing = [column for column in REQUIRED_COLUMNS if column not in schedule_df]
    if missing:
        raise ValueError(f"Schedule is missing columns: {missing}")

    planes: dict[TailNumber, Plane] = {}
    instructions = [
        parse_instruction(row, planes) for _, row in schedule_df.iterrows()
    ]

    return instructions, list(planes.values())
