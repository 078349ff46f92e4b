"""Run sequences of instructions against an airport and record the outcomes."""
import logging
from typing import Iterable, Optional

import pandas as pd
import torch

from airport_control.airport import Airport
from airport_control.errors import AirportError
from airport_control.types import Action, Instruction, Plane

logger = logging.getLogger(__name__)

OUTCOME_COLUMNS = ["step", "tail_number", "action", "succeeded", "error", "occupancy"]


def execute_instruction(airport: Airport, instruction: Instruction) -> None:
    """Pass a single instruction to the airport.

    Raises whatever the airport raises.
    """
    if instruction.action == Action.LAND:
        airport.instruct_landing(instruction.plane)
    elif instruction.action == Action.TAKE_OFF:
        airport.instruct_take_off(instruction.plane)
    else:
        raise ValueError(f"Unknown action {instruction.action!r}")


def _record(step: int, airport: Airport, instruction: Instruction) -> dict:
    try:
        execute_instruction(airport, instruction)
        error = None
    except AirportError as e:
        logger.info("Step %d: %s refused (%s)", step, instruction, e)
        error = e.kind.value

    return {
        "step": step,
        "tail_number": instruction.plane.tail_number,
        "action": instruction.action.value,
        "succeeded": error is None,
        "error": error,
        "occupancy": len(airport),
    }


def run_instructions(
    airport: Airport, instructions: Iterable[Instruction]
) -> pd.DataFrame:
    """Issue each instruction to the airport in turn.

    Refused instructions are recorded and the run continues; any other error
    propagates.

    Args:
        airport: The airport receiving the instructions. Modified in place.
        instructions: The instructions to issue, in order.

    Returns: a dataframe with one row per instruction and the columns
        step, tail_number, action, succeeded, error (the refusal reason, or None)
        and occupancy (the number of planes on the apron after the step).
    """
    records = [
        _record(step, airport, instruction)
        for step, instruction in enumerate(instructions)
    ]
    outcomes_df = pd.DataFrame.from_records(records, columns=OUTCOME_COLUMNS)

    # Successful steps have an error of None, not NaN
    outcomes_df["error"] = pd.Series(
        [record["error"] for record in records], index=outcomes_df.index, dtype=object
    )
    return outcomes_df


def simulate_traffic(
    airport: Airport,
    planes: list[Plane],
    num_steps: int,
    generator: Optional[torch.Generator] = None,
) -> pd.DataFrame:
    """Simulate random traffic through an airport.

    At each step a plane is chosen uniformly at random. If it is on the apron it
    is told to take off, otherwise it is told to land.

    Args:
        airport: The airport to simulate. Modified in place.
        planes: The planes that may use the airport.
        num_steps: The number of instructions to issue.
        generator: The random number generator used to pick planes.

    Returns: the outcomes of each step, as returned by run_instructions.
    """
    if not planes:
        raise ValueError("Need at least one plane to simulate traffic")
    if num_steps < 0:
        raise ValueError("Number of steps must be non-negative")

    def instructions():
        for _ in range(num_steps):
            idx = torch.randint(len(planes), (), generator=generator).item()
            plane = planes[idx]
            action = Action.TAKE_OFF if plane in airport else Action.LAND
            yield Instruction(plane=plane, action=action)

    return run_instructions(airport, instructions())


def summarize_outcomes(outcomes_df: pd.DataFrame) -> pd.DataFrame:
    """Count the outcomes of each action.

    Args:
        outcomes_df: a dataframe of outcomes as returned by run_instructions.

    Returns: a dataframe with columns action, error ("none" for instructions that
        succeeded) and count.
    """
    return (
        outcomes_df.assign(error=outcomes_df["error"].fillna("none"))
        .groupby(["action", "error"])
        .size()
        .reset_index(name="count")
    )
