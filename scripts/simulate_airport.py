"""Simulate random traffic through an airport in random weather."""
import logging
import os

import matplotlib
import matplotlib.pyplot as plt
import pandas as pd
import pyro
import seaborn as sns
import torch
import tqdm
from click import Choice, command, option

from airport_control.airport import DEFAULT_CAPACITY, Airport
from airport_control.simulation import simulate_traffic, summarize_outcomes
from airport_control.types import Plane
from airport_control.weather import DEFAULT_STORM_PROBABILITY, RandomWeather


@command()
@option("--capacity", default=DEFAULT_CAPACITY, type=int, help="Apron capacity")
@option("--n-planes", default=30, type=int, help="# of planes using the airport")
@option("--n-steps", default=200, type=int, help="# of instructions per run")
@option("--n-runs", default=10, type=int, help="# of independent runs")
@option(
    "--storm-probability",
    default=DEFAULT_STORM_PROBABILITY,
    type=float,
    help="Probability that the weather is stormy when queried",
)
@option("--seed", default=0, help="Random seed")
@option("--plot/--no-plot", default=True, help="Save a plot of apron occupancy")
@option("--output-dir", default="tmp", help="Directory for saved plots")
@option(
    "--log-level",
    default="WARNING",
    type=Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level",
)
def run(
    capacity,
    n_planes,
    n_steps,
    n_runs,
    storm_probability,
    seed,
    plot,
    output_dir,
    log_level,
):
    """Run several independent simulations and summarize the outcomes."""
    logging.basicConfig(level=log_level)
    pyro.set_rng_seed(seed)
    generator = torch.Generator().manual_seed(seed)

    outcomes = []
    for run_idx in tqdm.tqdm(range(n_runs)):
        weather = RandomWeather(storm_probability, var_prefix=f"run{run_idx}_")
        airport = Airport(weather, capacity=capacity)
        planes = [Plane(tail_number=f"P{i:03d}") for i in range(n_planes)]
        outcomes_df = simulate_traffic(airport, planes, n_steps, generator=generator)
        outcomes.append(outcomes_df.assign(run=run_idx))

    outcomes_df = pd.concat(outcomes, ignore_index=True)
    print(summarize_outcomes(outcomes_df).to_string(index=False))

    if plot:
        matplotlib.use("Agg")
        os.makedirs(output_dir, exist_ok=True)

        fig, ax = plt.subplots(1, 1, figsize=(8, 4))
        sns.lineplot(data=outcomes_df, x="step", y="occupancy", ax=ax)
        ax.axhline(capacity, color="k", linestyle="--", label="Capacity")
        ax.set_xlabel("Instruction")
        ax.set_ylabel("Planes on apron")
        ax.legend()

        path = os.path.join(output_dir, "apron_occupancy.png")
        fig.savefig(path, bbox_inches="tight")
        print(f"Saved occupancy plot to {path}")


if __name__ == "__main__":
    run()
