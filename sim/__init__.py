"""Simulation infrastructure: dataset generation, metrics."""

from sim.metrics import SolveMetrics
from sim.generator import make_shares, tamper, generate_dataset
