#!/usr/bin/env python3
"""
knapsack-evo: genetic search for the 0/1 knapsack problem

Main entry point for solving a knapsack instance from a source checkout.

Usage:
    python run_solver.py --instance p08
    python run_solver.py --instance config/instances/small.yaml --seed 42 --output-dir outputs/
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from knapsack_evo.cli import main


if __name__ == "__main__":
    sys.exit(main())
