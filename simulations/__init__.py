# simulations/__init__.py
"""
Monte Carlo experiments for the repeated balls-into-bins process.

Run the full sweep via:
    python -m simulations.sweep

Plot a smaller sweep via:
    python -m simulations.plot --bins ... --rounds ... --repetitions ...
"""
