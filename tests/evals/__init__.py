"""
EVALs Suite for PyEquilibrium - Stress Tests at the Edges of the Closed Form

Philosophy:
    These tests push the solvers toward ill-conditioned matrices, extreme
    scales and inputs mutated after construction. They document where the
    closed-form solution stays exact and where it must fail loudly.

Run tests:
    pytest tests/evals/ -v                    # Run all evals
    pytest tests/ --ignore=tests/evals/      # Run regular tests only
"""
