"""Unit tests for npz persistence of solutions."""

from __future__ import annotations

import numpy as np

from growth_models.io.artifacts import load_vfi_results, save_vfi_results


def test_save_and_load(tmp_path):
    results = {
        "V": np.linspace(-3.0, 1.0, 5),
        "K": np.linspace(0.1, 1.0, 5),
        "policy_k_idx": np.array([0, 0, 1, 2, 3], dtype=np.int32),
        "n_iterations": 42,
        "converged": True,
        "discount_factor": 0.96,
    }
    target = tmp_path / "out" / "solution.npz"
    save_vfi_results(results, str(target))
    assert target.exists()

    loaded = load_vfi_results(str(target))
    assert set(loaded) == set(results)
    np.testing.assert_array_equal(loaded["V"], results["V"])
    np.testing.assert_array_equal(loaded["policy_k_idx"], results["policy_k_idx"])
    assert int(loaded["n_iterations"]) == 42
    assert bool(loaded["converged"])
    assert float(loaded["discount_factor"]) == 0.96
