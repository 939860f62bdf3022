# tests/test_metrics.py
import math
import numpy as np
from wealth_metrics.inequality import gini, palma_ratio, tail_shares

def test_gini_known_values():
    assert gini(np.array([1.0, 1.0, 1.0])) == 0.0
    assert np.isclose(gini(np.array([0.0, 1.0])), 0.5)
    assert np.isclose(gini([1, 2, 3, 4, 5]), 0.267, atol=1e-3)

def test_gini_degenerate_inputs():
    assert gini([]) == 0.0
    assert gini(None) == 0.0
    assert gini([0, 0, 0]) == 0.0
    assert gini([100]) == 0.0
    assert np.isclose(gini([100, 100, 100, 100]), 0.0, atol=1e-12)

def test_gini_does_not_reorder_caller_list():
    vals = [5.0, 1.0, 4.0, 2.0]
    gini(vals)
    palma_ratio(vals)
    assert vals == [5.0, 1.0, 4.0, 2.0]

def test_gini_bounded_for_skewed_distribution():
    g = gini([0] * 99 + [1_000_000])
    assert 0.0 <= g <= 1.0
    assert np.isclose(g, 0.99)

def test_palma_one_to_ten():
    # bottom 4 sum to 10, top 1 is 10, total 55
    assert np.isclose(palma_ratio(list(range(1, 11))), 1.0)

def test_palma_degenerate_inputs():
    assert palma_ratio([]) == 0.0
    assert palma_ratio([0, 0, 0, 0, 0]) == 0.0

def test_palma_small_samples_use_empty_slices():
    # n=3: one value in the bottom 40%, none in the top 10%
    assert palma_ratio([1, 2, 3]) == 0.0
    # n=2: nobody in the bottom 40% -> undefined ratio
    assert math.isinf(palma_ratio([1, 2]))

def test_palma_infinite_when_bottom_holds_nothing():
    vals = [0] * 9 + [10]
    assert palma_ratio(vals) == math.inf

def test_tail_shares_one_to_ten():
    bottom, top = tail_shares(list(range(1, 11)))
    assert np.isclose(bottom, 10 / 55)
    assert np.isclose(top, 10 / 55)
    assert tail_shares([]) == (0.0, 0.0)
