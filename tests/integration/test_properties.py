"""
Cross-module properties of the engine.

Validates:
    - Regression on a binary predictor and 2-group ANOVA give the same F
    - Correlation and regression agree on y = 2x + 3
    - Degenerate inputs to every test return well-formed results
    - Results are a pure function of their inputs, also across threads
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from statengine import anova_oneway, cor_test, describe, linear_regression, t_test


class TestRegressionAnovaIdentity:

    def test_binary_predictor_matches_anova(self, two_groups):
        group_a, group_b = two_groups
        x = [0.0] * len(group_a) + [1.0] * len(group_b)
        y = group_a + group_b

        reg = linear_regression(x, y)
        aov = anova_oneway({"A": group_a, "B": group_b})

        assert reg.f_statistic == pytest.approx(aov.f_statistic, rel=1e-10)
        assert reg.p_value == pytest.approx(aov.p_value, rel=1e-9, abs=1e-12)
        assert reg.r_squared == pytest.approx(aov.eta_squared, rel=1e-10)

    def test_unbalanced_binary_predictor(self, rng):
        a = rng.normal(3.0, 1.0, 7)
        b = rng.normal(4.0, 1.0, 12)
        reg = linear_regression(np.r_[np.zeros(7), np.ones(12)], np.r_[a, b])
        aov = anova_oneway([("a", a), ("b", b)])
        assert reg.f_statistic == pytest.approx(aov.f_statistic, rel=1e-10)
        assert reg.p_value == pytest.approx(aov.p_value, rel=1e-9, abs=1e-12)


class TestLinearIdentity:

    def test_correlation_and_r_squared_are_one(self):
        x = np.array([1.0, 4.0, 2.0, 8.0, 5.0, 7.0])
        y = 2 * x + 3
        assert cor_test(x, y).coefficient == pytest.approx(1.0, abs=1e-12)
        assert linear_regression(x, y).r_squared == pytest.approx(1.0, abs=1e-12)

    def test_r_squared_is_r_squared(self, rng):
        x = rng.normal(size=20)
        y = x + rng.normal(size=20)
        r = cor_test(x, y).coefficient
        assert linear_regression(x, y).r_squared == pytest.approx(r * r, rel=1e-10)


class TestDegenerateInputsNeverRaise:

    @pytest.mark.parametrize("call", [
        lambda: t_test([], []),
        lambda: anova_oneway([{"name": "a", "values": []}]),
        lambda: cor_test([1], [2]),
        lambda: linear_regression([1, 2], [3, 4]),
        lambda: t_test([0.1] * 3, [0.2] * 3),
        lambda: anova_oneway({"a": [0.1] * 3, "b": [0.3] * 3}),
        lambda: cor_test([1, 2, 3], [0.1] * 3),
        lambda: linear_regression([1, 2, 3], [0.2] * 3),
    ])
    def test_neutral_result(self, call):
        result = call()
        assert result.significant is False
        assert result.p_value == 1.0
        assert isinstance(result.to_dict(), dict)

    def test_describe_empty(self):
        assert describe([]).to_dict()["n"] == 0


class TestPurity:

    def test_repeated_calls_equal(self, two_groups):
        group_a, group_b = two_groups
        first = t_test(group_a, group_b)
        second = t_test(group_a, group_b)
        assert first._result == second._result

    def test_inputs_not_mutated(self):
        x = np.array([3.0, np.nan, 1.0, 2.0])
        before = x.copy()
        describe(x)
        cor_test(x, x[::-1])
        np.testing.assert_array_equal(x, before)

    def test_concurrent_calls_agree(self, rng):
        samples = [(rng.normal(size=8), rng.normal(1.0, size=9)) for _ in range(16)]
        serial = [t_test(x, y).to_dict() for x, y in samples]
        with ThreadPoolExecutor(max_workers=4) as pool:
            threaded = list(pool.map(lambda xy: t_test(*xy).to_dict(), samples))
        assert threaded == serial
