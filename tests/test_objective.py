import jax
import jax.numpy as jnp
import numpy as np
import pytest

from spatial_cpue_jax.core import CPUEParams, make_data
from spatial_cpue_jax.energy import (
    CPUESpatialObjective,
    ModelCFG,
    evaluate,
    mvn_neg_log_density,
    value_and_grad,
)
from spatial_cpue_jax.kernels import exponential_covariance
from spatial_cpue_jax.likelihoods import log_density_invgauss, log_density_lognormal
from spatial_cpue_jax.predictor import linear_predictor


LAT = jnp.array([0.0, 0.5, 1.3, 2.0, 2.2])
LON = jnp.array([1.0, 0.2, 0.9, 1.7, 0.4])


def _params(**kw):
    defaults = dict(
        intercept=0.4,
        theta=-0.3,
        beta_lat=0.2,
        beta_lon=-0.1,
        logsigma=-0.2,
        logsigma_space=-0.5,
        a=0.8,
        u=[0.1, -0.3, 0.2, 0.0, 0.5],
    )
    defaults.update(kw)
    return CPUEParams.init(5, **defaults)


def test_transforms_in_range():
    for theta in [-30.0, -2.0, 0.0, 3.0, 30.0]:
        p = _params(theta=theta, logsigma=theta / 10, logsigma_space=-theta / 10)
        assert 0.0 < float(p.zero_prob) < 1.0
        assert float(p.zero_prob) == pytest.approx(1.0 / (1.0 + np.exp(-theta)))
        assert float(p.sigma) > 0.0
        assert float(p.sigma_space) > 0.0


def test_linear_predictor():
    p = _params()
    pred = linear_predictor(p, LAT, LON)
    expected = 0.4 + 0.2 * LAT - 0.1 * LON + np.exp(-0.5) * p.u
    np.testing.assert_allclose(np.asarray(pred), np.asarray(expected), rtol=1e-12)


@pytest.mark.parametrize("flag", [1, 2])
def test_all_zero_catches(flag):
    data = make_data(jnp.zeros(5), LAT, LON)
    p = _params()
    nll = CPUESpatialObjective(ModelCFG(likelihood=flag))(p, data)
    spatial = mvn_neg_log_density(p.u, exponential_covariance(data.dd, p.a))
    expected = 5 * (-np.log(float(p.zero_prob))) + float(spatial)
    assert float(nll) == pytest.approx(expected, rel=1e-12)


def test_all_positive_catches_invgauss():
    y = jnp.array([0.3, 1.2, 2.5, 0.9, 4.0])
    data = make_data(y, LAT, LON)
    p = _params()
    nll = CPUESpatialObjective(ModelCFG(likelihood=1))(p, data)

    pred = linear_predictor(p, LAT, LON)
    kernel = -jnp.sum(log_density_invgauss(y, jnp.exp(pred), p.sigma))
    spatial = mvn_neg_log_density(p.u, exponential_covariance(data.dd, p.a))
    expected = 5 * (-np.log(1.0 - float(p.zero_prob))) + float(kernel) + float(spatial)
    assert float(nll) == pytest.approx(expected, rel=1e-12)


def test_all_positive_catches_lognormal():
    y = jnp.array([0.3, 1.2, 2.5, 0.9, 4.0])
    data = make_data(y, LAT, LON)
    p = _params()
    nll = CPUESpatialObjective(ModelCFG(likelihood="lognormal"))(p, data)

    pred = linear_predictor(p, LAT, LON)
    kernel = -jnp.sum(log_density_lognormal(y, pred, p.sigma))
    spatial = mvn_neg_log_density(p.u, exponential_covariance(data.dd, p.a))
    expected = 5 * (-np.log(1.0 - float(p.zero_prob))) + float(kernel) + float(spatial)
    assert float(nll) == pytest.approx(expected, rel=1e-12)


def test_mixed_catches_sum_per_observation():
    y = np.array([0.0, 1.2, 0.0, 0.9, 4.0])
    data = make_data(y, LAT, LON)
    p = _params()
    nll = CPUESpatialObjective(ModelCFG(likelihood=2))(p, data)

    pred = np.asarray(linear_predictor(p, LAT, LON))
    zp = float(p.zero_prob)
    sigma = float(p.sigma)
    total = float(mvn_neg_log_density(p.u, exponential_covariance(data.dd, p.a)))
    for yi, fi in zip(y, pred):
        if yi == 0:
            total -= np.log(zp)
        else:
            total -= np.log(1 - zp)
            total -= float(log_density_lognormal(yi, fi, sigma))
    assert float(nll) == pytest.approx(total, rel=1e-12)


def test_report_is_pass_through():
    y = jnp.array([0.0, 1.2, 0.0, 0.9, 4.0])
    data = make_data(y, LAT, LON)
    p = _params()
    nll, report = evaluate(p, data, ModelCFG(likelihood=1))

    assert float(report.zero_prob) == pytest.approx(float(p.zero_prob))
    assert float(report.sigma) == pytest.approx(np.exp(-0.2))
    assert float(report.sigma_space) == pytest.approx(np.exp(-0.5))
    np.testing.assert_array_equal(np.asarray(report.u), np.asarray(p.u))
    np.testing.assert_allclose(np.asarray(report.pred), np.asarray(linear_predictor(p, LAT, LON)))
    np.testing.assert_allclose(
        np.asarray(report.cov), np.asarray(exponential_covariance(data.dd, p.a))
    )
    assert report.cov.shape == (5, 5)
    assert float(nll) == pytest.approx(float(report.spatial_nll + report.observation_nll))
    assert float(nll) == pytest.approx(float(CPUESpatialObjective(ModelCFG(likelihood=1))(p, data)))


@pytest.mark.parametrize("flag", [1, 2])
def test_value_and_grad_matches_finite_differences(flag):
    y = jnp.array([0.0, 1.2, 0.0, 0.9, 4.0])
    data = make_data(y, LAT, LON)
    p = _params()
    objective = CPUESpatialObjective(ModelCFG(likelihood=flag))

    val, grads = value_and_grad(objective)(p, data)
    assert float(val) == pytest.approx(float(objective(p, data)))

    v = p.to_vector()
    g = np.asarray(grads.to_vector())
    assert np.all(np.isfinite(g))

    eps = 1e-6
    for k in range(v.shape[0]):
        e = jnp.zeros_like(v).at[k].set(eps)
        up = objective(CPUEParams.from_vector(v + e), data)
        down = objective(CPUEParams.from_vector(v - e), data)
        fd = (float(up) - float(down)) / (2 * eps)
        assert g[k] == pytest.approx(fd, rel=1e-5, abs=1e-6)


def test_zero_catches_do_not_leak_nan_into_gradients():
    # a huge predictor would overflow exp() if the kernel saw the zero rows
    p = _params(intercept=800.0, beta_lat=0.0, beta_lon=0.0, logsigma_space=-50.0)
    objective = CPUESpatialObjective(ModelCFG(likelihood=1))

    all_zero = make_data(jnp.zeros(5), LAT, LON)
    grads = jax.grad(objective)(p, all_zero)
    assert np.all(np.isfinite(np.asarray(grads.to_vector())))
    assert float(grads.intercept) == 0.0


def test_objective_is_pure():
    y = jnp.array([0.0, 1.2, 0.0, 0.9, 4.0])
    data = make_data(y, LAT, LON)
    p = _params()
    objective = CPUESpatialObjective(ModelCFG(likelihood=2))
    first = objective(p, data)
    second = jax.jit(objective)(p, data)
    assert float(first) == pytest.approx(float(second), rel=1e-12)
