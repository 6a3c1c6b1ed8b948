import jax.numpy as jnp
import numpy as np
import pytest

from spatial_cpue_jax import CPUEParams, evaluate, ModelCFG, simulate


def _grid(n_side=4):
    g = np.linspace(0.0, 3.0, n_side)
    lat, lon = np.meshgrid(g, g)
    return lat.ravel(), lon.ravel()


@pytest.mark.parametrize("flag", [1, 2])
def test_simulated_data_respects_contract(flag):
    lat, lon = _grid()
    params = CPUEParams.init(lat.size, theta=0.0, logsigma=0.5, a=1.0)
    data, truth = simulate(lat, lon, params, likelihood=flag, seed=3)

    data.validate()
    y = np.asarray(data.y)
    assert y.shape == (16,)
    assert np.all(y >= 0)
    assert truth.u.shape == (16,)

    nll, report = evaluate(truth, data, ModelCFG(likelihood=flag))
    assert np.isfinite(float(nll))


def test_zero_probability_controls_zeros():
    lat, lon = _grid(6)
    mostly_zero = CPUEParams.init(lat.size, theta=6.0)
    mostly_positive = CPUEParams.init(lat.size, theta=-6.0)

    data_z, _ = simulate(lat, lon, mostly_zero, seed=0)
    data_p, _ = simulate(lat, lon, mostly_positive, seed=0)

    assert np.mean(np.asarray(data_z.y) == 0) > 0.9
    assert np.mean(np.asarray(data_p.y) > 0) > 0.9


def test_fixed_field_is_used():
    lat, lon = _grid()
    u = np.linspace(-1.0, 1.0, lat.size)
    _, truth = simulate(lat, lon, CPUEParams.init(lat.size), u=u, seed=1)
    np.testing.assert_allclose(np.asarray(truth.u), u)
    assert jnp.asarray(truth.u).dtype == jnp.asarray(truth.a).dtype
