import jax.numpy as jnp

# mean Earth radius (km)
EARTH_RADIUS_KM = 6371.0088


def pairwise_distances(lat, lon, metric: str = "euclidean"):
    """
    lat, lon: (N,)
    metric: "euclidean" (planar, coordinate units) or "haversine" (great-circle, km)
    return: (N,N), symmetric with an exact zero diagonal
    """
    lat = jnp.asarray(lat)
    lon = jnp.asarray(lon)

    if metric == "euclidean":
        X = jnp.stack([lat, lon], axis=-1)
        diff = X[:, None, :] - X[None, :, :]
        return jnp.sqrt(jnp.sum(diff * diff, axis=-1))

    if metric == "haversine":
        phi = jnp.deg2rad(lat)
        lam = jnp.deg2rad(lon)
        dphi = phi[:, None] - phi[None, :]
        dlam = lam[:, None] - lam[None, :]
        h = (
            jnp.sin(0.5 * dphi) ** 2
            + jnp.cos(phi)[:, None] * jnp.cos(phi)[None, :] * jnp.sin(0.5 * dlam) ** 2
        )
        h = jnp.clip(h, 0.0, 1.0)
        return 2.0 * EARTH_RADIUS_KM * jnp.arcsin(jnp.sqrt(h))

    raise ValueError(f"Unknown metric: {metric}. Use 'euclidean' or 'haversine'")
