import numpy as np


def random_init(data, n_units):
    """
    Draw codebook vectors uniformly within the bounding box of the data
    """
    rng = np.random.default_rng(0)
    low, high = data.min(axis=0), data.max(axis=0)
    return rng.uniform(low, high, size=(n_units, data.shape[1]))


if __name__ == "__main__":

    import jax.numpy as jnp
    import som

    map_config = som.MapConfig(
        dims=(8, 6), grid="planar", init_func=random_init, unit_shape="hexagon"
    )
    train_config = som.TrainConfig(
        method="batch",
        radius=2.0,
        radius_decay="exp",
        neighb_fn="gaussian",
        learning_rate=0.5,
        learning_rate_decay="lin",
    )

    try:
        som.validate_map_config(map_config)
        som.validate_train_config(train_config)
    except som.ConfigError as err:
        raise SystemExit("invalid config [{}]: {}".format(err.kind.value, err))

    # build the grid and neighbourhood of the unit in the middle of the map
    coords = som.resolve(som.GRID_COORDS, map_config.grid)(
        map_config.dims, map_config.unit_shape
    )
    dist = som.grid_distances(coords)
    centre = coords.shape[0] // 2
    neighb = som.resolve(som.NEIGHBOURHOODS, train_config.neighb_fn)
    weights = neighb(dist[centre], train_config.radius)

    data = np.random.default_rng(1).normal(size=(200, 3))
    codebook = map_config.init_func(data, coords.shape[0])

    print("units: {}".format(coords.shape[0]))
    print("codebook shape: {}".format(codebook.shape))
    print("units within radius: {}".format(int(jnp.sum(dist[centre] <= train_config.radius))))
    print("max neighbour weight: {:3.3f}".format(float(jnp.max(weights))))

    # a typo in the training method is caught before any training starts
    try:
        som.validate_train_config(train_config._replace(method="online"))
    except som.ConfigError as err:
        print("rejected: {} ({})".format(err.kind.value, err.detail))
