import jax

# reference comparisons against scipy need double precision
jax.config.update("jax_enable_x64", True)
