"""Precision setting shared by every vsop87jax computation.

vsop87jax evaluates in ``jnp.float64`` unless told otherwise.  The VSOP87D
series carry amplitudes down to ~1e-11 and Julian Day values sit near
2.4e6, neither of which survives single precision, so JAX's 64-bit mode
(``jax_enable_x64``) is switched on as soon as this module is imported.

``set_dtype`` lowers (or restores) the working precision.  The choice is
read with ``get_dtype()`` at trace time, so change it before compiling
anything with ``jax.jit``; a jitted function keeps the dtype it was traced
with until its inputs change dtype and force a retrace.

The coefficient tables are stored as float64 ``numpy`` arrays whatever the
setting and are cast to the working dtype when a series is evaluated.
"""

from __future__ import annotations

import logging

import jax
import jax.numpy as jnp

logger = logging.getLogger(__name__)

# Supported working dtypes, keyed by the names accepted by ``set_dtype``
_DTYPES = {
    "float16": jnp.float16,
    "bfloat16": jnp.bfloat16,
    "float32": jnp.float32,
    "float64": jnp.float64,
}

jax.config.update("jax_enable_x64", True)

_dtype = jnp.float64


def _resolve(dtype):
    if isinstance(dtype, str):
        if dtype in _DTYPES:
            return _DTYPES[dtype]
    else:
        for candidate in _DTYPES.values():
            if dtype == candidate:
                return candidate
    raise ValueError(
        f"Unsupported dtype {dtype!r}. Must be one of: "
        + ", ".join(f"jnp.{name}" for name in _DTYPES)
        + " (or the same names as strings)"
    )


def set_dtype(dtype) -> None:
    """Select the working float dtype.

    Args:
        dtype: ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32`` or
            ``jnp.float64``, or the name of one of them (``"float32"``).

    Raises:
        ValueError: If *dtype* is not one of the supported float types.

    Examples:
        ```python
        import jax.numpy as jnp
        from vsop87jax import set_dtype, get_dtype
        set_dtype("float32")
        get_dtype()  # jnp.float32
        set_dtype(jnp.float64)
        ```
    """
    global _dtype
    resolved = _resolve(dtype)
    if resolved is jnp.float64:
        # Someone may have turned x64 off after import
        jax.config.update("jax_enable_x64", True)
    if resolved is not _dtype:
        logger.debug("Working dtype changed from %s to %s", _dtype.__name__, resolved.__name__)
    _dtype = resolved


def get_dtype():
    """Return the working float dtype (``jnp.float64`` unless changed)."""
    return _dtype
