# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .matrix import Matrix


def random_matrix(rows, columns, low=-10, high=10, seed=None) -> Matrix:
    """Matrix with entries drawn uniformly from [low, high)."""
    rng = np.random.default_rng(seed)
    return Matrix.from_numpy(rng.uniform(low, high, size=(rows, columns)))


def random_nonsingular_upper(n, low=-100, high=100, seed=None) -> Matrix:
    """
    Build a matrix U that is upper-triangular with random entries
    everywhere and put only non-zero values on its diagonal

    Returns
    -------
    Matrix
    """
    rng = np.random.default_rng(seed)
    U = rng.uniform(low, high, size=(n, n))
    # enforce upper-triangular
    U = np.triu(U)
    # keep the diagonal well away from zero
    diag = rng.uniform(1, high, size=n) * rng.choice([-1.0, 1.0], size=n)
    U[np.diag_indices(n)] = diag
    return Matrix.from_numpy(U)
