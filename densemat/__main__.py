#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Demo driver: a matrix-vector product and an augmented-system reduction.

    python -m densemat [--decimals N] [--tolerance EPS] [-v]
"""

import argparse
import logging

from .formatting import DISPLAY_DECIMALS, format_matrix
from .matrix import Matrix
from .tolerance import DEFAULT_TOLERANCE, Tolerance
from .vector import Vector


def run_demo(decimals: int = DISPLAY_DECIMALS, tol: float = DEFAULT_TOLERANCE) -> str:
    t = Tolerance(tol)

    mat = Matrix(3, 3, [-3, -2, -4, 1, 1, 4, 4, 4, -4])
    vec = Vector(-2, -3, 3)
    product = mat.multiply(vec)

    mat1 = Matrix(4, 4, [1, 0, 0, 0, 3, 1, 0, 0, 4, 6, 1, 0, -9, 9, 3, 1])
    mat2 = Matrix(4, 3, [8, 6, -3, 0, 5, 3, 0, 0, 2, 0, 0, 0])
    vec1 = Vector(-17, -44, -28, 210)
    system = mat1.multiply(mat2).augment(vec1)
    system.rref(t)

    return (
        format_matrix(product.as_matrix(), decimals)
        + "\n\n"
        + format_matrix(system, decimals)
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run the densemat elimination demo and print the results."
    )
    parser.add_argument(
        "--decimals",
        type=int,
        default=DISPLAY_DECIMALS,
        help="Decimal places printed per entry",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=DEFAULT_TOLERANCE,
        help="Magnitude below which an entry counts as zero",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log elimination steps"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(run_demo(args.decimals, args.tolerance))


if __name__ == "__main__":
    main()
