#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Static strings and constants used in the linalgebra package

    Root policies

        PROMOTE = 'promote'

        TRUNCATE = 'truncate'

        ROOT_POLICIES = (PROMOTE, TRUNCATE)

    Representation

        FRACTION = 'fraction'

        APPROXIMATE = 'approximate'

        QUAD_PRECISION_BITS = 113

        INT64_MIN = -2**63

        INT64_MAX = 2**63 - 1

        QUAD_MAX_EXPONENT = 16384

        QUAD_MIN_EXPONENT = -16494

    Printing

        DEFAULT_PRECISION = 6

        DEFAULT_VECTOR_CAPACITY = 16

        DEFAULT_MAX_DENOMINATOR = 100

    Keyword arguments

        PRECISION = 'precision'

        ROOT_POLICY = 'root_policy'
"""

import numpy as np

__all__ = [
    "PROMOTE",
    "TRUNCATE",
    "ROOT_POLICIES",
    "FRACTION",
    "APPROXIMATE",
    "QUAD_PRECISION_BITS",
    "QUAD_MAX_EXPONENT",
    "QUAD_MIN_EXPONENT",
    "INT64_MIN",
    "INT64_MAX",
    "DEFAULT_PRECISION",
    "DEFAULT_VECTOR_CAPACITY",
    "DEFAULT_MAX_DENOMINATOR",
    "PRECISION",
    "ROOT_POLICY",
]

# root policies
PROMOTE = 'promote'
TRUNCATE = 'truncate'
ROOT_POLICIES = (PROMOTE, TRUNCATE)

# representation
FRACTION = 'fraction'
APPROXIMATE = 'approximate'
QUAD_PRECISION_BITS = 113
INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)
# binary128 magnitudes lie in [2**QUAD_MIN_EXPONENT, 2**QUAD_MAX_EXPONENT)
QUAD_MAX_EXPONENT = 16384
QUAD_MIN_EXPONENT = -16494

# printing and storage
DEFAULT_PRECISION = 6
DEFAULT_VECTOR_CAPACITY = 16
DEFAULT_MAX_DENOMINATOR = 100

# keyword arguments
PRECISION = 'precision'
ROOT_POLICY = 'root_policy'
