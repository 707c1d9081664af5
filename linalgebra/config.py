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
"""Runtime settings of the linalgebra package

The root policy decides how sqrt, cbrt, pow and exp treat exact fractions:

    PROMOTE:  stay exact when the result is a fraction (perfect powers),
              otherwise compute the result as a quad precision approximation.

    TRUNCATE: apply the operation to numerator and denominator separately and
              truncate both results back to integers.

Example:
    with root_policy(TRUNCATE):
        r = ExactFraction(2, 1).sqrt()   # 1/1
"""

import logging
from .names import *

__all__ = [
    'get_root_policy',
    'set_root_policy',
    'get_default_precision',
    'set_default_precision',
    'resolve_root_policy',
    'root_policy',
]

LOG = logging.getLogger(__name__)

_settings = {ROOT_POLICY: PROMOTE, PRECISION: DEFAULT_PRECISION}


def get_root_policy() -> str:
    return _settings[ROOT_POLICY]


def set_root_policy(policy: str) -> str:
    """Set the process wide root policy and return the previous one."""
    if policy not in ROOT_POLICIES:
        raise ValueError(f"Unknown root policy '{policy}'. Use one of {ROOT_POLICIES}.")
    previous = _settings[ROOT_POLICY]
    _settings[ROOT_POLICY] = policy
    if policy != previous:
        LOG.debug("Root policy changed from %s to %s.", previous, policy)
    return previous


def get_default_precision() -> int:
    return _settings[PRECISION]


def set_default_precision(precision: int) -> int:
    """Set the number of decimal places used by str() and return the previous value."""
    if not isinstance(precision, int) or precision < 0:
        raise ValueError(f"Precision must be a non-negative integer, got {precision!r}.")
    previous = _settings[PRECISION]
    _settings[PRECISION] = precision
    return previous


def resolve_root_policy(policy=None) -> str:
    if policy is None:
        return get_root_policy()
    if policy not in ROOT_POLICIES:
        raise ValueError(f"Unknown root policy '{policy}'. Use one of {ROOT_POLICIES}.")
    return policy


class root_policy():
    """Environment in which a different root policy is active"""

    def __init__(self, policy: str):
        resolve_root_policy(policy)
        self.policy = policy
        self.previous = None

    def __enter__(self):
        self.previous = set_root_policy(self.policy)
        return self

    def __exit__(self, exit_type, exit_value, exit_traceback):
        set_root_policy(self.previous)
