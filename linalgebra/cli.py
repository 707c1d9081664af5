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
"""Command line demonstration of the linalgebra package"""

from argparse import ArgumentParser
from argparse import RawDescriptionHelpFormatter
import logging
import sys

from .names import *
from .config import root_policy
from .realnum import Approximation, ExactFraction
from .vector import Vector

LOG = logging.getLogger(__name__)


def main(precision: int = 3, writer=None):
    """
    Print the sample computations: two vectors, their sum and difference, the
    first vector scaled, divided and normalized, and the sum 1/3 + 1/3 before
    and after simplification.

    :param precision: decimal places of approximate values
    :param writer: text stream to print to (default: sys.stdout)
    :return: None
    """
    writer = writer or sys.stdout
    u = Vector.new(3, 1.0, 2.0, 3.0)
    v = Vector.new(3, 4.0, 5.0, 6.0)
    two = Approximation(2.0)
    LOG.info("Computing sample vectors with %d decimal places.", precision)

    results = [u, v, u + v, u - v, u * two, u / two, u.normalize()]
    for result in results:
        writer.write(result.format(precision) + "\n")

    third = ExactFraction(1, 3)
    total = third + third
    writer.write(total.format() + "\n")
    writer.write(total.fracsimp().format_as_fraction() + "\n")


def start_from_command_line(argv=None):
    """
    Entry point for the linalgebra demonstration. Parses the command line,
    configures logging and calls main.

    :return: exit code
    """
    usage = '''usage: linalgebra-demo [--precision <digits>] [--root-policy promote|truncate] [-v]'''
    parser = ArgumentParser(prog='linalgebra-demo',
                            description='Print sample vector and fraction computations\n'
                            'carried out with exact and quad precision real numbers.',
                            epilog=usage,
                            formatter_class=RawDescriptionHelpFormatter)
    parser.add_argument("-p", "--precision", type=int, default=3, help="decimal places of approximate values")
    parser.add_argument("--root-policy",
                        choices=ROOT_POLICIES,
                        default=PROMOTE,
                        help="treatment of roots and powers of exact fractions")
    parser.add_argument("-v", "--verbose", action='store_true', help="print debug messages")
    args = parser.parse_args(argv)
    if args.precision < 0:
        parser.error("--precision must be non-negative")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    with root_policy(args.root_policy):
        main(args.precision)
    return 0


if __name__ == '__main__':
    sys.exit(start_from_command_line())
