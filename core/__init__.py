"""Core primitives: exact rationals, base decoding, elimination, polynomials."""

from core.errors import (ReconstructionError, DivisionByZero, InvalidBase,
                         InvalidDigit, InsufficientPoints, SingularSystem)
from core.rational import Rational
from core.radix import decode, encode
from core.linear_system import LinearSystem
from core.elimination import solve
from core.polynomial import Polynomial, evaluate, check_all
from core.reconstruction import select_points, reconstruct, find_inconsistent
from core import rng
