from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from .errors import ErrorKind


@dataclass(frozen=True)
class IsPointFixture:
    P: bytes
    expected: bool
    description: str = ""


@dataclass(frozen=True)
class PointAddFixture:
    P: bytes
    Q: bytes
    expected: Optional[bytes] = None
    exception: Optional[ErrorKind] = None
    description: str = ""


@dataclass(frozen=True)
class PointAddScalarFixture:
    P: bytes
    d: bytes
    expected: Optional[bytes] = None
    exception: Optional[ErrorKind] = None
    description: str = ""


@dataclass(frozen=True)
class PointFromScalarFixture:
    d: bytes
    expected: Optional[bytes] = None
    exception: Optional[ErrorKind] = None
    description: str = ""


@dataclass(frozen=True)
class PointCompressFixture:
    P: bytes
    compress: bool
    expected: Optional[bytes]


@dataclass(frozen=True)
class SignFixture:
    d: bytes
    m: bytes
    signature: bytes
    verifies: bool = True
    description: str = ""


@dataclass(frozen=True)
class BadSignFixture:
    d: bytes
    m: bytes
    exception: ErrorKind
    description: str = ""


@dataclass(frozen=True)
class BadVerifyFixture:
    Q: bytes
    m: bytes
    signature: bytes
    exception: ErrorKind
    description: str = ""


class PointVectors(NamedTuple):
    encoding: object
    is_point: Tuple[IsPointFixture, ...]
    point_add: Tuple[PointAddFixture, ...]
    point_add_invalid: Tuple[PointAddFixture, ...]
    point_add_scalar: Tuple[PointAddScalarFixture, ...]
    point_add_scalar_invalid: Tuple[PointAddScalarFixture, ...]
    point_from_scalar: Tuple[PointFromScalarFixture, ...]
    point_from_scalar_invalid: Tuple[PointFromScalarFixture, ...]


class SignatureVectors(NamedTuple):
    sign: Tuple[SignFixture, ...]
    sign_invalid: Tuple[BadSignFixture, ...]
    verify_invalid: Tuple[BadVerifyFixture, ...]
