# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Numeric kinds.

A `NumKind` describes how the values of a keyed mapping add, compare and copy.
Fixed-width kinds wrap on overflow like two's-complement machine integers;
the arbitrary-precision kinds are exact.
'''

from abc import ABC, abstractmethod
from decimal import Context, Decimal, MAX_EMAX, MAX_PREC, MIN_EMIN
from typing import Any, Generic, TypeVar


_N = TypeVar('_N')


exact_ctx = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)
#^ Decimal addition under this context never rounds.


class NumKind(ABC, Generic[_N]):
  'The additive value capability: an add operation and an ordering over values of a single numeric type.'

  name:str

  @abstractmethod
  def add(self, a:_N, b:_N) -> _N: ...

  def lt(self, a:_N, b:_N) -> bool:
    return a < b # type: ignore[operator]

  def copy(self, v:_N) -> _N:
    'Return a value equal to `v` that shares no state with it.'
    return v

  def __repr__(self) -> str: return f'<NumKind {self.name}>'


class FixedInt(NumKind[int]):
  '''
  A signed integer kind of fixed bit width.
  Sums wrap into the range [-2**(bits-1), 2**(bits-1)); operands are not range checked.
  '''

  def __init__(self, bits:int) -> None:
    if bits < 1: raise ValueError(f'FixedInt bits must be positive; received: {bits}')
    self.bits = bits
    self.name = f'int{bits}'
    self._mod = 1 << bits
    self._half = 1 << (bits - 1)

  def add(self, a:int, b:int) -> int:
    return self.wrap(a + b)

  def wrap(self, v:int) -> int:
    'Reduce `v` to the signed range of this width.'
    return ((v + self._half) % self._mod) - self._half

  @property
  def min(self) -> int: return -self._half

  @property
  def max(self) -> int: return self._half - 1


class BigInt(NumKind[int]):
  name = 'bigint'

  def add(self, a:int, b:int) -> int:
    return a + b


class DecimalKind(NumKind[Decimal]):
  name = 'decimal'

  def add(self, a:Decimal, b:Decimal) -> Decimal:
    return exact_ctx.add(a, b)

  def copy(self, v:Decimal) -> Decimal:
    return Decimal(v)


INT32 = FixedInt(32)
INT64 = FixedInt(64)
BIG_INT = BigInt()
DECIMAL = DecimalKind()


def kind_for(value:Any) -> NumKind:
  '''
  Infer the kind of `value`: `Decimal` values are `DECIMAL`, ints are `BIG_INT`.
  Fixed-width kinds are never inferred; callers that want wrapping arithmetic must pass them explicitly.
  '''
  if isinstance(value, Decimal): return DECIMAL
  if isinstance(value, int): return BIG_INT
  raise TypeError(f'unsupported numeric type: {type(value).__name__}; value: {value!r}')
