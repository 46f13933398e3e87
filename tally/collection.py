# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Reductions over collections of values.
'''

from typing import Any, Iterable, TypeVar

from .exceptions import NoElements
from .types import Comparable


_C = TypeVar('_C', bound=Comparable)


def max_of(c:Iterable[_C]) -> _C:
  'Return the greatest element of `c`. Raises `NoElements` if `c` is empty.'
  it = iter(c)
  try: r = next(it)
  except StopIteration: raise NoElements(c) from None
  for el in it:
    if r < el: r = el
  return r


def min_of(c:Iterable[_C]) -> _C:
  'Return the least element of `c`. Raises `NoElements` if `c` is empty.'
  it = iter(c)
  try: r = next(it)
  except StopIteration: raise NoElements(c) from None
  for el in it:
    if el < r: r = el
  return r


def contains_value(c:Iterable[Any], v:Any) -> bool:
  '''
  Test whether any element of `c` equals `v`.
  Decimals compare numerically, so `Decimal('2.0')` matches `Decimal('2.00')`.
  '''
  return any(el == v for el in c)
