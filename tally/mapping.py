# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Mapping utilities: copying, extremes, and ordering by value.
'''

from dataclasses import dataclass
from typing import Any, Generic, Hashable, Mapping, TypeVar

from .default import Absent
from .exceptions import NoElements
from .kinds import kind_for, NumKind
from .types import Comparable


_K = TypeVar('_K', bound=Hashable)
_V = TypeVar('_V')
_C = TypeVar('_C', bound=Comparable)
_D = TypeVar('_D')


@dataclass(frozen=True)
class Extent(Generic[_C]):
  min:_C
  max:_C


def deep_copy(d:Mapping[_K,_V], kind:NumKind|None=None) -> dict[_K,_V]:
  '''
  Return a new dict with the items of `d`, each value copied by its kind.
  Entries of the result can be replaced without affecting `d`.
  '''
  r:dict[_K,_V] = {}
  for k, v in d.items():
    if v is None: r[k] = v
    elif kind is None: r[k] = kind_for(v).copy(v)
    else: r[k] = kind.copy(v)
  return r


def min_max(d:Mapping[Any,_C]) -> Extent[_C]:
  'Return the min and max values of `d` in a single scan. Raises `NoElements` if `d` is empty.'
  it = iter(d.values())
  try: first = next(it)
  except StopIteration: raise NoElements(d) from None
  l = first
  h = first
  for v in it:
    if v < l: l = v
    if h < v: h = v
  return Extent(min=l, max=h)


def order_by_value(d:Mapping[_K,_C]) -> dict[_K,_C]:
  '''
  Return a new dict with the items of `d` ordered by ascending value.
  The sort is stable: items with equal values keep their relative order in `d`.
  '''
  return dict(sorted(d.items(), key=lambda item: item[1]))


def key_for_value(d:Mapping[_K,Any], value:Any) -> _K|Absent:
  '''
  Return the first key of `d`, in iteration order, whose value equals `value`, or `Absent._` if there is none.
  When several keys map to equal values, the one returned depends on the iteration order of `d`.
  '''
  for k, v in d.items():
    if v == value: return k
  return Absent._


def max_key(d:Mapping[_C,Any], default:_D) -> _C|_D:
  'Return the greatest key of `d`, or `default` if `d` is empty.'
  return max(d, default=default)


def min_key(d:Mapping[_C,Any], default:_D) -> _C|_D:
  'Return the least key of `d`, or `default` if `d` is empty.'
  return min(d, default=default)


def max_value(d:Mapping[Any,_C], initial:_C) -> _C:
  'Return the greatest of `initial` and the values of `d`.'
  r = initial
  for v in d.values():
    if r < v: r = v
  return r


def min_value(d:Mapping[Any,_C], initial:_C) -> _C:
  'Return the least of `initial` and the values of `d`.'
  r = initial
  for v in d.values():
    if v < r: r = v
  return r
