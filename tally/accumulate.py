# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Accumulation of numeric values into keyed mappings.

Each function mutates the mapping `d` and returns the value stored at `k` afterwards.
A key that is missing or maps to None is initialized with the incoming value.
The `kind` parameter selects the arithmetic; when omitted it is inferred from the value already stored, so the mapping's own kind decides.
'''

from typing import Hashable, MutableMapping, TypeVar

from .kinds import BIG_INT, kind_for, NumKind


_K = TypeVar('_K', bound=Hashable)
_N = TypeVar('_N')


def accumulate(d:MutableMapping[_K,_N], k:_K, delta:_N, kind:NumKind|None=None) -> _N:
  '''
  Add `delta` to the value at `k`, or store `delta` if there is no value.
  Fixed-width kinds wrap on overflow.
  '''
  current = d.get(k)
  if current is None:
    d[k] = delta
    return delta
  if kind is None: kind = kind_for(current)
  r = kind.add(current, delta)
  d[k] = r
  return r


def count_occurrence(d:MutableMapping[_K,int], k:_K, kind:NumKind=BIG_INT) -> int:
  'Increment the count at `k` by one, initializing it to one.'
  return accumulate(d, k, 1, kind)


def set_if_greater(d:MutableMapping[_K,_N], k:_K, v:_N, kind:NumKind|None=None) -> _N:
  'Set the value at `k` to the max of the current value and `v`. Equal values are not rewritten.'
  current = d.get(k)
  if current is None:
    d[k] = v
    return v
  if kind is None: kind = kind_for(current)
  if kind.lt(current, v):
    d[k] = v
    return v
  return current


def set_if_lesser(d:MutableMapping[_K,_N], k:_K, v:_N, kind:NumKind|None=None) -> _N:
  'Set the value at `k` to the min of the current value and `v`. Equal values are not rewritten.'
  current = d.get(k)
  if current is None:
    d[k] = v
    return v
  if kind is None: kind = kind_for(current)
  if kind.lt(v, current):
    d[k] = v
    return v
  return current
