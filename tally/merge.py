# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Merging of keyed numeric mappings.
'''

from typing import Hashable, Mapping, MutableMapping, TypeVar

from .accumulate import accumulate
from .kinds import NumKind
from .mapping import deep_copy


_K = TypeVar('_K', bound=Hashable)
_N = TypeVar('_N')


def merge_into(dst:MutableMapping[_K,_N], src:Mapping[_K,_N], kind:NumKind|None=None) -> None:
  '''
  Accumulate each value of `src` into `dst`, modifying `dst` in place.
  Keys of `dst` that are not in `src` are left unchanged.
  '''
  for k, v in src.items():
    accumulate(dst, k, v, kind)


def merge(a:Mapping[_K,_N], b:Mapping[_K,_N], kind:NumKind|None=None) -> dict[_K,_N]:
  'Return a new dict holding the per-key sums of `a` and `b`. Neither argument is modified.'
  r = deep_copy(a, kind)
  merge_into(r, b, kind)
  return r
