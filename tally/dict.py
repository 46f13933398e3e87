# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Hashable, MutableMapping, TypeVar


_K = TypeVar('_K', bound=Hashable)
_K2 = TypeVar('_K2', bound=Hashable)
_V = TypeVar('_V')
_VH = TypeVar('_VH', bound=Hashable)


def dict_set_add(d:MutableMapping[_K,set[_VH]], k:_K, el:_VH) -> None:
  '''
  Given a mutable mapping `d` of keys to sets of hashable elements,
  add `el` to the set at `k`, inserting a new set if the key is not present.
  '''
  try: s = d[k]
  except KeyError:
    s = set()
    d[k] = s
  s.add(el)


def dict_put_nested(d:MutableMapping[_K,dict[_K2,_V]], k:_K, k2:_K2, v:_V) -> None:
  'Put `v` at `k2` in the dict stored at `k`, inserting a new dict if the key is not present.'
  try: inner = d[k]
  except KeyError:
    inner = {}
    d[k] = inner
  inner[k2] = v


def dict_list_append_if_changed(d:MutableMapping[_K,list[_V]], k:_K, v:_V) -> None:
  '''
  Append `v` to the list stored at `k` unless it equals the last element of that list.
  If the key is not present, a new list containing `v` is inserted.
  '''
  try: l = d[k]
  except KeyError:
    d[k] = [v]
    return
  if not l or l[-1] != v:
    l.append(v)
