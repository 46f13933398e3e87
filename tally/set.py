# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Set algebra between pairs of sets.

The functions compare a reference set `s0` with another set `s1`.
Following established usage, the elements common to both are called the "union" in function names,
and "overlap" in result fields.
None of the functions modify their arguments.
'''

from dataclasses import dataclass
from typing import AbstractSet, Generic, Hashable, TypeVar


_T = TypeVar('_T', bound=Hashable)


@dataclass(frozen=True)
class OverlapCounts:
  overlap:int # Elements of `s1` that are also in `s0`.
  unique_to_s1:int # Elements of `s1` not in `s0`.
  unique_to_s0:int # Elements of `s0` not in `s1`.


@dataclass(frozen=True)
class OverlapAndCounts(Generic[_T]):
  overlap:set[_T]
  counts:OverlapCounts


@dataclass(frozen=True)
class OverlapAndUniques(Generic[_T]):
  overlap:set[_T]
  unique_to_s1:set[_T]
  unique_to_s0:set[_T]


def union_counts(s0:AbstractSet[_T], s1:AbstractSet[_T]) -> OverlapCounts:
  '''
  Count the elements of `s1` that are in `s0`;
  the counts unique to each set are derived from the set sizes.
  '''
  overlap = 0
  for el in s1:
    if el in s0: overlap += 1
  return OverlapCounts(overlap=overlap, unique_to_s1=len(s1) - overlap, unique_to_s0=len(s0) - overlap)


def union_and_counts(s0:AbstractSet[_T], s1:AbstractSet[_T]) -> OverlapAndCounts[_T]:
  'Return the elements common to both sets, and the counts of `union_counts`.'
  overlap = {el for el in s1 if el in s0}
  n = len(overlap)
  return OverlapAndCounts(
    overlap=overlap,
    counts=OverlapCounts(overlap=n, unique_to_s1=len(s1) - n, unique_to_s0=len(s0) - n))


def union_and_uniques(s0:AbstractSet[_T], s1:AbstractSet[_T]) -> OverlapAndUniques[_T]:
  'Return new sets of the common elements, the elements only in `s1`, and the elements only in `s0`.'
  return OverlapAndUniques(
    overlap={el for el in s1 if el in s0},
    unique_to_s1={el for el in s1 if el not in s0},
    unique_to_s0={el for el in s0 if el not in s1})


def combined_key_set(s0:AbstractSet[_T], s1:AbstractSet[_T]) -> set[_T]:
  'Return a new set containing the elements of both sets.'
  r = set(s0)
  r.update(s1)
  return r
