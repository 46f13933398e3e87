# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Fixed-width interval binning of decimal values.

Interval `i` is the half-open range [min + i*width, min + (i+1)*width).
The index of a value is computed by dividing its offset from `min` by `width` under a `decimal.Context`,
then truncating the rounded quotient toward zero.
Note that this is not floor division: values less than one width below `min` truncate to interval 0,
and a quotient that rounds up to an integer under the context lands in the higher interval.
Indices are unbounded Python ints; they do not wrap to 32 bits.
'''

from dataclasses import dataclass
from decimal import Context, Decimal, getcontext
from typing import Any, Mapping

from .accumulate import count_occurrence
from .kinds import exact_ctx


@dataclass(frozen=True)
class IntervalStats:
  '''
  The result of binning: three dicts keyed by interval index, with identical key sets, in ascending index order.
  `counts`: number of values in each interval.
  `labels`: '<interval min> - <interval max>' for each interval.
  `mins`: the lower bound of each interval.
  '''
  counts:dict[int,int]
  labels:dict[int,str]
  mins:dict[int,Decimal]


def interval_stats(min:Decimal, width:Decimal, values:Mapping[Any,Decimal], ctx:Context|None=None) -> IntervalStats:
  '''
  Bin the values of `values` into intervals of `width` starting at `min`.
  A width of zero places every value in interval 0.
  `ctx` controls the precision and rounding of the index division; it defaults to the current decimal context.
  '''
  counts:dict[int,int] = {}
  labels:dict[int,str] = {}
  mins:dict[int,Decimal] = {}
  for v in values.values():
    i = 0 if width == 0 else interval_index(min, width, v, ctx)
    count_occurrence(counts, i)
    if i not in labels:
      imin = interval_min(min, width, i)
      imax = interval_max(imin, width)
      labels[i] = f'{imin} - {imax}'
      mins[i] = imin
  order = sorted(counts)
  return IntervalStats(
    counts={i: counts[i] for i in order},
    labels={i: labels[i] for i in order},
    mins={i: mins[i] for i in order})


def interval_index(min:Decimal, width:Decimal, v:Decimal, ctx:Context|None=None) -> int:
  'Return `int((v - min) / width)`, where the subtraction is exact and the division is rounded by `ctx`.'
  if ctx is None: ctx = getcontext()
  return int(ctx.divide(exact_ctx.subtract(v, min), width))


def interval_min(min:Decimal, width:Decimal, i:int) -> Decimal:
  'Return the lower bound of interval `i`: `min + i*width`, computed exactly.'
  return exact_ctx.add(min, exact_ctx.multiply(Decimal(i), width))


def interval_max(imin:Decimal, width:Decimal) -> Decimal:
  'Return the upper bound of the interval starting at `imin`.'
  return exact_ctx.add(imin, width)
