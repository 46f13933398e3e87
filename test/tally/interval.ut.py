# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from decimal import Context, Decimal as D, ROUND_DOWN, ROUND_HALF_UP

from tally.interval import interval_index, interval_max, interval_min, interval_stats, IntervalStats
from utest import utest, utest_items, utest_val


utest(IntervalStats(counts={}, labels={}, mins={}), interval_stats, D('0'), D('1'), {})

utest(IntervalStats(
    counts={0: 1, 1: 1, 2: 1},
    labels={0: '0.0 - 1.0', 1: '1.0 - 2.0', 2: '2.0 - 3.0'},
    mins={0: D('0.0'), 1: D('1.0'), 2: D('2.0')}),
  interval_stats, D('0.0'), D('1.0'), {'a': D('0.5'), 'b': D('1.5'), 'c': D('2.9')})

# A value on a boundary belongs to the higher interval.
utest(IntervalStats(
    counts={1: 2, 2: 1},
    labels={1: '1.0 - 2.0', 2: '2.0 - 3.0'},
    mins={1: D('1.0'), 2: D('2.0')}),
  interval_stats, D('0.0'), D('1.0'), {'a': D('1.0'), 'b': D('1.5'), 'c': D('2.9')})

utest(3, interval_index, D('0'), D('0.1'), D('0.3'))
utest(2, interval_index, D('0'), D('0.1'), D('0.2999'))
utest(0, interval_index, D('10'), D('2.5'), D('10'))
utest(1, interval_index, D('10'), D('2.5'), D('12.5'))

# The quotient is rounded by the context before truncation.
utest(2, interval_index, D('0'), D('1'), D('2.99'))
utest(3, interval_index, D('0'), D('1'), D('2.99'), Context(prec=2, rounding=ROUND_HALF_UP))
utest(2, interval_index, D('0'), D('1'), D('2.99'), Context(prec=2, rounding=ROUND_DOWN))

# The binning entry point forwards its context to the index division.
utest(IntervalStats(counts={2: 1}, labels={2: '2 - 3'}, mins={2: D('2')}),
  interval_stats, D('0'), D('1'), {'a': D('2.99')})
utest(IntervalStats(counts={3: 1}, labels={3: '3 - 4'}, mins={3: D('3')}),
  interval_stats, D('0'), D('1'), {'a': D('2.99')}, Context(prec=2, rounding=ROUND_HALF_UP))
utest(IntervalStats(counts={2: 1}, labels={2: '2 - 3'}, mins={2: D('2')}),
  interval_stats, D('0'), D('1'), {'a': D('2.99')}, ctx=Context(prec=2, rounding=ROUND_DOWN))

# Truncation is toward zero.
utest(-1, interval_index, D('0'), D('1'), D('-1'))
utest(-1, interval_index, D('0'), D('1'), D('-1.5'))
utest(0, interval_index, D('0'), D('1'), D('-0.5'))

utest(D('17.5'), interval_min, D('10'), D('2.5'), 3)
utest(D('5'), interval_min, D('10'), D('2.5'), -2)
utest(D('20.0'), interval_max, D('17.5'), D('2.5'))


stats = interval_stats(D('0'), D('1'), {'p': D('-1.5'), 'q': D('0.25')})
utest_val({-1: 1, 0: 1}, stats.counts)
utest_val({-1: '-1 - 0', 0: '0 - 1'}, stats.labels)

stats = interval_stats(D('10'), D('2.5'), {'x': D('12')})
utest_val({0: '10.0 - 12.5'}, stats.labels)
utest_val({0: D('10')}, stats.mins)


# Zero width places every value in interval 0.
values = {i: D(i) * D('1.7') for i in range(-5, 6)}
stats = interval_stats(D('0'), D('0'), values)
utest_val({0: len(values)}, stats.counts)
utest_val([0], list(stats.labels))
utest_val([0], list(stats.mins))


# Results iterate in ascending interval order regardless of input order.
def interval_counts(min, width, values):
  return interval_stats(min, width, values).counts

def interval_labels(min, width, values):
  return interval_stats(min, width, values).labels

unordered = {'c': D('2.5'), 'a': D('0.5'), 'd': D('2.1'), 'b': D('1.5')}
utest_items([(0, 1), (1, 1), (2, 2)], interval_counts, D('0'), D('1'), unordered)
utest_items([(0, '0 - 1'), (1, '1 - 2'), (2, '2 - 3')], interval_labels, D('0'), D('1'), unordered)


values = {i: D(i * 7 % 23) / D(4) for i in range(100)}
stats = interval_stats(D('0.5'), D('0.75'), values)
utest_val(len(values), sum(stats.counts.values()), 'counts sum to the number of values')
utest_val(stats.counts.keys(), stats.labels.keys(), 'labels share the keys of counts')
utest_val(stats.counts.keys(), stats.mins.keys(), 'mins share the keys of counts')
