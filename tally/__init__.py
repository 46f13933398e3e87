# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Tally is a small library for accumulating keyed numeric values, binning decimals into fixed-width intervals,
and comparing pairs of sets.
'''
