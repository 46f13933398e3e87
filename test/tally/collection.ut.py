# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from decimal import Decimal as D

from tally.collection import contains_value, max_of, min_of
from tally.exceptions import NoElements
from utest import utest, utest_exc


values = [D('1.5'), D('-2'), D('10.25'), D('0')]

utest(D('10.25'), max_of, values)
utest(D('-2'), min_of, values)
utest(D('3'), max_of, {D('3')})
utest(D('2'), min_of, (v for v in [D('2'), D('4')]))
utest_exc(NoElements, max_of, [])
utest_exc(NoElements, min_of, set())

utest(True, contains_value, values, D('0'))
utest(True, contains_value, values, D('1.50'))
utest(False, contains_value, values, D('1.51'))
utest(False, contains_value, [], D('0'))
