# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from tally.dict import dict_list_append_if_changed, dict_put_nested, dict_set_add
from utest import utest


def dict_set_add_test(d, k, el):
  dict_set_add(d, k, el)
  return d

utest({'k': {1}}, dict_set_add_test, {}, 'k', 1)
utest({'k': {1, 2}}, dict_set_add_test, {'k': {1}}, 'k', 2)
utest({'k': {1}}, dict_set_add_test, {'k': {1}}, 'k', 1)


def dict_put_nested_test(d, k, k2, v):
  dict_put_nested(d, k, k2, v)
  return d

utest({'k': {'a': 0}}, dict_put_nested_test, {}, 'k', 'a', 0)
utest({'k': {'a': 0, 'b': 1}}, dict_put_nested_test, {'k': {'a': 0}}, 'k', 'b', 1)
utest({'k': {'a': 2}}, dict_put_nested_test, {'k': {'a': 0}}, 'k', 'a', 2)


def dict_list_append_if_changed_test(d, k, vs):
  for v in vs:
    dict_list_append_if_changed(d, k, v)
  return d

utest({'k': [0]}, dict_list_append_if_changed_test, {}, 'k', [0])
utest({'k': [0, 1, 0]}, dict_list_append_if_changed_test, {}, 'k', [0, 0, 1, 1, 1, 0])
utest({'k': [2]}, dict_list_append_if_changed_test, {'k': []}, 'k', [2, 2])
