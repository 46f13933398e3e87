# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes.
'''


class NoElements(KeyError):
  '''
  Raised when an extremum is requested of a mapping or collection that has no elements.
  There is no valid result to return, so the failure is explicit rather than a default value.
  '''
