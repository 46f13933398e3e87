# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from enum import Enum
from typing import final


@final
class Absent(Enum):
  '''
  Singleton class and value returned by lookups that find nothing,
  for cases where None is a meaningful result (e.g. a mapping key).
  For example: `def key_for_value(d, value) -> _K|Absent: ...`
  Test for it by identity: `if k is Absent._: ...`.
  '''
  _ = 0
