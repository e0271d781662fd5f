"""Random test-data strings and the modifiers that make them messy.

The package is split into small layers:

* :mod:`datagen.strings` builds random strings from a vocabulary and a length
  specification.
* :mod:`datagen.modify` perturbs an already generated string.
* :mod:`datagen.config` holds the typed configuration (special symbols,
  default lengths, batch sizes).
* :mod:`datagen.testing` feeds generated strings into pytest tests.
* :mod:`datagen.cli` exposes the generators on the command line.
"""

from .strings import LengthSpec, RandomString
from .utils.errors import InvalidArgument

__all__ = ["InvalidArgument", "LengthSpec", "RandomString"]
