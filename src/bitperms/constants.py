"""Package-wide constants.

This module defines the limits shared by the store and its
configuration so they are computed in one place.
"""

import sys


# Flag slots addressable by a store unless configured otherwise
DEFAULT_FLAG_SPACE = 10

# Largest flag space a store accepts; larger requests are clamped
MAX_FLAG_SPACE = sys.maxsize

# Width of the host's native signed integer (64 on 64-bit hosts)
HOST_INT_BITS = sys.maxsize.bit_length() + 1

# Settings
ENV_PREFIX = "BITPERMS_"
