# Import the pattern catalog.
# This registers every demonstration in the process-wide registry.

from . import creational
from . import structural
