# Import order is registration order
from . import adapter  # noqa: F401
from . import bridge  # noqa: F401
from . import decorator  # noqa: F401
from . import operator_overloading  # noqa: F401
