# Import order is registration order
from . import singleton  # noqa: F401
from . import static_factory_method  # noqa: F401
from . import factory_method  # noqa: F401
from . import abstract_factory  # noqa: F401
from . import builder  # noqa: F401
from . import prototype  # noqa: F401
