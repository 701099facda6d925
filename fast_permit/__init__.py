"""
fast-permit - declarative field validation and strong parameters for records

Record types declare once which validators apply to which fields; call sites
choose per operation which fields are permitted from a payload, which must be
present and which declared validators run:

    class User(Record):
        name: str = None

        class Meta:
            validates = [Record.Validates("name", {"validate_length": {"min": 1, "max": 20}})]

    draft = permit(User(), {"name": "Al", "admin": True}, ["name"])
    draft.valid     # True
    draft.changes   # {"name": "Al"}
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"
__url__ = "https://github.com/patrikmojzis/fast-permit"

from .app_provider import boot
from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .decorators import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
