from dataclasses import dataclass
from . import Model


@dataclass
class AppRole(Model):
    """A named access-control role of the generated application"""

    name: str
    display_name: str | None = None
    description: str | None = None
