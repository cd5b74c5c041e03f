# License validation
from maillic.licenser.application.licenser import Licenser as Licenser

__all__ = ["Licenser"]
