from .inertia import Inertia
from .spring import Spring
from .easing import ease_out

__all__ = ["Inertia", "Spring", "ease_out"]
