"""Local train pass module."""
from .models import Passenger
from .generator import PassGenerator, generate_local_pass

__all__ = ["Passenger", "PassGenerator", "generate_local_pass"]
