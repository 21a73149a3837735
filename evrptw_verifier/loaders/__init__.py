from .schneider import load_instance, parse_instance
from .solution import load_solution, parse_solution, parse_route
