from .selection import select_formula, SizingResult
from .liquid import size_liquid
from .gas import size_gas
from .steam import size_steam
