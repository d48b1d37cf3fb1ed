# beer_api/models/__init__.py
from .beer import Beer, BeerStyle

# Export all models
__all__ = [
    "Beer",
    "BeerStyle",
]
