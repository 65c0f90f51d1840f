from .destination_normalizer import DestinationNormalizer
from .stop_id_resolver import StopIdResolver
from .legend_resolver import LegendResolver
from .departure_parser import DepartureParser

__all__ = [
    "DestinationNormalizer",
    "StopIdResolver",
    "LegendResolver",
    "DepartureParser",
]
