from typing import Tuple, TypeAlias

City: TypeAlias = str
CityPath: TypeAlias = Tuple[City, ...]
Neighbor: TypeAlias = Tuple[City, float, float]
