"""
Load-policy limits for containers and ships.

Fractions and residues follow the fleet operating rules for each container
type. Product temperatures are the minimum safe storage temperature in °C.
"""

from __future__ import annotations

from typing import Dict, Tuple

# Container serial numbers: KON-<type code>-<sequence>
CONTAINER_ID_PREFIX = "KON"

# Liquid containers: hazardous cargo may fill half, other cargo 90%
LIQUID_HAZARDOUS_FILL_FRACTION = 0.5
LIQUID_SAFE_FILL_FRACTION = 0.9

# Gas containers keep 5% of their load after unloading (cannot be purged)
GAS_RESIDUE_FRACTION = 0.05

# Ship capacity is given in tonnes, loads are tracked in kg
KG_PER_TONNE = 1000.0

# Minimum storage temperature (°C) per refrigerated product
PRODUCT_MIN_TEMPERATURE_C: Dict[str, float] = {
    "Bananas": 10.0,
    "Sausages": 4.0,
    "FrozenFood": -18.0,
}

# Default (height_cm, depth_cm) per container type code
DEFAULT_DIMENSIONS_CM: Dict[str, Tuple[float, float]] = {
    "L": (250.0, 300.0),
    "G": (220.0, 280.0),
    "C": (270.0, 320.0),
}

# Prefix written before every hazard notification
ALERT_PREFIX = "ALERT: "

# Floating-point tolerance
EPS = 1e-9
