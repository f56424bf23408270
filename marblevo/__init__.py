"""
Marble Evolution

A marble is launched with a (power, angle) pair toward a goal; a genetic
algorithm evolves those pairs across generations.
"""

__version__ = "0.1.0"
