"""dicepool - dice, dice pools and NdM notation for tabletop simulation."""

__version__ = "0.1.0"
