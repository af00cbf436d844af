"""Destiny 2 weapon perk modifiers, game enums and encounter power scaling."""

__version__ = "0.1.0"