"""Perk registry, calculation inputs, modifier responses and perk definitions."""