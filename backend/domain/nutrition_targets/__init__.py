"""Nutrition targets domain.

Pure computation of daily calorie and macronutrient targets from a
biometric profile. No I/O, no framework dependencies.
"""
