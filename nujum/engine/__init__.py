"""Pure calculators built on the reference tables."""
