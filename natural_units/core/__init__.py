"""Core calculation modules for Natural Units.

This package contains the conversion machinery:
- dimension: Dimension and UnitSystem tags
- factor: ConversionFactor derivation and apply/invert
- presets: Reference factors out of CGS
- config: Factor definition persistence (JSON)
"""
