"""tonal_tokens.core: Generation layer.

Contains the OKLCH adapter, shade scales, contrast resolver, token mapper,
override pipeline and the auxiliary validators (gamut, colour blindness,
reference tone system). Everything here is a pure function of its inputs:
no filesystem, no environment variables, no printing.
This module has NO dependencies on tonal_tokens.exporters or tonal_tokens.registry.
Only stdlib, numpy and coloraide are allowed here.
"""
