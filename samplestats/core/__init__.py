"""
samplestats.core
================

Typed names shared by the statistics and reporting layers.
"""
