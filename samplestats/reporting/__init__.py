"""
samplestats.reporting
=====================

Reporters that run statistics over samples and lay the results out as
Polars DataFrames.
"""
