"""GrowthStack: SIP, lumpsum and step-up investment projections."""

__version__ = "0.1.0"
