"""Domain policies package."""

from .ratio_guidance import describe_burn_rate, describe_savings_ratio

__all__ = ["describe_burn_rate", "describe_savings_ratio"]
