"""Guidance messages for the savings ratio and burn rate."""

from decimal import Decimal


def describe_savings_ratio(ratio: Decimal) -> str:
    """Return guidance for a savings ratio expressed in percent."""
    if ratio >= 20:
        return (
            "Excellent! You're saving a healthy portion of your income. "
            "This puts you in a strong position for financial goals."
        )
    if ratio >= 10:
        return (
            "Good start! You're saving a reasonable amount. Consider "
            "gradually increasing to 20% or more for stronger financial "
            "health."
        )
    if ratio > 0:
        return (
            "You're saving something, which is great! Try to gradually "
            "increase to at least 10-20% of your income for better "
            "financial security."
        )
    return (
        "No savings detected yet. Consider allocating at least 10-20% of "
        "your income to savings for financial stability."
    )


def describe_burn_rate(rate: Decimal) -> str:
    """Return guidance for a burn rate expressed in percent."""
    if rate <= 50:
        return (
            "Excellent! You're living well below your means with strong "
            "financial flexibility."
        )
    if rate <= 70:
        return "Good! You have a healthy balance between spending and saving."
    if rate <= 85:
        return (
            "Your expenses are taking up most of your income. Consider ways "
            "to reduce spending or increase income."
        )
    return (
        "High burn rate - most of your income goes to expenses. Focus on "
        "reducing costs or increasing income to improve financial health."
    )


__all__ = ["describe_savings_ratio", "describe_burn_rate"]
