"""
Display formatting for package amounts and dates.
"""

from placement_stats.coreutils.time import format_date

__all__ = ["LAKH", "format_package", "format_date", "format_profiles"]

LAKH = 100_000


def format_package(amount: float) -> str:
    """
    Format an annual package in rupees

    Amounts of at least one lakh are shown in LPA with one decimal
    (1250000 -> '₹12.5 LPA'), smaller amounts as whole rupees with
    thousands separators (85000 -> '₹85,000').
    """
    if amount >= LAKH:
        return f"₹{amount / LAKH:.1f} LPA"
    return f"₹{amount:,.0f}"


def format_profiles(profiles) -> str:
    return ", ".join(profiles)
