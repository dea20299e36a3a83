"""
Category style lookup tables

Maps notice categories, society categories and job placement-category
codes to badge styles. Unknown keys fall back to DEFAULT_CATEGORY_STYLE.
"""

from typing import Hashable, Mapping

DEFAULT_CATEGORY_STYLE = "bg-gray-100 text-gray-800 border-gray-200"

NOTICE_CATEGORY_STYLES = {
    "placement": "bg-blue-50 text-blue-700 border-blue-200",
    "shortlisting": "bg-green-50 text-green-700 border-green-200",
    "announcement": "bg-orange-50 text-orange-700 border-orange-200",
}

SOCIETY_CATEGORY_STYLES = {
    "Technical": "bg-blue-100 text-blue-800 border-blue-200",
    "Cultural": "bg-purple-100 text-purple-800 border-purple-200",
    "Sports": "bg-green-100 text-green-800 border-green-200",
    "Business": "bg-orange-100 text-orange-800 border-orange-200",
    "Literary": "bg-pink-100 text-pink-800 border-pink-200",
}

# Keyed by placement_category_code
JOB_CATEGORY_STYLES = {
    1: "bg-red-100 text-red-800 border-red-200",
    2: "bg-yellow-100 text-yellow-800 border-yellow-200",
    3: "bg-green-100 text-green-800 border-green-200",
    4: "bg-blue-100 text-blue-800 border-blue-200",
}


def category_style(table: Mapping[Hashable, str], category: Hashable) -> str:
    """Style for a category, DEFAULT_CATEGORY_STYLE when unknown"""
    return table.get(category, DEFAULT_CATEGORY_STYLE)
