"""
Category - enumerated tag attached to every board post.
"""

from enum import Enum


class Category(str, Enum):
    FREE = "FREE"
    REVIEW = "REVIEW"
    QUESTION = "QUESTION"
    TIP = "TIP"
