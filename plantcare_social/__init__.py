# 📄 File: plantcare_social/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this folder holds the Plant Care social backend and records its version.
#
# 🧪 Purpose (Technical Summary):
# Package initialization with version metadata for the plant care social API.

"""
Plant Care Social Backend

Posts, likes and comments, direct messages, the follow graph, AI plant-care
chat and realtime notification delivery for the plant care mobile app.
"""

__version__ = "1.0.0"
__title__ = "Plant Care Social API"
__description__ = "Social and realtime notification backend for the Plant Care app"
__author__ = "Plant Care Team"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
]
