"""
Assessment Engine - AI Interview Assessment

Turns interview configurations into questions, candidate answers into
structured scores and feedback, and whole sessions into hiring
recommendations, absorbing completion-service failures along the way.
"""

__version__ = "0.1.0"
__author__ = "Assessment Engine Team"
