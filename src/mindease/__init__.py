"""
MindEase - Wellness Chat Classification Core

This package provides the rule-based text classification pipeline
behind the MindEase wellness chat: emotion, sentiment, intent and
crisis severity detection, plus supportive response selection.

IMPORTANT: Crisis detection is safety-critical and runs entirely
on local rules. It never depends on network I/O.
"""

__version__ = "0.1.0"
__author__ = "MindEase Engineering Team"
