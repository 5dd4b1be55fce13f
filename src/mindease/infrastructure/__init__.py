"""
MindEase Infrastructure Layer

Remote enrichment clients, metrics and error tracking.
"""
