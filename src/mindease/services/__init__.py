"""
MindEase services.

- lexicon: phrase tables and text normalization
- detection: severity, emotion, sentiment and intent classifiers
- safety: crisis detection and helpline resources
- response: templated reply selection
- orchestration: chat turn entry point
"""
