"""Orchestration services package."""

from mindease.services.orchestration.analysis_orchestrator import AnalysisOrchestrator

__all__ = ["AnalysisOrchestrator"]
