"""
Orchestration layer for command resolution.
"""
from .resolution_orchestrator import ResolutionOrchestrator

__all__ = ["ResolutionOrchestrator"]
