"""Classify Commands - 스캔 오케스트레이션.

Application Layer에서 유스케이스 조합 담당.
"""

from ecosort.application.classify.commands.scan_orchestrator import ScanOrchestrator

__all__ = ["ScanOrchestrator"]
