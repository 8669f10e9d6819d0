"""Classify Ports (ABC).

Clean Architecture의 Port 정의.
Infrastructure 레이어에서 구현체를 제공.
"""

from ecosort.application.classify.ports.classifier_model import ClassifierModelPort

__all__ = ["ClassifierModelPort"]
