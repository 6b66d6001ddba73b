"""Конфигурационные модули."""

from .circuit_config import CircuitConfig
from .verifier_config import VerifierConfig
from .tutor_config import TutorConfig

__all__ = ["CircuitConfig", "VerifierConfig", "TutorConfig"]
