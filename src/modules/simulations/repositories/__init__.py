"""Simulation repositories package."""

from modules.simulations.repositories.django_repository import SimulationDjangoRepository
from modules.simulations.repositories.interfaces import ISimulationRepository

__all__ = ["ISimulationRepository", "SimulationDjangoRepository"]
