"""Dependency detection abstraction.

Answers the two questions the precompile pipeline asks about the application:
whether the asset build step applies at all, and which libraries are bundled
(used to pick a placeholder database scheme).
"""

from abc import ABC, abstractmethod


class DependencyDetector(ABC):
    """Abstract read-only view of the application's dependencies."""

    @abstractmethod
    def is_bundled(self, name: str) -> bool:
        """Check whether a dependency is listed in the lockfile.

        Args:
            name: Dependency name (e.g., "pg")

        Returns:
            True if the dependency is locked
        """
        ...

    @abstractmethod
    def build_step_applies(self) -> bool:
        """Check whether the asset build step is defined for this application.

        Returns:
            True if precompilation should be attempted
        """
        ...
