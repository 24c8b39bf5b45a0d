"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Think of it as a contract:
- Domain says: "I need to save DM channels"
- Infrastructure implements: "I'll use Firestore"

Subfolders:
- repositories/   → Data persistence interfaces
- observability.py → Event and error reporting
"""

from src.domain.ports.observability import NullObservability, ObservabilityPort

__all__ = ["ObservabilityPort", "NullObservability"]
