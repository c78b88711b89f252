"""Testing fakes – in-memory doubles for security ports."""
from secure_catalog.testing.fakes.access_manager import FakeResourceAccessManager

__all__ = ["FakeResourceAccessManager"]
