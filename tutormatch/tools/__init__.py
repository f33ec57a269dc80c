"""
Tools Package

Clients for external collaborators.

- tutor_store_client: tutors, subjects and weekly availability (httpx)
"""

from tutormatch.tools import tutor_store_client

__all__ = ["tutor_store_client"]
