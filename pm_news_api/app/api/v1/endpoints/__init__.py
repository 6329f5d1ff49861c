"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one collection; ``router.py``
mounts them under their URL prefixes.
"""
