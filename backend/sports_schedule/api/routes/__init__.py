"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Mutating routes depend on require_admin; reads are public
"""
