"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services)
    - Handlers are `async def` and call the synchronous core inline, so store
      operations run one at a time on the event loop
"""
