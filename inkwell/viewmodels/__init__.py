"""ViewModel package for UI state and command surfaces.

Call context:
    ``inkwell.app.editor_controller`` updates these models after use cases
    complete; views read them through the ``on_changed`` callback.

Dependencies:
    Domain value types only. I/O adapters and use-case orchestration remain
    outside.
"""
