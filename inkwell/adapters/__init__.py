"""Adapter package for external I/O implementations.

Purpose:
    Concrete implementations for domain ports: the host bridge (HTTP and
    headless), the workspace gateway on top of it, local JSON storage, the
    recent-files store, and the Tk folder picker.

Dependencies:
    ``bridge_http`` depends on ``requests``; ``folder_picker_tk`` on
    ``tkinter``. Everything else uses the standard library and domain ports.

Call context:
    Imported by app composition (``inkwell.app.services``) and by tests.
"""
